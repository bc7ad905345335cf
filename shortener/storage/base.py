"""Abstract base class for URL shortener storage implementations."""

from abc import ABC, abstractmethod
from typing import Optional


class URLStorageBase(ABC):
    """Abstract base class for short code -> URL storage."""

    @abstractmethod
    def put(self, original_url: str) -> str:
        """Store a URL under a newly generated short code.

        Args:
            original_url: The original long URL

        Returns:
            The complete short URL (prefix + short code)

        Raises:
            ValueError: If the URL is empty
        """
        pass

    @abstractmethod
    def get(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The original URL if found, None otherwise
        """
        pass

    @abstractmethod
    def remove_prefix(self, short_url: str) -> str:
        """Strip the storage prefix from a short URL."""
        pass

    @property
    @abstractmethod
    def short_url_length(self) -> int:
        """Length of generated short codes."""
        pass

    def close(self) -> None:
        """Release storage resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
