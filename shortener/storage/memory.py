"""In-memory implementation of URL shortener storage."""

import logging
import threading
from typing import Dict, Optional

from ..shortcode import ShortCodeGenerator
from ..common.url_builder import normalize_base_url, build_short_url, strip_prefix
from .base import URLStorageBase


class MemoryURLStorage(URLStorageBase):
    """Dictionary-backed storage guarded by a single lock for inserts."""

    def __init__(
        self,
        prefix: str,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize storage.

        Args:
            prefix: Public base URL for short links; a trailing slash is added if missing
            short_code_generator: Optional short code generator (8 letters by default)
            logger: Optional logger
        """
        self.prefix = normalize_base_url(prefix)
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger("url_shortener.storage")
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def put(self, original_url: str) -> str:
        """Store a URL under a fresh short code and return the short URL.

        Raises:
            ValueError: If the URL is empty or the mapping could not be persisted
        """
        if not original_url:
            raise ValueError("URL is required")

        with self._lock:
            short_code = self._generate_unique_short_code()
            self._data[short_code] = original_url

        try:
            self._persist(short_code, original_url)
        except (OSError, RuntimeError) as e:
            # Roll back so the code never resolves without a stored record
            with self._lock:
                self._data.pop(short_code, None)
            self.logger.error(f"Failed to persist short URL {short_code}: {e}")
            raise ValueError(f"Failed to persist short URL: {e}") from e

        self.logger.debug(f"Created short URL: {short_code} -> {original_url}")
        return build_short_url(short_code, self.prefix)

    def get(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code, or None."""
        original_url = self._data.get(short_code)
        if original_url is None:
            self.logger.debug(f"Short code not found: {short_code}")
        return original_url

    def remove_prefix(self, short_url: str) -> str:
        return strip_prefix(short_url, self.prefix)

    @property
    def short_url_length(self) -> int:
        return self.generator.default_length

    def __len__(self) -> int:
        return len(self._data)

    def _generate_unique_short_code(self) -> str:
        """Draw random codes until one is not taken. Caller holds the lock."""
        attempts = 1
        code = self.generator.generate_random()
        while code in self._data:
            attempts += 1
            code = self.generator.generate_random()
        if attempts > 1:
            self.logger.debug(f"Generated code after {attempts} attempts: {code}")
        return code

    def _persist(self, short_code: str, original_url: str) -> None:
        """Hook for durable implementations; runs outside the insert lock."""
