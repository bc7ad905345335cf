"""Data models for URL shortener storage."""

from dataclasses import dataclass


@dataclass
class URLRecord:
    """Represents one persisted URL mapping."""

    uuid: str
    short_code: str
    original_url: str

    def to_dict(self) -> dict:
        """Convert to dictionary (file line layout)."""
        return {
            "uuid": self.uuid,
            "short_url": self.short_code,
            "original_url": self.original_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "URLRecord":
        """Create from dictionary.

        Raises:
            TypeError: If data is not a dictionary or a field is not a string
            KeyError: If a required field is missing
            ValueError: If a required field is empty
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        fields = {}
        for key in ("short_url", "original_url"):
            value = data[key]
            if not isinstance(value, str):
                raise TypeError(f"Field {key!r} must be a string")
            if not value:
                raise ValueError(f"Field {key!r} is empty")
            fields[key] = value

        return cls(
            uuid=str(data.get("uuid", "")),
            short_code=fields["short_url"],
            original_url=fields["original_url"],
        )
