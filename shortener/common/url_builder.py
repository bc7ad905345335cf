"""URL building utilities for URL shortener."""


def normalize_base_url(base_url: str) -> str:
    """Return base URL ending with exactly one slash.

    Args:
        base_url: Public base URL (e.g., http://localhost:8080)

    Returns:
        Prefix for short URLs (e.g., http://localhost:8080/)
    """
    return base_url.rstrip("/") + "/"


def build_short_url(short_code: str, prefix: str) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        prefix: Normalized prefix (see normalize_base_url)

    Returns:
        Complete short URL
    """
    return f"{prefix}{short_code}"


def strip_prefix(url: str, prefix: str) -> str:
    """Strip prefix from a short URL, leaving the short code.

    URLs that do not start with the prefix are returned unchanged.
    """
    if prefix and url.startswith(prefix):
        return url[len(prefix):]
    return url
