"""Common utilities for URL shortener."""

from .url_builder import normalize_base_url, build_short_url, strip_prefix
from .logging_config import setup_logging

__all__ = [
    "normalize_base_url",
    "build_short_url",
    "strip_prefix",
    "setup_logging",
]
