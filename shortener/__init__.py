"""Core logic for URL shortener."""

from .shortcode import ShortCodeGenerator, make_random_string
from .storage import URLStorageBase, MemoryURLStorage, FileURLStorage, create_storage

__all__ = [
    "ShortCodeGenerator",
    "make_random_string",
    "URLStorageBase",
    "MemoryURLStorage",
    "FileURLStorage",
    "create_storage",
]
