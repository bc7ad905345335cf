"""Storage layer for URL shortener."""

from typing import Optional
import logging

from ..shortcode import ShortCodeGenerator
from .base import URLStorageBase
from .memory import MemoryURLStorage
from .file import FileURLStorage
from .models import URLRecord


def create_storage(
    prefix: str,
    file_path: Optional[str] = None,
    short_code_length: int = 8,
    logger: Optional[logging.Logger] = None,
) -> URLStorageBase:
    """Create file-backed storage when a path is given, memory storage otherwise."""
    generator = ShortCodeGenerator(default_length=short_code_length)
    if file_path:
        return FileURLStorage(prefix, file_path, short_code_generator=generator, logger=logger)
    return MemoryURLStorage(prefix, short_code_generator=generator, logger=logger)


__all__ = [
    "URLStorageBase",
    "MemoryURLStorage",
    "FileURLStorage",
    "URLRecord",
    "create_storage",
]
