"""Flat-file implementation of URL shortener storage.

Mappings are kept in memory and appended to a JSON-lines file, one
record per line:

    {"uuid": "1", "short_url": "AbCdEfGh", "original_url": "https://..."}

The file is replayed when the storage is opened. Writes are flushed but
not fsynced.
"""

import json
import logging
import os
import threading
from typing import Optional

from ..shortcode import ShortCodeGenerator
from .memory import MemoryURLStorage
from .models import URLRecord


class FileURLStorage(MemoryURLStorage):
    """Memory storage that appends every new mapping to a file."""

    def __init__(
        self,
        prefix: str,
        file_path: str,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Open storage backed by ``file_path``.

        Args:
            prefix: Public base URL for short links
            file_path: JSON-lines file; created along with its directory if missing
            short_code_generator: Optional short code generator
            logger: Optional logger
        """
        super().__init__(prefix, short_code_generator=short_code_generator, logger=logger)
        self.file_path = file_path
        self._file_lock = threading.Lock()
        # Number of records in the file; the next record gets _sequence + 1
        self._sequence = 0

        directory = os.path.dirname(os.path.abspath(file_path))
        os.makedirs(directory, exist_ok=True)

        self._load()
        self._file = open(file_path, "a", encoding="utf-8")

    def _load(self) -> None:
        """Replay records from the file into memory."""
        if not os.path.exists(self.file_path):
            self.logger.info(f"Storage file {self.file_path} does not exist, starting empty")
            return

        loaded = 0
        with open(self.file_path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                self._sequence += 1
                try:
                    record = URLRecord.from_dict(json.loads(line))
                except (ValueError, KeyError, TypeError) as e:
                    self.logger.warning(f"Skipping malformed record at {self.file_path}:{lineno}: {e}")
                    continue
                self._data[record.short_code] = record.original_url
                loaded += 1

        self.logger.info(f"Loaded {loaded} URL mappings from {self.file_path}")

    def put(self, original_url: str) -> str:
        """Store a URL and append it to the file.

        Raises:
            ValueError: If the URL is empty or the record could not be written
            RuntimeError: If the storage has been closed
        """
        if self._file is None:
            raise RuntimeError("Storage is closed")
        return super().put(original_url)

    def _persist(self, short_code: str, original_url: str) -> None:
        """Append one record; its uuid is its position among the file's records."""
        with self._file_lock:
            if self._file is None:
                raise RuntimeError("Storage is closed")
            record = URLRecord(
                uuid=str(self._sequence + 1),
                short_code=short_code,
                original_url=original_url,
            )
            self._file.write(json.dumps(record.to_dict()) + "\n")
            self._file.flush()
            self._sequence += 1

    def close(self) -> None:
        """Close the underlying file."""
        with self._file_lock:
            if self._file is not None:
                self._file.close()
                self._file = None
                self.logger.debug(f"Closed storage file {self.file_path}")
