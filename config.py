"""Configuration management for URL shortener."""

import argparse
from typing import List, Optional, Tuple
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    server_address: str = Field(
        default=":8080",
        description="Address to listen on as host:port (empty host binds all interfaces)"
    )

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:8080/",
        description="Prefix for generated short URLs"
    )

    file_storage_path: Optional[str] = Field(
        default=None,
        description="JSON-lines file for persisting mappings (memory only if not set)"
    )

    short_code_length: int = Field(
        default=8,
        ge=1,
        description="Length of generated short codes"
    )

    gzip_minimum_size: int = Field(
        default=1400,
        ge=0,
        description="Minimum response size in bytes before gzip compression applies"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    def bind_address(self) -> Tuple[str, int]:
        """Split server_address into (host, port).

        Raises:
            ValueError: If the port is missing or not a number
        """
        host, sep, port = self.server_address.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"Invalid server address: {self.server_address!r}")
        return host or "0.0.0.0", int(port)


def build_parser() -> argparse.ArgumentParser:
    """Command-line flags; each overrides its environment variable."""
    parser = argparse.ArgumentParser(description="URL shortener service")
    parser.add_argument("-a", dest="server_address", help="address of server (SERVER_ADDRESS)")
    parser.add_argument("-b", dest="base_url", help="short URL prefix (BASE_URL)")
    parser.add_argument("-f", dest="file_storage_path", help="file storage path (FILE_STORAGE_PATH)")
    return parser


def load_config(argv: Optional[List[str]] = None) -> Config:
    """Load configuration from environment, then apply command-line flags.

    Args:
        argv: Arguments to parse; None reads nothing from the command line
    """
    overrides = {}
    if argv is not None:
        args = build_parser().parse_args(argv)
        overrides = {k: v for k, v in vars(args).items() if v is not None}
    return Config(**overrides)
