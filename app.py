#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Usage:
    python app.py [-a ADDRESS] [-b BASE_URL] [-f FILE_STORAGE_PATH]

Environment variables (overridden by the flags above):
    SERVER_ADDRESS - host:port to listen on (default :8080)
    BASE_URL - Prefix for short links (default http://localhost:8080/)
    FILE_STORAGE_PATH - JSON-lines file for mappings (memory only if unset)
    LOG_LEVEL - Logging level
"""

import signal
import sys

import uvicorn

from config import load_config
from shortener.storage import create_storage
from shortener.common.logging_config import setup_logging
from web_app import create_app


def main(argv=None):
    """Main entry point."""
    config = load_config(sys.argv[1:] if argv is None else argv)

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    try:
        host, port = config.bind_address()
    except ValueError as e:
        logger.error(str(e))
        sys.exit(2)

    storage = create_storage(
        prefix=config.base_url,
        file_path=config.file_storage_path,
        short_code_length=config.short_code_length,
        logger=logger.getChild("storage"),
    )

    app = create_app(storage=storage, config=config)

    uvicorn_config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {host}:{port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
