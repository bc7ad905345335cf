"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortener.shortcode import ShortCodeGenerator
from shortener.storage import MemoryURLStorage
from shortener.common.logging_config import setup_logging
from web_app import create_app


TEST_BASE_URL = "http://testserver/"


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=8)


@pytest.fixture
def storage(short_code_generator, logger):
    """Create in-memory storage instance."""
    storage = MemoryURLStorage(
        TEST_BASE_URL,
        short_code_generator=short_code_generator,
        logger=logger.getChild("storage"),
    )
    yield storage
    storage.close()


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(base_url=TEST_BASE_URL)


@pytest.fixture
def app(storage, config):
    """Create test FastAPI app."""
    return create_app(storage=storage, config=config)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
