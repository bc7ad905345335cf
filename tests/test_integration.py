"""Integration tests for URL shortener."""

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortener.storage import create_storage
from shortener.common.logging_config import setup_logging
from web_app import create_app
from web_app.app_factory import lifespan


BASE_URL = "http://short.test"


@pytest.mark.asyncio
class TestIntegration:
    """End-to-end integration tests."""

    async def test_file_backed_lifecycle(self, tmp_path):
        """Links created before a restart still redirect afterwards."""
        logger = setup_logging(level="DEBUG")
        path = str(tmp_path / "short-url-db.json")
        config = Config(base_url=BASE_URL, file_storage_path=path)

        storage = create_storage(
            prefix=config.base_url,
            file_path=config.file_storage_path,
            logger=logger.getChild("storage"),
        )
        app = create_app(storage=storage, config=config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            plain = await client.post("/", content="https://example.com/plain")
            api = await client.post("/api/shorten", json={"url": "https://example.com/api"})

        assert plain.status_code == 201
        assert api.status_code == 201
        plain_code = storage.remove_prefix(plain.text)
        api_code = storage.remove_prefix(api.json()["result"])

        async with lifespan(app):
            pass

        # Restart on the same file
        storage = create_storage(prefix=config.base_url, file_path=config.file_storage_path)
        app = create_app(storage=storage, config=config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            first = await client.get(f"/{plain_code}", follow_redirects=False)
            second = await client.get(f"/{api_code}", follow_redirects=False)
            missing = await client.get("/ZZZZZZZZ", follow_redirects=False)

        assert first.headers["location"] == "https://example.com/plain"
        assert second.headers["location"] == "https://example.com/api"
        assert missing.status_code == 400

        storage.close()

    async def test_lifespan_closes_storage(self, tmp_path):
        """Storage rejects writes once the app has shut down."""
        config = Config(base_url=BASE_URL)
        storage = create_storage(prefix=BASE_URL, file_path=str(tmp_path / "urls.json"))
        app = create_app(storage=storage, config=config)

        async with lifespan(app):
            storage.put("https://example.com")

        with pytest.raises(RuntimeError):
            storage.put("https://example.com/after")
