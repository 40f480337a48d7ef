# File: tests/conftest.py
from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from aiohttp import web

from pagepipe.config import DiscoveryConfig
from pagepipe.crawler.models import PageData
from pagepipe.logger import configure


@pytest.fixture(autouse=True)
def quiet_logging():
    """
    Keep the project logger on a live stream between tests.
    CLI tests re-point it at CliRunner's temporary stderr.
    """
    configure(level="WARNING")
    yield
    configure(level="WARNING")


@pytest.fixture()
def basic_config() -> DiscoveryConfig:
    """
    Return a DiscoveryConfig with short timeouts and no retry delay.
    """
    return DiscoveryConfig(
        max_pages=100,
        sitemap_timeout=2.0,
        fetch_timeout=2.0,
        user_agent="TestAgent/1.0",
        retry_times=0,
        retry_backoff=0.01,
    )


@pytest.fixture()
def mock_page_data() -> PageData:
    """
    Provide a simple PageData instance with HTML content.
    """
    html = (
        '<html><body><a href="/link1">L1</a><a href="http://external.com">X</a>'
        '<a href="mailto:info@example.com">Mail</a></body></html>'
    )
    return PageData(url="http://example.com/", content=html, status=200)


@pytest_asyncio.fixture
async def serve_app(
    unused_tcp_port_factory: Callable[[], int],
) -> AsyncIterator[Callable[[web.Application], Awaitable[str]]]:
    """Start aiohttp apps on free ports; yields a starter returning the base URL."""
    runners: list[web.AppRunner] = []

    async def _serve(app: web.Application) -> str:
        port = unused_tcp_port_factory()
        runner = web.AppRunner(app)
        await runner.setup()
        runners.append(runner)
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        return f"http://127.0.0.1:{port}"

    try:
        yield _serve
    finally:
        for runner in runners:
            await runner.cleanup()
