# File: tests/test_fetcher.py
from __future__ import annotations

import asyncio

import pytest
from aiohttp import ClientSession, web

from pagepipe.crawler.fetcher import ACCEPT_HEADER, Fetcher, PageFetcher
from pagepipe.errors import FetchError


async def fetch_one(config, url: str):
    async with ClientSession() as session:
        return await Fetcher(session, config).fetch(url)


@pytest.mark.asyncio()
async def test_fetch_returns_page(basic_config, serve_app):
    seen_headers = {}

    async def handle_root(request):
        seen_headers.update(request.headers)
        return web.Response(text='<a href="/page1">Page1</a>', content_type="text/html")

    app = web.Application()
    app.router.add_get("/", handle_root)
    base = await serve_app(app)

    page = await fetch_one(basic_config, f"{base}/")
    assert page.url == f"{base}/"
    assert page.status == 200
    assert 'href="/page1"' in page.content
    assert seen_headers["User-Agent"] == "TestAgent/1.0"
    assert seen_headers["Accept"] == ACCEPT_HEADER


@pytest.mark.asyncio()
async def test_fetch_404_raises(basic_config, serve_app):
    base = await serve_app(web.Application())
    with pytest.raises(FetchError) as exc_info:
        await fetch_one(basic_config, f"{base}/missing")
    assert exc_info.value.status == 404
    assert exc_info.value.url == f"{base}/missing"


@pytest.mark.asyncio()
async def test_retry_on_server_error(basic_config, serve_app):
    call_count = {"n": 0}

    async def flaky(_):
        call_count["n"] += 1
        if call_count["n"] <= 2:
            return web.Response(status=500)
        return web.Response(text="<h1>Recover</h1>", content_type="text/html")

    app = web.Application()
    app.router.add_get("/flaky", flaky)
    base = await serve_app(app)

    cfg = basic_config.model_copy(update={"retry_times": 3})
    page = await fetch_one(cfg, f"{base}/flaky")
    assert "Recover" in page.content
    assert call_count["n"] == 3


@pytest.mark.asyncio()
async def test_server_error_without_retries_raises(basic_config, serve_app):
    call_count = {"n": 0}

    async def broken(_):
        call_count["n"] += 1
        return web.Response(status=503)

    app = web.Application()
    app.router.add_get("/broken", broken)
    base = await serve_app(app)

    with pytest.raises(FetchError) as exc_info:
        await fetch_one(basic_config, f"{base}/broken")
    assert exc_info.value.status == 503
    assert call_count["n"] == 1


@pytest.mark.asyncio()
async def test_timeout_raises_fetch_error(basic_config, serve_app):
    async def slow(_):
        await asyncio.sleep(1)
        return web.Response(text="late", content_type="text/html")

    app = web.Application()
    app.router.add_get("/slow", slow)
    base = await serve_app(app)

    cfg = basic_config.model_copy(update={"fetch_timeout": 0.2})
    with pytest.raises(FetchError, match="timed out"):
        await fetch_one(cfg, f"{base}/slow")


@pytest.mark.asyncio()
async def test_connection_refused_raises_fetch_error(basic_config, unused_tcp_port):
    with pytest.raises(FetchError):
        await fetch_one(basic_config, f"http://127.0.0.1:{unused_tcp_port}/")


@pytest.mark.asyncio()
async def test_fetcher_satisfies_protocol(basic_config):
    async with ClientSession() as session:
        assert isinstance(Fetcher(session, basic_config), PageFetcher)
