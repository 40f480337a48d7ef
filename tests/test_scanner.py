# File: tests/test_scanner.py
# End-to-end discovery against local aiohttp sites
from __future__ import annotations

import pytest
from aiohttp import web

from pagepipe.scanner import start_discovery

#: pages in the stress site (root + pages 1…149)
STRESS_PAGES: int = 150


def page(*hrefs: str) -> web.Response:
    body = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return web.Response(text=f"<html><body>{body}</body></html>", content_type="text/html")


@pytest.mark.asyncio()
async def test_sitemap_present(basic_config, serve_app):
    page_hits = {"n": 0}

    async def handle_sitemap(request):
        own = f"http://{request.host}"
        return web.Response(
            text=(
                '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
                f"<url><loc>{own}/one/</loc></url>"
                f"<url><loc>{own}/two#x</loc></url>"
                "<url><loc>https://elsewhere.org/three</loc></url>"
                f"<url><loc>{own}/four</loc></url>"
                "</urlset>"
            ),
            content_type="application/xml",
        )

    async def handle_page(_):
        page_hits["n"] += 1
        return page("/one")

    app = web.Application()
    app.router.add_get("/sitemap.xml", handle_sitemap)
    app.router.add_get("/{tail:.*}", handle_page)
    base = await serve_app(app)

    result = await start_discovery(f"{base}/", basic_config)

    assert result.source == "sitemap"
    assert list(result) == [f"{base}/one", f"{base}/two", f"{base}/four"]
    assert page_hits["n"] == 0


@pytest.mark.asyncio()
async def test_link_crawl_when_sitemap_missing(basic_config, serve_app):
    app = web.Application()

    async def handle_root(_):
        return page("/page1", "/page2", "/style.css", "https://external.com/")

    async def handle_page1(_):
        return page("/page3/", "/")

    async def handle_page2(_):
        return page("/broken", "mailto:hi@example.com")

    async def handle_page3(_):
        return page()

    app.router.add_get("/", handle_root)
    app.router.add_get("/page1", handle_page1)
    app.router.add_get("/page2", handle_page2)
    app.router.add_get("/page3", handle_page3)
    base = await serve_app(app)

    result = await start_discovery(f"{base}/", basic_config)

    assert result.source == "links"
    assert list(result) == [
        f"{base}/",
        f"{base}/page1",
        f"{base}/page2",
        f"{base}/page3",
        f"{base}/broken",
    ]


@pytest.mark.asyncio()
async def test_malformed_sitemap_falls_back(basic_config, serve_app):
    async def handle_sitemap(_):
        return web.Response(text="<html>not a sitemap", content_type="text/html")

    async def handle_root(_):
        return page("/about")

    async def handle_about(_):
        return page()

    app = web.Application()
    app.router.add_get("/sitemap.xml", handle_sitemap)
    app.router.add_get("/", handle_root)
    app.router.add_get("/about", handle_about)
    base = await serve_app(app)

    result = await start_discovery(base, basic_config)
    assert result.source == "links"
    assert list(result) == [base, f"{base}/about"]


@pytest.mark.asyncio()
@pytest.mark.slow()
async def test_stress_crawl_respects_cap(basic_config, serve_app):
    app = web.Application()

    async def handle_root(_):
        return page(*(f"/page{i}" for i in range(1, STRESS_PAGES)))

    async def handle_page(request):
        n = int(request.match_info["n"])
        return page(f"/page{(n % (STRESS_PAGES - 1)) + 1}", "/")

    app.router.add_get("/", handle_root)
    app.router.add_get("/page{n:\\d+}", handle_page)
    base = await serve_app(app)

    result = await start_discovery(f"{base}/", basic_config)

    assert len(result) == 100
    assert result[0] == f"{base}/"
    assert list(result)[1:] == [f"{base}/page{i}" for i in range(1, 100)]
