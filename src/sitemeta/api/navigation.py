"""Navigation and sitemap endpoints.

Serves the configured navigation as sitemap XML and as JSON-LD.
"""

from aiohttp import web

from sitemeta.app_keys import codec_key, config_key
from sitemeta.core.sitemap import SitemapError


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/sitemap.xml", get_sitemap),
        web.get("/api/navigation", get_navigation),
    ]


async def get_sitemap(request: web.Request) -> web.Response:
    config = request.app[config_key]
    codec = request.app[codec_key]

    try:
        body = codec.to_sitemap_bytes(config.navigation_list())
    except SitemapError as e:
        return web.json_response(
            {"error": "Sitemap generation failed", "detail": str(e)},
            status=500,
        )

    return web.Response(body=body, content_type="application/xml", charset="utf-8")


async def get_navigation(request: web.Request) -> web.Response:
    config = request.app[config_key]
    navigation = config.navigation_list()
    navigation.ensure_defaults()
    return web.json_response(navigation.to_dict())
