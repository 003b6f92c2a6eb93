"""Breadcrumbs endpoint.

Derives a BreadcrumbList for a page path of this site.
"""

from aiohttp import web

from sitemeta.app_keys import config_key
from sitemeta.core.breadcrumbs import breadcrumbs_from_url


def create_breadcrumbs_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/breadcrumbs/{path:.*}", get_breadcrumbs),
    ]


def get_base_url(request: web.Request) -> str:
    """Site root URL: configured site.base_url, else scheme and host of the request."""
    base_url = request.app[config_key].site.base_url
    if base_url:
        return base_url.rstrip("/")
    return f"{request.scheme}://{request.host}"


async def get_breadcrumbs(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    page_url = f"{get_base_url(request)}/{path}"

    try:
        breadcrumbs = breadcrumbs_from_url(page_url)
    except ValueError as e:
        return web.json_response(
            {"error": "Invalid page URL", "path": path, "detail": str(e)},
            status=400,
        )

    return web.json_response({"url": page_url, "breadcrumbs": breadcrumbs.to_dict()})
