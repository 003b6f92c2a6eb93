"""aiohttp server for sitemeta.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from sitemeta.api.breadcrumbs import create_breadcrumbs_routes
from sitemeta.api.navigation import create_navigation_routes
from sitemeta.app_keys import codec_key, config_key
from sitemeta.config import Config
from sitemeta.core.sitemap import SitemapCodec


def create_app(config: Config, codec: SitemapCodec | None = None) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        codec: Sitemap codec, defaults to one over the local filesystem

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[config_key] = config
    app[codec_key] = codec if codec is not None else SitemapCodec()

    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_breadcrumbs_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
