"""Application keys for type-safe app configuration access."""

from aiohttp import web

from sitemeta.config import Config
from sitemeta.core.sitemap import SitemapCodec

config_key = web.AppKey("config", Config)
codec_key = web.AppKey("codec", SitemapCodec)
