"""Sitemaps and structured metadata for web pages.

Builds Schema.org JSON-LD, OpenGraph and Twitter Card tags from dataclasses,
and converts site navigation to and from sitemap XML.
"""

from .core.article import Article
from .core.breadcrumbs import BreadcrumbList, ListItem, breadcrumbs_from_url
from .core.event import Event
from .core.faq import FAQPage
from .core.local_business import LocalBusiness
from .core.navigation import (
    NavigationItem,
    NavigationLink,
    NavigationList,
    items_from_links,
    new_navigation_item,
    new_navigation_list,
)
from .core.organization import Organization
from .core.person import Person
from .core.product import Product
from .core.sitemap import (
    EmptyModelError,
    FileStore,
    LocalFileStore,
    SitemapCloseError,
    SitemapCodec,
    SitemapError,
    SitemapMarshalError,
    SitemapOpenError,
    SitemapParseError,
    SitemapReadError,
    SitemapWriteError,
)

__all__ = [
    "Article",
    "BreadcrumbList",
    "EmptyModelError",
    "Event",
    "FAQPage",
    "FileStore",
    "ListItem",
    "LocalBusiness",
    "LocalFileStore",
    "NavigationItem",
    "NavigationLink",
    "NavigationList",
    "Organization",
    "Person",
    "Product",
    "SitemapCloseError",
    "SitemapCodec",
    "SitemapError",
    "SitemapMarshalError",
    "SitemapOpenError",
    "SitemapParseError",
    "SitemapReadError",
    "SitemapWriteError",
    "breadcrumbs_from_url",
    "items_from_links",
    "new_navigation_item",
    "new_navigation_list",
]
