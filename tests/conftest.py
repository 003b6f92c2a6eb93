"""Shared test fixtures."""

from pathlib import Path

import pytest
from sitemeta.config import (
    Config,
    NavigationConfig,
    ServerConfig,
    SiteConfig,
    SitemapConfig,
)
from sitemeta.core.navigation import NavigationLink

from tests.fakes import MemoryFileStore


@pytest.fixture
def memory_store() -> MemoryFileStore:
    return MemoryFileStore()


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Create a test configuration with two navigation links.

    The sitemap output points into tmp_path.
    """
    return Config(
        server=ServerConfig(),
        site=SiteConfig(base_url="https://example.com", name="Example"),
        sitemap=SitemapConfig(output=tmp_path / "sitemap.xml"),
        navigation=NavigationConfig(
            identifier="main",
            links=[
                NavigationLink(name="Home", url="https://example.com/"),
                NavigationLink(
                    name="About",
                    url="https://example.com/about",
                    description="About us",
                ),
            ],
        ),
    )
