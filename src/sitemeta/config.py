"""Configuration management for sitemeta.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from sitemeta.core.navigation import (
    NavigationLink,
    NavigationList,
    items_from_links,
    new_navigation_list,
)

CONFIG_FILENAME = "sitemeta.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class SiteConfig:
    """Site-wide metadata."""

    base_url: str | None = None
    name: str | None = None
    description: str | None = None


@dataclass
class SitemapConfig:
    """Sitemap output configuration."""

    output: Path = field(default_factory=lambda: Path("sitemap.xml"))


@dataclass
class NavigationConfig:
    """Site navigation links, in menu order."""

    identifier: str = ""
    links: list[NavigationLink] = field(default_factory=list)


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    site: SiteConfig
    sitemap: SitemapConfig
    navigation: NavigationConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for sitemeta.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Return the nearest sitemeta.toml in the current directory or a parent."""
        cwd = Path.cwd()
        for directory in (cwd, *cwd.parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.exists():
                return candidate
        return None

    @classmethod
    def _default(cls) -> Config:
        """Create config used when no sitemeta.toml is found.

        Returns:
            Config with no navigation links and sitemap.xml in the working directory
        """
        return cls(
            server=ServerConfig(),
            site=SiteConfig(),
            sitemap=SitemapConfig(),
            navigation=NavigationConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            site=cls._parse_site(data.get("site")),
            sitemap=cls._parse_sitemap(data.get("sitemap"), config_dir),
            navigation=cls._parse_navigation(data.get("navigation")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        values: dict[str, str | None] = {}
        for key in ("base_url", "name", "description"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"site.{key} must be a string")
            values[key] = value

        return SiteConfig(**values)

    @classmethod
    def _parse_sitemap(cls, data: object, config_dir: Path) -> SitemapConfig:
        """Parse sitemap configuration section.

        Args:
            data: Raw sitemap section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            SitemapConfig instance
        """
        if data is None:
            return SitemapConfig(output=config_dir / "sitemap.xml")

        if not isinstance(data, dict):
            raise ValueError("sitemap section must be a dictionary")

        output = data.get("output", "sitemap.xml")
        if not isinstance(output, str):
            raise ValueError("sitemap.output must be a string")

        return SitemapConfig(output=config_dir / output)

    @classmethod
    def _parse_navigation(cls, data: object) -> NavigationConfig:
        """Parse navigation configuration section.

        Links are given as an array of tables:

            [[navigation.links]]
            name = "Home"
            url = "https://example.com/"

        Args:
            data: Raw navigation section data

        Returns:
            NavigationConfig instance
        """
        if data is None:
            return NavigationConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        identifier = data.get("identifier", "")
        if not isinstance(identifier, str):
            raise ValueError("navigation.identifier must be a string")

        links_raw = data.get("links", [])
        if not isinstance(links_raw, list):
            raise ValueError("navigation.links must be a list")

        links: list[NavigationLink] = []
        for item in links_raw:
            if not isinstance(item, dict):
                raise ValueError("navigation.links items must be tables")
            name = item.get("name", "")
            url = item.get("url")
            description = item.get("description", "")
            if not isinstance(url, str):
                raise ValueError("navigation.links url must be a string")
            if not isinstance(name, str) or not isinstance(description, str):
                raise ValueError("navigation.links name and description must be strings")
            links.append(NavigationLink(name=name, url=url, description=description))

        return NavigationConfig(identifier=identifier, links=links)

    def navigation_list(self) -> NavigationList:
        """Build the navigation list from configured links."""
        return new_navigation_list(
            self.navigation.identifier,
            items_from_links(self.navigation.links),
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        output: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            output: Override sitemap.output

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        sitemap = self.sitemap
        if output is not None:
            sitemap = replace(self.sitemap, output=output)

        return replace(self, server=server, sitemap=sitemap)
