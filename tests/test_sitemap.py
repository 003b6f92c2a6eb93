"""Tests for the sitemap XML codec."""

import errno
import os
import stat
from pathlib import Path
from xml.etree import ElementTree as ET

import pytest
from sitemeta.core.navigation import NavigationItem, NavigationList, items_from_links
from sitemeta.core.sitemap import (
    SITEMAP_NAMESPACE,
    EmptyModelError,
    LocalFileStore,
    SitemapCloseError,
    SitemapCodec,
    SitemapError,
    SitemapMarshalError,
    SitemapOpenError,
    SitemapParseError,
    SitemapReadError,
    SitemapUrl,
    SitemapWriteError,
    from_sitemap_file,
    to_sitemap_bytes,
    to_sitemap_file,
)

from tests.fakes import MemoryFileStore

NS = {"sm": SITEMAP_NAMESPACE}


def _navigation(*urls: str) -> NavigationList:
    return NavigationList(
        identifier="main",
        items=[
            NavigationItem(position=i + 1, name=f"Page {i}", description="d", url=url)
            for i, url in enumerate(urls)
        ],
    )


def _entries(data: bytes) -> list[tuple[str | None, str | None]]:
    """Parse encoded bytes into (loc, priority) pairs."""
    root = ET.fromstring(data)
    return [
        (url.findtext("sm:loc", namespaces=NS), url.findtext("sm:priority", namespaces=NS))
        for url in root.findall("sm:url", NS)
    ]


class TestToSitemapBytes:
    """Tests for SitemapCodec.to_sitemap_bytes()."""

    def test__two_items__encodes_in_order(self) -> None:
        """Emit one url per item in list order with constant priority."""
        navigation = _navigation("https://example.com/", "https://example.com/about")

        data = SitemapCodec().to_sitemap_bytes(navigation)

        assert _entries(data) == [
            ("https://example.com/", "0.5"),
            ("https://example.com/about", "0.5"),
        ]

    def test__output__has_header_namespace_and_indent(self) -> None:
        """Produce declaration, urlset namespace and two-space indentation."""
        data = SitemapCodec().to_sitemap_bytes(_navigation("https://example.com/"))

        assert data.decode("utf-8") == (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
            "  <url>\n"
            "    <loc>https://example.com/</loc>\n"
            "    <priority>0.5</priority>\n"
            "  </url>\n"
            "</urlset>"
        )

    def test__priority__constant_regardless_of_positions(self) -> None:
        """Every entry gets priority 0.5, whatever the item positions are."""
        navigation = NavigationList(
            items=[
                NavigationItem(position=7, url="https://example.com/a"),
                NavigationItem(position=0, url="https://example.com/b"),
                NavigationItem(position=-3, url="https://example.com/c"),
            ],
        )

        data = SitemapCodec().to_sitemap_bytes(navigation)

        assert {priority for _, priority in _entries(data)} == {"0.5"}

    def test__empty_list__encodes_empty_urlset(self) -> None:
        """Empty but present item list is valid and has no url children."""
        data = SitemapCodec().to_sitemap_bytes(NavigationList(items=[]))

        root = ET.fromstring(data)
        assert root.tag == f"{{{SITEMAP_NAMESPACE}}}urlset"
        assert list(root) == []
        assert data.endswith(
            b'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"></urlset>',
        )

    def test__none_items__raises_empty_model(self) -> None:
        """Reject a list without item collection."""
        with pytest.raises(EmptyModelError, match="item list is nil"):
            SitemapCodec().to_sitemap_bytes(NavigationList(items=None))

    def test__special_characters__escaped(self) -> None:
        url = "https://example.com/search?q=a&b=<c>"

        data = SitemapCodec().to_sitemap_bytes(_navigation(url))

        assert b"q=a&amp;b=&lt;c&gt;" in data
        assert _entries(data) == [(url, "0.5")]

    def test__carriage_return__survives_decode(self) -> None:
        """Write CR as a character reference so parsers keep it."""
        url = "https://example.com/a\rb"
        codec = SitemapCodec()

        data = codec.to_sitemap_bytes(_navigation(url))

        assert b"a&#xD;b" in data
        assert [item.url for item in codec.from_sitemap_bytes(data).items or []] == [url]

    def test__illegal_xml_character__replaced(self, memory_store: MemoryFileStore) -> None:
        """Replace characters XML 1.0 forbids so the written file stays readable."""
        codec = SitemapCodec(memory_store)

        codec.to_sitemap_file(_navigation("https://example.com/a\x01b\ud800c"), "sitemap.xml")
        navigation = codec.from_sitemap_file("sitemap.xml")

        assert [item.url for item in navigation.items or []] == [
            "https://example.com/a\ufffdb\ufffdc",
        ]

    def test__tab_and_newline__kept(self) -> None:
        url = "https://example.com/a\tb\nc"
        codec = SitemapCodec()

        navigation = codec.from_sitemap_bytes(codec.to_sitemap_bytes(_navigation(url)))

        assert [item.url for item in navigation.items or []] == [url]

    def test__unserializable_url__raises_marshal_error(self) -> None:
        """Wrap serializer failures in SitemapMarshalError."""
        navigation = NavigationList(items=[NavigationItem(position=1, url=123)])  # type: ignore[arg-type]

        with pytest.raises(SitemapMarshalError) as exc_info:
            SitemapCodec().to_sitemap_bytes(navigation)

        assert isinstance(exc_info.value.__cause__, TypeError)

    def test__model__not_mutated(self) -> None:
        navigation = _navigation("https://example.com/")
        before = NavigationList(
            identifier=navigation.identifier,
            items=[NavigationItem(**vars(item)) for item in navigation.items or []],
        )

        SitemapCodec().to_sitemap_bytes(navigation)

        assert navigation == before


class TestToSitemapFile:
    """Tests for SitemapCodec.to_sitemap_file()."""

    def test__writes_bytes_with_mode_0644(self, memory_store: MemoryFileStore) -> None:
        codec = SitemapCodec(memory_store)
        navigation = _navigation("https://example.com/")

        codec.to_sitemap_file(navigation, "public/sitemap.xml")

        assert memory_store.files["public/sitemap.xml"] == codec.to_sitemap_bytes(navigation)
        assert memory_store.modes["public/sitemap.xml"] == 0o644

    def test__write_failure__raises_write_error(self, memory_store: MemoryFileStore) -> None:
        """Wrap store failure and name the path."""
        memory_store.write_error = PermissionError(errno.EACCES, "Permission denied")

        with pytest.raises(SitemapWriteError) as exc_info:
            SitemapCodec(memory_store).to_sitemap_file(
                _navigation("https://example.com/"),
                "readonly/sitemap.xml",
            )

        assert exc_info.value.path == "readonly/sitemap.xml"
        assert "readonly/sitemap.xml" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test__none_items__nothing_written(self, memory_store: MemoryFileStore) -> None:
        with pytest.raises(EmptyModelError):
            SitemapCodec(memory_store).to_sitemap_file(
                NavigationList(items=None),
                "sitemap.xml",
            )

        assert memory_store.files == {}

    def test__local_store__creates_file(self, tmp_path: Path) -> None:
        """Write through the local filesystem store."""
        path = tmp_path / "sitemap.xml"

        SitemapCodec(LocalFileStore()).to_sitemap_file(
            _navigation("https://example.com/"),
            path,
        )

        assert path.read_bytes().startswith(b'<?xml version="1.0" encoding="UTF-8"?>')
        # Group/other write bits may be masked by umask, never added
        assert stat.S_IMODE(path.stat().st_mode) & ~0o644 == 0

    def test__local_store__failed_write__closes_file(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Release the descriptor when writing fails after the file was opened."""
        opened: list[int] = []
        real_open = os.open

        def recording_open(path: str, flags: int, mode: int = 0o777) -> int:
            fd = real_open(path, flags, mode)
            opened.append(fd)
            return fd

        monkeypatch.setattr("sitemeta.core.sitemap.os.open", recording_open)

        with pytest.raises(TypeError):
            LocalFileStore().write(tmp_path / "sitemap.xml", "not bytes", 0o644)  # type: ignore[arg-type]

        assert len(opened) == 1
        with pytest.raises(OSError):
            os.fstat(opened[0])

    def test__local_store__missing_directory__raises_write_error(
        self,
        tmp_path: Path,
    ) -> None:
        with pytest.raises(SitemapWriteError):
            to_sitemap_file(
                _navigation("https://example.com/"),
                tmp_path / "missing" / "sitemap.xml",
            )


class TestParseSitemap:
    """Tests for SitemapCodec.parse_sitemap()."""

    def test__missing_priority__tolerated(self) -> None:
        data = (
            b'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
            b"<url><loc>https://example.com/</loc></url>"
            b"</urlset>"
        )

        document = SitemapCodec().parse_sitemap(data)

        assert document.urls == [SitemapUrl(loc="https://example.com/")]

    def test__no_namespace__accepted(self) -> None:
        data = b"<urlset><url><loc>/about</loc><priority>0.8</priority></url></urlset>"

        document = SitemapCodec().parse_sitemap(data)

        assert document.urls == [SitemapUrl(loc="/about", priority="0.8")]

    def test__wrong_root__raises_parse_error(self) -> None:
        with pytest.raises(SitemapParseError, match="<sitemapindex>"):
            SitemapCodec().parse_sitemap(b"<sitemapindex></sitemapindex>")

    def test__malformed_xml__raises_parse_error(self) -> None:
        with pytest.raises(SitemapParseError) as exc_info:
            SitemapCodec().parse_sitemap(b"<<< invalid xml >>>")

        assert isinstance(exc_info.value.__cause__, ET.ParseError)


class TestFromSitemapBytes:
    """Tests for SitemapCodec.from_sitemap_bytes()."""

    def test__urls__become_positioned_items(self) -> None:
        data = (
            b"<urlset>"
            b"<url><loc>https://example.com/b</loc><priority>0.9</priority></url>"
            b"<url><loc>https://example.com/a</loc></url>"
            b"</urlset>"
        )

        navigation = SitemapCodec().from_sitemap_bytes(data)

        assert navigation.identifier == ""
        assert navigation.items == [
            NavigationItem(position=1, url="https://example.com/b"),
            NavigationItem(position=2, url="https://example.com/a"),
        ]

    def test__path__named_in_parse_error(self) -> None:
        with pytest.raises(SitemapParseError) as exc_info:
            SitemapCodec().from_sitemap_bytes(b"<feed/>", path="feed.xml")

        assert exc_info.value.path == "feed.xml"


class TestFromSitemapFile:
    """Tests for SitemapCodec.from_sitemap_file()."""

    def test__round_trip__keeps_urls_in_order(self, memory_store: MemoryFileStore) -> None:
        """Only urls survive; names, descriptions and identifier are dropped."""
        codec = SitemapCodec(memory_store)
        urls = [
            "https://example.com/",
            "https://example.com/about",
            "https://example.com/blog/post",
        ]
        codec.to_sitemap_file(_navigation(*urls), "sitemap.xml")

        navigation = codec.from_sitemap_file("sitemap.xml")

        assert [item.url for item in navigation.items or []] == urls
        assert all(item.name == "" for item in navigation.items or [])
        assert all(item.description == "" for item in navigation.items or [])
        assert navigation.identifier == ""

    def test__positions__rederived_from_document_order(
        self,
        memory_store: MemoryFileStore,
    ) -> None:
        """Positions follow file order, not the original positions."""
        codec = SitemapCodec(memory_store)
        navigation = NavigationList(
            items=[
                NavigationItem(position=9, url="https://example.com/z"),
                NavigationItem(position=3, url="https://example.com/y"),
                NavigationItem(position=3, url="https://example.com/x"),
            ],
        )
        codec.to_sitemap_file(navigation, "sitemap.xml")

        decoded = codec.from_sitemap_file("sitemap.xml")

        assert [item.position for item in decoded.items or []] == [1, 2, 3]

    def test__concrete_scenario(self, memory_store: MemoryFileStore) -> None:
        codec = SitemapCodec(memory_store)
        navigation = NavigationList(
            items=[
                NavigationItem(position=1, url="https://example.com/"),
                NavigationItem(position=2, url="https://example.com/about"),
            ],
        )
        codec.to_sitemap_file(navigation, "sitemap.xml")

        assert _entries(memory_store.files["sitemap.xml"]) == [
            ("https://example.com/", "0.5"),
            ("https://example.com/about", "0.5"),
        ]
        decoded = codec.from_sitemap_file("sitemap.xml")
        assert decoded.items == [
            NavigationItem(position=1, url="https://example.com/"),
            NavigationItem(position=2, url="https://example.com/about"),
        ]

    def test__empty_urlset__decodes_to_empty_list(
        self,
        memory_store: MemoryFileStore,
    ) -> None:
        codec = SitemapCodec(memory_store)
        codec.to_sitemap_file(NavigationList(items=[]), "sitemap.xml")

        navigation = codec.from_sitemap_file("sitemap.xml")

        assert navigation.items == []

    def test__decoded_list__has_defaults(self, memory_store: MemoryFileStore) -> None:
        memory_store.files["sitemap.xml"] = b"<urlset><url><loc>/a</loc></url></urlset>"

        navigation = SitemapCodec(memory_store).from_sitemap_file("sitemap.xml")

        assert navigation.context == "https://schema.org"
        assert navigation.type == "ItemList"
        assert navigation.items is not None
        assert navigation.items[0].type == "SiteNavigationElement"

    def test__missing_file__raises_open_error(self, tmp_path: Path) -> None:
        """Nonexistent path fails at open, naming the path."""
        path = tmp_path / "nonexistent.xml"

        with pytest.raises(SitemapOpenError) as exc_info:
            from_sitemap_file(path)

        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test__open_failure__raises_open_error(self, memory_store: MemoryFileStore) -> None:
        memory_store.open_error = PermissionError(errno.EACCES, "Permission denied")

        with pytest.raises(SitemapOpenError):
            SitemapCodec(memory_store).from_sitemap_file("sitemap.xml")

    def test__read_failure__raises_read_error(self, memory_store: MemoryFileStore) -> None:
        memory_store.files["sitemap.xml"] = b"<urlset></urlset>"
        memory_store.read_error = OSError(errno.EIO, "I/O error")

        with pytest.raises(SitemapReadError) as exc_info:
            SitemapCodec(memory_store).from_sitemap_file("sitemap.xml")

        assert isinstance(exc_info.value.__cause__, OSError)
        assert memory_store.streams[0].close_calls == 1

    def test__malformed_file__raises_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "sitemap.xml"
        path.write_text("<<< invalid xml >>>")

        with pytest.raises(SitemapParseError):
            from_sitemap_file(path)

    def test__close_failure__raises_close_error(self, memory_store: MemoryFileStore) -> None:
        """Report close failure when nothing failed before."""
        memory_store.files["sitemap.xml"] = b"<urlset></urlset>"
        memory_store.close_error = OSError(errno.EIO, "close failed")

        with pytest.raises(SitemapCloseError) as exc_info:
            SitemapCodec(memory_store).from_sitemap_file("sitemap.xml")

        assert exc_info.value.__cause__ is memory_store.close_error

    def test__close_failure__does_not_mask_parse_error(
        self,
        memory_store: MemoryFileStore,
    ) -> None:
        """Earlier parse error wins; close failure is only noted."""
        memory_store.files["sitemap.xml"] = b"<<< invalid xml >>>"
        memory_store.close_error = OSError(errno.EIO, "close failed")

        with pytest.raises(SitemapParseError) as exc_info:
            SitemapCodec(memory_store).from_sitemap_file("sitemap.xml")

        assert any("close failed" in note for note in exc_info.value.__notes__)

    def test__close_failure__does_not_mask_read_error(
        self,
        memory_store: MemoryFileStore,
    ) -> None:
        memory_store.files["sitemap.xml"] = b"<urlset></urlset>"
        memory_store.read_error = OSError(errno.EIO, "read failed")
        memory_store.close_error = OSError(errno.EIO, "close failed")

        with pytest.raises(SitemapReadError):
            SitemapCodec(memory_store).from_sitemap_file("sitemap.xml")

    def test__errors__share_base_class(self, memory_store: MemoryFileStore) -> None:
        """Callers can catch every codec failure at once."""
        with pytest.raises(SitemapError):
            SitemapCodec(memory_store).from_sitemap_file("nonexistent.xml")


class TestModuleFunctions:
    """Tests for module-level convenience functions."""

    def test__round_trip__local_filesystem(self, tmp_path: Path) -> None:
        path = tmp_path / "sitemap.xml"
        navigation = NavigationList(
            items=items_from_links(
                [
                    ("Home", "https://example.com/", ""),
                    ("About", "https://example.com/about", "About us"),
                ],
            ),
        )

        to_sitemap_file(navigation, path)
        decoded = from_sitemap_file(path)

        assert path.read_bytes() == to_sitemap_bytes(navigation)
        assert [(item.position, item.url) for item in decoded.items or []] == [
            (1, "https://example.com/"),
            (2, "https://example.com/about"),
        ]
