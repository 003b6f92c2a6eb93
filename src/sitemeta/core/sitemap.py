"""Sitemap XML codec.

Converts a NavigationList to and from the sitemap XML format:

    <?xml version="1.0" encoding="UTF-8"?>
    <urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
      <url>
        <loc>https://example.com/</loc>
        <priority>0.5</priority>
      </url>
    </urlset>

Only `loc` survives a round trip. Item names, descriptions and the list
identifier are not part of the format, every entry is written with the same
priority, and decoded positions follow document order.

File access goes through a FileStore passed to SitemapCodec, so I/O failures
can be reproduced without touching the real filesystem.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Protocol
from xml.etree import ElementTree as ET

from sitemeta.core.navigation import NavigationItem, NavigationList

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
DEFAULT_PRIORITY = "0.5"
SITEMAP_FILE_MODE = 0o644
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

_INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")

StrPath = str | os.PathLike[str]


class SitemapError(Exception):
    """Base class for sitemap encode and decode failures."""

    def __init__(self, message: str, *, path: StrPath | None = None) -> None:
        super().__init__(message)
        self.path = path


class EmptyModelError(SitemapError):
    """Navigation list has no item collection at all."""


class SitemapMarshalError(SitemapError):
    """Sitemap document could not be serialized to XML."""


class SitemapWriteError(SitemapError):
    """Sitemap file could not be written."""


class SitemapOpenError(SitemapError):
    """Sitemap file could not be opened."""


class SitemapReadError(SitemapError):
    """Opened sitemap file could not be read."""


class SitemapCloseError(SitemapError):
    """Sitemap file could not be closed after a successful read."""


class SitemapParseError(SitemapError):
    """File contents are not a valid sitemap document."""


@dataclass
class SitemapUrl:
    """Single <url> entry of a sitemap."""

    loc: str
    priority: str = ""


@dataclass
class SitemapDocument:
    """Wire-level sitemap: the <url> entries of a <urlset>."""

    urls: list[SitemapUrl] = field(default_factory=list)


class FileStore(Protocol):
    """Path-addressed byte storage used by the codec."""

    def open(self, path: StrPath) -> BinaryIO:
        """Open a file for reading. The caller closes the stream."""
        ...

    def write(self, path: StrPath, data: bytes, mode: int) -> None:
        """Write data to a file, creating it with the given permission mode."""
        ...


class LocalFileStore:
    """FileStore backed by the host filesystem."""

    def open(self, path: StrPath) -> BinaryIO:
        return Path(path).open("rb")

    def write(self, path: StrPath, data: bytes, mode: int) -> None:
        # Mode applies on creation only and is subject to the process umask
        def opener(file: str, flags: int) -> int:
            return os.open(file, flags, mode)

        with open(path, "wb", opener=opener) as f:
            f.write(data)


class SitemapCodec:
    """Encodes navigation lists as sitemap XML and decodes them back.

    Each call is independent. The codec holds no state besides its file store
    and never retries or logs failures; every failure point raises its own
    SitemapError subclass with the underlying cause chained.
    """

    def __init__(self, store: FileStore | None = None) -> None:
        """Initialize codec.

        Args:
            store: File access boundary, defaults to the local filesystem
        """
        self._store: FileStore = store if store is not None else LocalFileStore()

    @property
    def store(self) -> FileStore:
        return self._store

    def to_sitemap_bytes(self, navigation: NavigationList) -> bytes:
        """Encode a navigation list as sitemap XML.

        Args:
            navigation: Navigation to encode, left unchanged

        Returns:
            UTF-8 XML document with declaration header

        Raises:
            EmptyModelError: If navigation.items is None
            SitemapMarshalError: If XML serialization fails
        """
        if navigation.items is None:
            raise EmptyModelError("item list is nil, cannot generate sitemap")

        document = SitemapDocument(
            urls=[
                SitemapUrl(loc=item.url, priority=DEFAULT_PRIORITY)
                for item in navigation.items
            ],
        )

        try:
            body = _marshal_document(document)
        except (TypeError, ValueError) as e:
            raise SitemapMarshalError(f"error marshaling sitemap XML: {e}") from e

        logger.debug(f"Encoded {len(document.urls)} URLs into {len(body)} bytes")
        return XML_HEADER.encode("utf-8") + body

    def to_sitemap_file(self, navigation: NavigationList, path: StrPath) -> None:
        """Encode a navigation list and write it to a file with mode 0644.

        Raises:
            EmptyModelError: If navigation.items is None
            SitemapMarshalError: If XML serialization fails
            SitemapWriteError: If the file cannot be written
        """
        data = self.to_sitemap_bytes(navigation)

        try:
            self._store.write(path, data, SITEMAP_FILE_MODE)
        except OSError as e:
            raise SitemapWriteError(
                f"failed to write sitemap file {os.fspath(path)!r}: {e}",
                path=path,
            ) from e

        logger.info(f"Wrote sitemap with {len(navigation.items or [])} URLs to {path}")

    def parse_sitemap(
        self,
        data: bytes,
        *,
        path: StrPath | None = None,
    ) -> SitemapDocument:
        """Parse sitemap XML into its wire-level document.

        Elements are matched by local name, so documents without the sitemap
        namespace are accepted too. A <url> without <loc> decodes to an empty
        loc, and <priority> is optional.

        Args:
            data: Raw XML bytes
            path: Source file, used in error messages only

        Raises:
            SitemapParseError: If data is not XML or the root is not <urlset>
        """
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise SitemapParseError(
                f"could not unmarshal XML content: {e}",
                path=path,
            ) from e

        root_name = _local_name(root.tag)
        if root_name != "urlset":
            raise SitemapParseError(
                f"expected element type <urlset> but have <{root_name}>",
                path=path,
            )

        document = SitemapDocument()
        for entry in root:
            if _local_name(entry.tag) != "url":
                continue
            url = SitemapUrl(loc="")
            for child in entry:
                name = _local_name(child.tag)
                if name == "loc":
                    url.loc = child.text or ""
                elif name == "priority":
                    url.priority = child.text or ""
            document.urls.append(url)

        return document

    def from_sitemap_bytes(
        self,
        data: bytes,
        *,
        path: StrPath | None = None,
    ) -> NavigationList:
        """Decode sitemap XML into a new navigation list.

        Positions are assigned from document order starting at 1. Priorities
        are discarded and names stay empty.

        Raises:
            SitemapParseError: If data is not a sitemap document
        """
        document = self.parse_sitemap(data, path=path)

        navigation = NavigationList()
        navigation.ensure_defaults()
        navigation.items = [
            NavigationItem(position=i + 1, url=url.loc)
            for i, url in enumerate(document.urls)
        ]
        return navigation

    def from_sitemap_file(self, path: StrPath) -> NavigationList:
        """Read a sitemap file into a new navigation list.

        A close failure is raised only when reading and parsing succeeded.
        Otherwise it is attached as a note to the earlier error.

        Raises:
            SitemapOpenError: If the file cannot be opened (including missing files)
            SitemapReadError: If the opened file cannot be read
            SitemapParseError: If the contents are not a sitemap document
            SitemapCloseError: If the file cannot be closed after a clean decode
        """
        try:
            stream = self._store.open(path)
        except OSError as e:
            raise SitemapOpenError(
                f"failed to open sitemap XML file {os.fspath(path)!r}: {e}",
                path=path,
            ) from e

        try:
            navigation = self._decode_stream(stream, path)
        except SitemapError as e:
            try:
                stream.close()
            except OSError as close_error:
                e.add_note(f"closing {os.fspath(path)!r} also failed: {close_error}")
            raise

        try:
            stream.close()
        except OSError as e:
            raise SitemapCloseError(f"failed to close file: {e}", path=path) from e

        logger.info(f"Read {len(navigation.items or [])} URLs from sitemap {path}")
        return navigation

    def _decode_stream(self, stream: BinaryIO, path: StrPath) -> NavigationList:
        try:
            data = stream.read()
        except OSError as e:
            raise SitemapReadError(f"could not read XML file: {e}", path=path) from e

        logger.debug(f"Read {len(data)} bytes from {path}")
        return self.from_sitemap_bytes(data, path=path)


def _marshal_document(document: SitemapDocument) -> bytes:
    """Serialize a document as two-space indented XML without declaration.

    Characters outside the XML 1.0 Char production are replaced with U+FFFD.
    Carriage returns are written as character references.
    """
    root = ET.Element("urlset", {"xmlns": SITEMAP_NAMESPACE})
    for url in document.urls:
        entry = ET.SubElement(root, "url")
        ET.SubElement(entry, "loc").text = _INVALID_XML_CHARS.sub("\ufffd", url.loc)
        if url.priority:
            ET.SubElement(entry, "priority").text = url.priority

    ET.indent(root, space="  ")
    # Empty <urlset> keeps an explicit closing tag
    xml = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    # Parsers normalize a raw CR to LF
    return xml.replace("\r", "&#xD;").encode("utf-8")


def _local_name(tag: str) -> str:
    """Strip the "{namespace}" prefix ElementTree puts on qualified tags."""
    return tag.rpartition("}")[2]


def to_sitemap_bytes(navigation: NavigationList) -> bytes:
    """Encode a navigation list using the local filesystem codec."""
    return SitemapCodec().to_sitemap_bytes(navigation)


def to_sitemap_file(navigation: NavigationList, path: StrPath) -> None:
    """Write a navigation list as a sitemap file on the local filesystem."""
    SitemapCodec().to_sitemap_file(navigation, path)


def from_sitemap_file(path: StrPath) -> NavigationList:
    """Read a sitemap file from the local filesystem."""
    return SitemapCodec().from_sitemap_file(path)
