"""Schema.org BreadcrumbList.

Breadcrumbs can be given explicitly or derived from a page URL, where every
path segment becomes one crumb after a leading "Home" entry for the site root.
"""

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.types import SCHEMA_CONTEXT

BREADCRUMB_LIST_TYPE = "BreadcrumbList"
LIST_ITEM_TYPE = "ListItem"


@dataclass
class ListItem:
    """Breadcrumb entry."""

    position: int
    name: str = ""
    item: str = ""
    type: str = LIST_ITEM_TYPE

    def to_dict(self) -> dict[str, str | int]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        result: dict[str, str | int] = {"@type": self.type}
        if self.position:
            result["position"] = self.position
        if self.name:
            result["name"] = self.name
        if self.item:
            result["item"] = self.item
        return result


@dataclass
class BreadcrumbList:
    """Schema.org BreadcrumbList.

    See https://schema.org/BreadcrumbList
    """

    items: list[ListItem] = field(default_factory=list)
    context: str = SCHEMA_CONTEXT
    type: str = BREADCRUMB_LIST_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = BREADCRUMB_LIST_TYPE
        for item in self.items:
            if not item.type:
                item.type = LIST_ITEM_TYPE

    def validate(self) -> list[str]:
        """Check breadcrumbs for missing names, URLs and positions."""
        warnings: list[str] = []
        if not self.items:
            warnings.append("BreadcrumbList should contain at least one item")

        for i, item in enumerate(self.items, start=1):
            if not item.name:
                warnings.append(f"ListItem at position {i} is missing a name")
            if not item.item:
                warnings.append(f"ListItem at position {i} is missing a URL")
            if item.position == 0:
                warnings.append(f"ListItem at position {i} is missing a valid position")

        return warnings

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary for serialization."""
        return {
            "@context": self.context,
            "@type": self.type,
            "itemListElement": [item.to_dict() for item in self.items],
        }

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"breadcrumbList-{generate_unique_key()}", self.to_dict())


def new_breadcrumb_list(items: list[ListItem]) -> BreadcrumbList:
    """Create a BreadcrumbList with default context and types."""
    breadcrumbs = BreadcrumbList(items=items)
    breadcrumbs.ensure_defaults()
    return breadcrumbs


def breadcrumbs_from_url(url: str) -> BreadcrumbList:
    """Derive breadcrumbs from the path of an absolute URL.

    "https://example.com/blog/post-one" yields Home (https://example.com),
    Blog (https://example.com/blog) and Post-one (https://example.com/blog/post-one).
    Query string and fragment are ignored.

    Args:
        url: Absolute page URL

    Returns:
        BreadcrumbList starting with the site root

    Raises:
        ValueError: If the URL cannot be parsed or lacks scheme or host
    """
    parsed = urlsplit(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"invalid URL: {url!r} must include scheme and host")

    base_url = f"{parsed.scheme}://{parsed.netloc}"
    items = [ListItem(position=1, name="Home", item=base_url)]

    segments = [segment for segment in parsed.path.strip("/").split("/") if segment]
    for i, segment in enumerate(segments):
        href = base_url + "/" + "/".join(segments[: i + 1])
        items.append(ListItem(position=i + 2, name=_title_first(segment), item=href))

    return new_breadcrumb_list(items)


def _title_first(segment: str) -> str:
    """Title-case the first character only (e.g., "über-uns" -> "Über-uns")."""
    if not segment:
        return segment
    return segment[0].title() + segment[1:]
