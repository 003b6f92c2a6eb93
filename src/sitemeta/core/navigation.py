"""Site navigation model.

An ordered list of navigation entries, rendered as a Schema.org `ItemList`
of `SiteNavigationElement` items. This is the model the sitemap codec reads
and writes.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.types import SCHEMA_CONTEXT
from sitemeta.core.validate import log_validation_warnings

ITEM_LIST_TYPE = "ItemList"
NAVIGATION_ELEMENT_TYPE = "SiteNavigationElement"


@dataclass
class NavigationItem:
    """Single entry of a site's navigation menu."""

    position: int
    name: str = ""
    description: str = ""
    url: str = ""
    type: str = NAVIGATION_ELEMENT_TYPE

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = NAVIGATION_ELEMENT_TYPE

    def to_dict(self) -> dict[str, str | int]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        result: dict[str, str | int] = {"@type": self.type}
        if self.position:
            result["position"] = self.position
        if self.name:
            result["name"] = self.name
        if self.description:
            result["description"] = self.description
        if self.url:
            result["url"] = self.url
        return result


@dataclass(frozen=True)
class NavigationLink:
    """Navigation link input for items_from_links()."""

    name: str
    url: str
    description: str = ""


@dataclass
class NavigationList:
    """Ordered navigation entries of a site.

    `items` is None when no collection was supplied at all, which the
    sitemap encoder rejects. An empty list is a valid, empty navigation.
    """

    identifier: str = ""
    items: list[NavigationItem] | None = field(default_factory=list)
    context: str = SCHEMA_CONTEXT
    type: str = ITEM_LIST_TYPE

    def ensure_defaults(self) -> None:
        """Restore the JSON-LD context and types if they were cleared."""
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = ITEM_LIST_TYPE
        for item in self.items or []:
            item.ensure_defaults()

    def validate(self) -> list[str]:
        """Check the list for missing recommended fields.

        Returns:
            Human-readable warnings, empty when the list is complete
        """
        if not self.items:
            return ["ItemList should contain at least one item"]

        warnings: list[str] = []
        for i, item in enumerate(self.items):
            if not item.name:
                warnings.append(f"missing name in ItemListElement at position {i + 1}")
            if not item.url:
                warnings.append(f"missing url in ItemListElement at position {i + 1}")
            if item.position == 0:
                warnings.append(f"missing position in ItemListElement at index {i}")
        return warnings

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary for serialization."""
        result: dict[str, object] = {"@context": self.context, "@type": self.type}
        if self.identifier:
            result["identifier"] = self.identifier
        if self.items:
            result["itemListElement"] = [item.to_dict() for item in self.items]
        return result

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element.

        Validation warnings are logged, not raised.
        """
        self.ensure_defaults()
        log_validation_warnings(self)

        key = self.identifier or generate_unique_key()
        return json_ld_script(f"siteNavItemList-{key}", self.to_dict())


def new_navigation_list(
    identifier: str,
    items: list[NavigationItem] | None,
) -> NavigationList:
    """Wrap navigation items in a list. Items are not validated."""
    return NavigationList(identifier=identifier, items=items)


def new_navigation_item(
    position: int,
    name: str,
    description: str,
    url: str,
) -> NavigationItem:
    return NavigationItem(
        position=position,
        name=name,
        description=description,
        url=url,
    )


def new_simple_navigation_item(position: int, name: str, url: str) -> NavigationItem:
    """Create a navigation item without description."""
    return new_navigation_item(position, name, "", url)


def items_from_links(
    links: Iterable[NavigationLink | tuple[str, str, str]],
) -> list[NavigationItem]:
    """Build navigation items from links, numbering them from 1 in input order.

    Args:
        links: NavigationLink values or (name, url, description) triples

    Returns:
        Navigation items with 1-based positions
    """
    items: list[NavigationItem] = []
    for i, link in enumerate(links):
        if isinstance(link, NavigationLink):
            name, url, description = link.name, link.url, link.description
        else:
            name, url, description = link
        items.append(new_navigation_item(i + 1, name, description, url))
    return items
