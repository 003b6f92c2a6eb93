"""Schema.org WebSite structured data.

A WebSite may carry a search action so search engines can offer a site
search box:

    WebSite(
        url="https://www.example.com",
        name="Example",
        potential_action=Action(
            target=Target(url_template="https://www.example.com/search?q={query}"),
            query_input="required name=query",
        ),
    )
"""

from dataclasses import dataclass

from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.types import SCHEMA_CONTEXT

WEB_SITE_TYPE = "WebSite"
ACTION_TYPE = "Action"
TARGET_TYPE = "EntryPoint"


@dataclass
class Target:
    """Target of an action."""

    url_template: str = ""
    type: str = TARGET_TYPE

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = TARGET_TYPE

    def to_dict(self) -> dict[str, str]:
        return {"@type": self.type, "urlTemplate": self.url_template}


@dataclass
class Action:
    """Potential action of a website, usually a SearchAction."""

    target: Target | None = None
    query_input: str = ""
    type: str = ACTION_TYPE

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = ACTION_TYPE
        if self.target is not None:
            self.target.ensure_defaults()

    def to_dict(self) -> dict[str, object]:
        return {
            "@type": self.type,
            "target": self.target.to_dict() if self.target is not None else None,
            "query-input": self.query_input,
        }


@dataclass
class WebSite:
    """Schema.org WebSite.

    See https://schema.org/WebSite
    """

    url: str = ""
    name: str = ""
    alternate_name: str = ""
    description: str = ""
    potential_action: Action | None = None
    context: str = SCHEMA_CONTEXT
    type: str = WEB_SITE_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = WEB_SITE_TYPE
        if self.potential_action is not None:
            self.potential_action.ensure_defaults()

    def validate(self) -> list[str]:
        """Return warnings for missing recommended fields."""
        warnings: list[str] = []
        if not self.url:
            warnings.append("missing recommended field: url")
        if not self.name:
            warnings.append("missing recommended field: name")
        if not self.description:
            warnings.append("missing recommended field: description")

        action = self.potential_action
        if action is not None and (action.target is None or not action.target.url_template):
            warnings.append(
                "potentialAction.target.urlTemplate is recommended when potentialAction is set",
            )

        return warnings

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        fields: dict[str, object] = {
            "@context": self.context,
            "@type": self.type,
            "url": self.url,
            "name": self.name,
            "alternateName": self.alternate_name,
            "description": self.description,
        }
        result = {key: value for key, value in fields.items() if value}
        if self.potential_action is not None:
            result["potentialAction"] = self.potential_action.to_dict()
        return result

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"website-{generate_unique_key()}", self.to_dict())
