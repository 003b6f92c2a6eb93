"""Schema.org WebPage structured data."""

from dataclasses import dataclass

from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.types import SCHEMA_CONTEXT

WEB_PAGE_TYPE = "WebPage"


@dataclass
class WebPage:
    """Schema.org WebPage.

    See https://schema.org/WebPage
    """

    url: str = ""
    name: str = ""
    headline: str = ""
    description: str = ""
    about: str = ""
    keywords: str = ""
    in_language: str = ""
    is_part_of: str = ""
    last_reviewed: str = ""
    primary_image: str = ""
    date_published: str = ""
    date_modified: str = ""
    context: str = SCHEMA_CONTEXT
    type: str = WEB_PAGE_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = WEB_PAGE_TYPE

    def validate(self) -> list[str]:
        """Return warnings for missing recommended fields."""
        recommended = {
            "url": self.url,
            "name": self.name,
            "headline": self.headline,
            "description": self.description,
        }
        return [
            f"missing recommended field: {key}"
            for key, value in recommended.items()
            if not value
        ]

    def to_dict(self) -> dict[str, str]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        fields = {
            "@context": self.context,
            "@type": self.type,
            "url": self.url,
            "name": self.name,
            "headline": self.headline,
            "description": self.description,
            "about": self.about,
            "keywords": self.keywords,
            "inLanguage": self.in_language,
            "isPartOf": self.is_part_of,
            "lastReviewed": self.last_reviewed,
            "primaryImageOfPage": self.primary_image,
            "datePublished": self.date_published,
            "dateModified": self.date_modified,
        }
        return {key: value for key, value in fields.items() if value}

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"webpage-{generate_unique_key()}", self.to_dict())
