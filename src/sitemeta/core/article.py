"""Schema.org Article structured data.

    article = new_article(
        "Example Article Headline",
        ["https://www.example.com/images/article.jpg"],
        Person(name="Jane Doe"),
        Organization(name="Example Publisher"),
        "2024-09-15",
        "2024-09-16",
        "This is an example article",
    )
    html = article.to_json_ld()
"""

from dataclasses import dataclass, field

from sitemeta.core.organization import Organization
from sitemeta.core.person import Person
from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.types import SCHEMA_CONTEXT, compact, embedded

ARTICLE_TYPE = "Article"


@dataclass
class Article:
    """Schema.org Article.

    See https://schema.org/Article
    """

    headline: str = ""
    image: list[str] = field(default_factory=list)
    author: Person | None = None
    publisher: Organization | None = None
    date_published: str = ""
    date_modified: str = ""
    description: str = ""
    context: str = SCHEMA_CONTEXT
    type: str = ARTICLE_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = ARTICLE_TYPE
        if self.author is not None:
            self.author.ensure_defaults()
        if self.publisher is not None:
            self.publisher.ensure_defaults()

    def validate(self) -> list[str]:
        """Return warnings for missing recommended fields."""
        warnings: list[str] = []
        if not self.headline:
            warnings.append("missing recommended field: headline")
        if not self.image:
            warnings.append("missing recommended field: image")
        if not self.date_published:
            warnings.append("missing recommended field: datePublished")
        if self.author is None and self.publisher is None:
            warnings.append("missing recommended field: author or publisher")
        return warnings

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        return compact(
            {
                "@context": self.context,
                "@type": self.type,
                "headline": self.headline,
                "image": self.image,
                "author": embedded(self.author),
                "publisher": embedded(self.publisher),
                "datePublished": self.date_published,
                "dateModified": self.date_modified,
                "description": self.description,
            },
        )

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"article-{generate_unique_key()}", self.to_dict())


def new_article(
    headline: str,
    images: list[str],
    author: Person | None,
    publisher: Organization | None,
    date_published: str,
    date_modified: str,
    description: str,
) -> Article:
    article = Article(
        headline=headline,
        image=images,
        author=author,
        publisher=publisher,
        date_published=date_published,
        date_modified=date_modified,
        description=description,
    )
    article.ensure_defaults()
    return article
