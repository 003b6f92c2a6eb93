"""Schema.org Organization structured data."""

from dataclasses import dataclass, field

from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.types import SCHEMA_CONTEXT, ContactPoint, ImageObject, compact, embedded

ORGANIZATION_TYPE = "Organization"


@dataclass
class Organization:
    """Schema.org Organization.

    See https://schema.org/Organization
    """

    name: str = ""
    url: str = ""
    logo: ImageObject | None = None
    contact_points: list[ContactPoint] = field(default_factory=list)
    same_as: list[str] = field(default_factory=list)
    context: str = SCHEMA_CONTEXT
    type: str = ORGANIZATION_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = ORGANIZATION_TYPE
        if self.logo is not None:
            self.logo.ensure_defaults()
        for contact_point in self.contact_points:
            contact_point.ensure_defaults()

    def validate(self) -> list[str]:
        """Return warnings for missing recommended fields."""
        warnings: list[str] = []
        if not self.name:
            warnings.append("missing recommended field: name")
        if not self.url:
            warnings.append("missing recommended field: url")
        if self.logo is None or not self.logo.url:
            warnings.append("missing recommended field: logo.url")
        return warnings

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        return compact(
            {
                "@context": self.context,
                "@type": self.type,
                "name": self.name,
                "url": self.url,
                "logo": embedded(self.logo),
                "contactPoint": [point.to_dict() for point in self.contact_points],
                "sameAs": self.same_as,
            },
        )

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"org-{generate_unique_key()}", self.to_dict())


def new_organization(
    name: str,
    url: str,
    logo_url: str,
    contact_points: list[ContactPoint] | None = None,
    same_as: list[str] | None = None,
) -> Organization:
    """Create an Organization whose logo is an ImageObject at logo_url."""
    organization = Organization(
        name=name,
        url=url,
        logo=ImageObject(url=logo_url),
        contact_points=contact_points or [],
        same_as=same_as or [],
    )
    organization.ensure_defaults()
    return organization
