"""Schema.org LocalBusiness structured data."""

from dataclasses import dataclass, field

from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.review import AggregateRating, Review
from sitemeta.core.types import (
    SCHEMA_CONTEXT,
    GeoCoordinates,
    ImageObject,
    PostalAddress,
    compact,
    embedded,
)

LOCAL_BUSINESS_TYPE = "LocalBusiness"


@dataclass
class LocalBusiness:
    """Schema.org LocalBusiness.

    Opening hours use the Schema.org short form, e.g. "Mo-Fr 09:00-17:00".

    See https://schema.org/LocalBusiness
    """

    name: str = ""
    description: str = ""
    url: str = ""
    logo: ImageObject | None = None
    telephone: str = ""
    address: PostalAddress | None = None
    opening_hours: list[str] = field(default_factory=list)
    geo: GeoCoordinates | None = None
    aggregate_rating: AggregateRating | None = None
    reviews: list[Review] = field(default_factory=list)
    context: str = SCHEMA_CONTEXT
    type: str = LOCAL_BUSINESS_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = LOCAL_BUSINESS_TYPE
        for nested in (self.logo, self.address, self.geo, self.aggregate_rating):
            if nested is not None:
                nested.ensure_defaults()
        for review in self.reviews:
            review.ensure_defaults()

    def validate(self) -> list[str]:
        """Return warnings for missing recommended fields."""
        warnings: list[str] = []
        if not self.name:
            warnings.append("missing recommended field: name")
        if self.address is None:
            warnings.append("missing recommended field: address")
        if not self.telephone:
            warnings.append("missing recommended field: telephone")
        if not self.description:
            warnings.append("missing recommended field: description")
        return warnings

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        return compact(
            {
                "@context": self.context,
                "@type": self.type,
                "name": self.name,
                "description": self.description,
                "url": self.url,
                "logo": embedded(self.logo),
                "telephone": self.telephone,
                "address": embedded(self.address),
                "openingHours": self.opening_hours,
                "geo": embedded(self.geo),
                "aggregateRating": embedded(self.aggregate_rating),
                "review": [review.to_dict() for review in self.reviews],
            },
        )

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"localBusiness-{generate_unique_key()}", self.to_dict())


def new_local_business(
    name: str,
    description: str,
    url: str,
    telephone: str,
    address: PostalAddress | None = None,
    **kwargs: object,
) -> LocalBusiness:
    """Create a LocalBusiness with nested defaults applied.

    Args:
        name: Business name
        description: Short description
        url: Website of the business
        telephone: Contact phone number
        address: Postal address
        **kwargs: Any other LocalBusiness field (logo, opening_hours, geo, ...)

    Returns:
        LocalBusiness with context and type set on it and its nested objects
    """
    business = LocalBusiness(
        name=name,
        description=description,
        url=url,
        telephone=telephone,
        address=address,
        **kwargs,  # type: ignore[arg-type]
    )
    business.ensure_defaults()
    return business
