"""Schema.org Product structured data."""

from dataclasses import dataclass, field

from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.review import AggregateRating, Review
from sitemeta.core.types import SCHEMA_CONTEXT, Offer, compact, embedded

PRODUCT_TYPE = "Product"


@dataclass
class Brand:
    """See https://schema.org/Brand"""

    name: str = ""
    type: str = "Brand"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "Brand"

    def to_dict(self) -> dict[str, object]:
        return compact({"@type": self.type, "name": self.name})


@dataclass
class Product:
    """Schema.org Product.

    See https://schema.org/Product
    """

    name: str = ""
    description: str = ""
    image: list[str] = field(default_factory=list)
    sku: str = ""
    brand: Brand | None = None
    offers: Offer | None = None
    category: str = ""
    aggregate_rating: AggregateRating | None = None
    reviews: list[Review] = field(default_factory=list)
    context: str = SCHEMA_CONTEXT
    type: str = PRODUCT_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = PRODUCT_TYPE
        for nested in (self.brand, self.offers, self.aggregate_rating):
            if nested is not None:
                nested.ensure_defaults()
        for review in self.reviews:
            review.ensure_defaults()

    def validate(self) -> list[str]:
        """Return warnings for missing recommended fields.

        A product should carry at least one of offers, review or aggregateRating.
        """
        warnings: list[str] = []
        if not self.name:
            warnings.append("missing recommended field: name")
        if not self.image:
            warnings.append("missing recommended field: image")
        if self.offers is None and not self.reviews and self.aggregate_rating is None:
            warnings.append("missing recommended field: offers, review or aggregateRating")
        return warnings

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        return compact(
            {
                "@context": self.context,
                "@type": self.type,
                "name": self.name,
                "description": self.description,
                "image": self.image,
                "sku": self.sku,
                "brand": embedded(self.brand),
                "offers": embedded(self.offers),
                "category": self.category,
                "aggregateRating": embedded(self.aggregate_rating),
                "review": [review.to_dict() for review in self.reviews],
            },
        )

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"product-{generate_unique_key()}", self.to_dict())


def new_product(
    name: str,
    description: str,
    images: list[str],
    sku: str,
    brand: Brand | None,
    offers: Offer | None,
    category: str,
    aggregate_rating: AggregateRating | None = None,
    reviews: list[Review] | None = None,
) -> Product:
    product = Product(
        name=name,
        description=description,
        image=images,
        sku=sku,
        brand=brand,
        offers=offers,
        category=category,
        aggregate_rating=aggregate_rating,
        reviews=reviews or [],
    )
    product.ensure_defaults()
    return product
