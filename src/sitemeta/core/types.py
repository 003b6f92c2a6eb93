"""Value types shared by several Schema.org entities.

These objects only appear nested inside a top-level entity, so they carry an
@type but no @context of their own.
"""

from dataclasses import dataclass
from typing import Protocol

# JSON-LD @context of every Schema.org object
SCHEMA_CONTEXT = "https://schema.org"


class JsonLdThing(Protocol):
    def to_dict(self) -> dict[str, object]: ...


def compact(fields: dict[str, object]) -> dict[str, object]:
    """Drop unset values (None, empty strings and empty lists)."""
    return {
        key: value
        for key, value in fields.items()
        if value is not None and value != "" and value != []
    }


def embedded(thing: JsonLdThing | None) -> dict[str, object] | None:
    """Dictionary of a nested entity without its @context."""
    if thing is None:
        return None
    data = thing.to_dict()
    data.pop("@context", None)
    return data


@dataclass
class ImageObject:
    """See https://schema.org/ImageObject"""

    url: str = ""
    type: str = "ImageObject"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "ImageObject"

    def to_dict(self) -> dict[str, object]:
        return compact({"@type": self.type, "url": self.url})


@dataclass
class ContactPoint:
    """See https://schema.org/ContactPoint"""

    telephone: str = ""
    contact_type: str = ""
    area_served: str = ""
    available_language: str = ""
    type: str = "ContactPoint"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "ContactPoint"

    def to_dict(self) -> dict[str, object]:
        return compact(
            {
                "@type": self.type,
                "telephone": self.telephone,
                "contactType": self.contact_type,
                "areaServed": self.area_served,
                "availableLanguage": self.available_language,
            },
        )


@dataclass
class PostalAddress:
    """See https://schema.org/PostalAddress"""

    street_address: str = ""
    address_locality: str = ""
    address_region: str = ""
    postal_code: str = ""
    address_country: str = ""
    type: str = "PostalAddress"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "PostalAddress"

    def to_dict(self) -> dict[str, object]:
        return compact(
            {
                "@type": self.type,
                "streetAddress": self.street_address,
                "addressLocality": self.address_locality,
                "addressRegion": self.address_region,
                "postalCode": self.postal_code,
                "addressCountry": self.address_country,
            },
        )


@dataclass
class GeoCoordinates:
    """See https://schema.org/GeoCoordinates"""

    latitude: float | None = None
    longitude: float | None = None
    type: str = "GeoCoordinates"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "GeoCoordinates"

    def to_dict(self) -> dict[str, object]:
        return compact(
            {"@type": self.type, "latitude": self.latitude, "longitude": self.longitude},
        )


@dataclass
class Offer:
    """See https://schema.org/Offer"""

    price: str = ""
    price_currency: str = ""
    availability: str = ""
    url: str = ""
    valid_from: str = ""
    type: str = "Offer"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "Offer"

    def to_dict(self) -> dict[str, object]:
        return compact(
            {
                "@type": self.type,
                "price": self.price,
                "priceCurrency": self.price_currency,
                "availability": self.availability,
                "url": self.url,
                "validFrom": self.valid_from,
            },
        )
