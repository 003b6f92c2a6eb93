"""OpenGraph meta tags.

See https://ogp.me/ for the meaning of the properties.
"""

from dataclasses import dataclass

from sitemeta.core.render import render_meta_tags

WEBSITE_TYPE = "website"
PRODUCT_TYPE = "product"
RESTAURANT_TYPE = "restaurant"


@dataclass
class OpenGraphObject:
    """Metadata shared by every OpenGraph type."""

    type: str = ""
    title: str = ""
    url: str = ""
    description: str = ""
    image: str = ""

    def ensure_defaults(self, default_type: str) -> None:
        if not self.type:
            self.type = default_type


@dataclass
class OpenGraphWebSite(OpenGraphObject):
    """OpenGraph `website` object."""

    def ensure_defaults(self, default_type: str = WEBSITE_TYPE) -> None:
        super().ensure_defaults(default_type)

    def meta_tags(self) -> list[tuple[str, str]]:
        """Return (property, content) pairs in rendering order."""
        return [
            ("og:type", WEBSITE_TYPE),
            ("og:title", self.title),
            ("og:url", self.url),
            ("og:description", self.description),
            ("og:image", self.image),
        ]

    def to_meta_tags(self) -> str:
        """Render as `<meta property="og:...">` tags, skipping empty values."""
        self.ensure_defaults()
        return render_meta_tags("property", self.meta_tags())


def new_og_website(title: str, url: str, description: str, image: str) -> OpenGraphWebSite:
    """Create an OpenGraph website with type "website"."""
    website = OpenGraphWebSite(
        title=title,
        url=url,
        description=description,
        image=image,
    )
    website.ensure_defaults()
    return website


@dataclass
class OpenGraphProduct(OpenGraphObject):
    """OpenGraph `product` object with its price."""

    price: str = ""
    price_currency: str = ""

    def ensure_defaults(self, default_type: str = PRODUCT_TYPE) -> None:
        super().ensure_defaults(default_type)

    def meta_tags(self) -> list[tuple[str, str]]:
        """Return (property, content) pairs in rendering order."""
        return [
            ("og:type", PRODUCT_TYPE),
            ("og:title", self.title),
            ("og:url", self.url),
            ("og:description", self.description),
            ("og:image", self.image),
            ("product:price:amount", self.price),
            ("product:price:currency", self.price_currency),
        ]

    def to_meta_tags(self) -> str:
        self.ensure_defaults()
        return render_meta_tags("property", self.meta_tags())


def new_og_product(
    title: str,
    url: str,
    description: str,
    image: str,
    price: str,
    price_currency: str,
) -> OpenGraphProduct:
    product = OpenGraphProduct(
        title=title,
        url=url,
        description=description,
        image=image,
        price=price,
        price_currency=price_currency,
    )
    product.ensure_defaults()
    return product


@dataclass
class OpenGraphRestaurant(OpenGraphObject):
    """OpenGraph `restaurant` object.

    Contact data renders as `place:contact_data:*` tags, the menu and
    reservation pages as `restaurant:menu` and `restaurant:reservation`.
    """

    street_address: str = ""
    locality: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""
    phone: str = ""
    menu_url: str = ""
    reservation_url: str = ""

    def ensure_defaults(self, default_type: str = RESTAURANT_TYPE) -> None:
        super().ensure_defaults(default_type)

    def meta_tags(self) -> list[tuple[str, str]]:
        """Return (property, content) pairs in rendering order."""
        return [
            ("og:type", RESTAURANT_TYPE),
            ("og:title", self.title),
            ("og:url", self.url),
            ("og:description", self.description),
            ("og:image", self.image),
            ("place:contact_data:street_address", self.street_address),
            ("place:contact_data:locality", self.locality),
            ("place:contact_data:region", self.region),
            ("place:contact_data:postal_code", self.postal_code),
            ("place:contact_data:country_name", self.country),
            ("place:contact_data:phone_number", self.phone),
            ("restaurant:menu", self.menu_url),
            ("restaurant:reservation", self.reservation_url),
        ]

    def to_meta_tags(self) -> str:
        self.ensure_defaults()
        return render_meta_tags("property", self.meta_tags())


def new_og_restaurant(
    title: str,
    url: str,
    description: str,
    image: str,
    **contact: str,
) -> OpenGraphRestaurant:
    """Create an OpenGraph restaurant.

    Args:
        title: Restaurant name
        url: Canonical page URL
        description: Short description
        image: Image URL
        **contact: Address, phone, menu_url and reservation_url fields

    Returns:
        Restaurant with type "restaurant"
    """
    restaurant = OpenGraphRestaurant(
        title=title,
        url=url,
        description=description,
        image=image,
        **contact,
    )
    restaurant.ensure_defaults()
    return restaurant
