"""Twitter Card meta tags."""

from dataclasses import dataclass
from enum import StrEnum

from sitemeta.core.render import render_meta_tags


class CardType(StrEnum):
    """Supported twitter:card values."""

    SUMMARY = "summary"
    SUMMARY_LARGE_IMAGE = "summary_large_image"
    APP = "app"
    PLAYER = "player"


@dataclass
class TwitterCard:
    """Twitter Card metadata.

    Only the fields relevant to the card type are rendered: app cards add the
    iPhone app id, player cards add the player URL and its size.
    """

    card: CardType | str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    site: str = ""
    creator: str = ""
    app_id: str = ""
    player_url: str = ""
    player_width: str = ""
    player_height: str = ""

    def ensure_defaults(self) -> None:
        if not self.card:
            self.card = CardType.SUMMARY

    def validate(self) -> list[str]:
        """Return warnings for fields the card type requires."""
        warnings: list[str] = []
        if not self.title:
            warnings.append("missing required field: title")
        if self.card == CardType.SUMMARY_LARGE_IMAGE and not self.image:
            warnings.append("summary_large_image card should include an image")
        if self.card == CardType.APP and not self.app_id:
            warnings.append("app card requires an app id")
        if self.card == CardType.PLAYER and not self.player_url:
            warnings.append("player card requires a player URL")
        return warnings

    def meta_tags(self) -> list[tuple[str, str]]:
        """Return (name, content) pairs in rendering order."""
        tags = [
            ("twitter:card", str(self.card)),
            ("twitter:title", self.title),
            ("twitter:description", self.description),
            ("twitter:image", self.image),
            ("twitter:site", self.site),
            ("twitter:creator", self.creator),
        ]
        if self.card == CardType.APP:
            tags.append(("twitter:app:id:iphone", self.app_id))
        if self.card == CardType.PLAYER:
            tags.extend(
                [
                    ("twitter:player", self.player_url),
                    ("twitter:player:width", self.player_width),
                    ("twitter:player:height", self.player_height),
                ],
            )
        return tags

    def to_meta_tags(self) -> str:
        """Render as `<meta name="twitter:...">` tags, skipping empty values."""
        self.ensure_defaults()
        return render_meta_tags("name", self.meta_tags())


def new_card(
    card: CardType,
    title: str,
    description: str,
    image: str,
    site: str,
    creator: str,
) -> TwitterCard:
    twitter_card = TwitterCard(
        card=card,
        title=title,
        description=description,
        image=image,
        site=site,
        creator=creator,
    )
    twitter_card.ensure_defaults()
    return twitter_card


def new_summary_card(
    title: str,
    description: str,
    image: str,
    site: str,
    creator: str,
) -> TwitterCard:
    return new_card(CardType.SUMMARY, title, description, image, site, creator)


def new_summary_large_image_card(
    title: str,
    description: str,
    image: str,
    site: str,
    creator: str,
) -> TwitterCard:
    return new_card(CardType.SUMMARY_LARGE_IMAGE, title, description, image, site, creator)


def new_app_card(
    title: str,
    description: str,
    image: str,
    site: str,
    app_id: str,
) -> TwitterCard:
    """Create an app card for the given iPhone app id."""
    card = new_card(CardType.APP, title, description, image, site, "")
    card.app_id = app_id
    return card


def new_player_card(
    title: str,
    description: str,
    image: str,
    site: str,
    player_url: str,
) -> TwitterCard:
    """Create a player card embedding the media player at player_url."""
    card = new_card(CardType.PLAYER, title, description, image, site, "")
    card.player_url = player_url
    return card
