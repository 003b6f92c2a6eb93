"""Ratings and reviews attached to products and local businesses."""

from dataclasses import dataclass

from sitemeta.core.person import Person
from sitemeta.core.types import compact, embedded


@dataclass
class Rating:
    """See https://schema.org/Rating"""

    rating_value: float | None = None
    best_rating: float | None = None
    worst_rating: float | None = None
    type: str = "Rating"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "Rating"

    def to_dict(self) -> dict[str, object]:
        return compact(
            {
                "@type": self.type,
                "ratingValue": self.rating_value,
                "bestRating": self.best_rating,
                "worstRating": self.worst_rating,
            },
        )


@dataclass
class AggregateRating:
    """Average rating over a number of reviews.

    See https://schema.org/AggregateRating
    """

    rating_value: float | None = None
    review_count: int | None = None
    best_rating: float | None = None
    worst_rating: float | None = None
    type: str = "AggregateRating"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "AggregateRating"

    def to_dict(self) -> dict[str, object]:
        return compact(
            {
                "@type": self.type,
                "ratingValue": self.rating_value,
                "reviewCount": self.review_count,
                "bestRating": self.best_rating,
                "worstRating": self.worst_rating,
            },
        )


@dataclass
class Review:
    """See https://schema.org/Review"""

    review_body: str = ""
    author: Person | None = None
    date_published: str = ""
    review_rating: Rating | None = None
    type: str = "Review"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "Review"
        if self.author is not None:
            self.author.ensure_defaults()
        if self.review_rating is not None:
            self.review_rating.ensure_defaults()

    def to_dict(self) -> dict[str, object]:
        return compact(
            {
                "@type": self.type,
                "reviewBody": self.review_body,
                "author": embedded(self.author),
                "datePublished": self.date_published,
                "reviewRating": embedded(self.review_rating),
            },
        )
