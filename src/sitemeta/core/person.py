"""Schema.org Person structured data."""

from dataclasses import dataclass, field

from sitemeta.core.organization import Organization
from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.types import (
    SCHEMA_CONTEXT,
    ImageObject,
    PostalAddress,
    compact,
    embedded,
)

PERSON_TYPE = "Person"


@dataclass
class Person:
    """Schema.org Person.

    See https://schema.org/Person
    """

    name: str = ""
    url: str = ""
    email: str = ""
    image: ImageObject | None = None
    job_title: str = ""
    works_for: Organization | None = None
    same_as: list[str] = field(default_factory=list)
    gender: str = ""
    birth_date: str = ""
    nationality: str = ""
    telephone: str = ""
    address: PostalAddress | None = None
    affiliation: Organization | None = None
    context: str = SCHEMA_CONTEXT
    type: str = PERSON_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = PERSON_TYPE
        for nested in (self.image, self.works_for, self.address, self.affiliation):
            if nested is not None:
                nested.ensure_defaults()

    def validate(self) -> list[str]:
        """Return warnings for missing recommended fields."""
        recommended = {
            "name": self.name,
            "email": self.email,
            "jobTitle": self.job_title,
        }
        return [
            f"missing recommended field: {key}"
            for key, value in recommended.items()
            if not value
        ]

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        return compact(
            {
                "@context": self.context,
                "@type": self.type,
                "name": self.name,
                "url": self.url,
                "email": self.email,
                "image": embedded(self.image),
                "jobTitle": self.job_title,
                "worksFor": embedded(self.works_for),
                "sameAs": self.same_as,
                "gender": self.gender,
                "birthDate": self.birth_date,
                "nationality": self.nationality,
                "telephone": self.telephone,
                "address": embedded(self.address),
                "affiliation": embedded(self.affiliation),
            },
        )

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"person-{generate_unique_key()}", self.to_dict())


def new_person(
    name: str,
    email: str = "",
    job_title: str = "",
    works_for: Organization | None = None,
    **kwargs: object,
) -> Person:
    """Create a Person with nested defaults applied.

    Args:
        name: Full name
        email: Contact email
        job_title: Job title
        works_for: Employer
        **kwargs: Any other Person field (url, image, same_as, address, ...)

    Returns:
        Person with context and type set
    """
    person = Person(
        name=name,
        email=email,
        job_title=job_title,
        works_for=works_for,
        **kwargs,  # type: ignore[arg-type]
    )
    person.ensure_defaults()
    return person
