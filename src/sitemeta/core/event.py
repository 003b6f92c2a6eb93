"""Schema.org Event structured data."""

from dataclasses import dataclass, field

from sitemeta.core.organization import Organization
from sitemeta.core.person import Person
from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.types import (
    SCHEMA_CONTEXT,
    GeoCoordinates,
    Offer,
    PostalAddress,
    compact,
    embedded,
)

EVENT_TYPE = "Event"
PLACE_TYPE = "Place"


@dataclass
class Place:
    """Venue of an event.

    See https://schema.org/Place
    """

    name: str = ""
    address: PostalAddress | None = None
    geo: GeoCoordinates | None = None
    context: str = SCHEMA_CONTEXT
    type: str = PLACE_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = PLACE_TYPE
        if self.address is not None:
            self.address.ensure_defaults()
        if self.geo is not None:
            self.geo.ensure_defaults()

    def to_dict(self) -> dict[str, object]:
        return compact(
            {
                "@context": self.context,
                "@type": self.type,
                "name": self.name,
                "address": embedded(self.address),
                "geo": embedded(self.geo),
            },
        )


@dataclass
class Event:
    """Schema.org Event.

    Status and attendance mode take Schema.org enumeration URLs, e.g.
    "https://schema.org/EventScheduled" and
    "https://schema.org/OfflineEventAttendanceMode".

    See https://schema.org/Event
    """

    name: str = ""
    description: str = ""
    start_date: str = ""
    end_date: str = ""
    location: Place | None = None
    organizer: Organization | None = None
    performer: Person | None = None
    offers: Offer | None = None
    event_status: str = ""
    event_attendance_mode: str = ""
    image: list[str] = field(default_factory=list)
    context: str = SCHEMA_CONTEXT
    type: str = EVENT_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = EVENT_TYPE
        for nested in (self.location, self.organizer, self.performer, self.offers):
            if nested is not None:
                nested.ensure_defaults()

    def validate(self) -> list[str]:
        """Return warnings for missing recommended fields."""
        warnings: list[str] = []
        if not self.name:
            warnings.append("missing recommended field: name")
        if not self.start_date:
            warnings.append("missing recommended field: startDate")
        if self.location is None:
            warnings.append("missing recommended field: location")
        return warnings

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary, omitting empty fields."""
        return compact(
            {
                "@context": self.context,
                "@type": self.type,
                "name": self.name,
                "description": self.description,
                "startDate": self.start_date,
                "endDate": self.end_date,
                "location": embedded(self.location),
                "organizer": embedded(self.organizer),
                "performer": embedded(self.performer),
                "offers": embedded(self.offers),
                "eventStatus": self.event_status,
                "eventAttendanceMode": self.event_attendance_mode,
                "image": self.image,
            },
        )

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"event-{generate_unique_key()}", self.to_dict())


def new_event(
    name: str,
    description: str,
    start_date: str,
    end_date: str,
    location: Place | None,
    organizer: Organization | None = None,
    performer: Person | None = None,
    offers: Offer | None = None,
    event_status: str = "",
    event_attendance_mode: str = "",
    images: list[str] | None = None,
) -> Event:
    event = Event(
        name=name,
        description=description,
        start_date=start_date,
        end_date=end_date,
        location=location,
        organizer=organizer,
        performer=performer,
        offers=offers,
        event_status=event_status,
        event_attendance_mode=event_attendance_mode,
        image=images or [],
    )
    event.ensure_defaults()
    return event
