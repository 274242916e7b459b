"""Event store adapter — stored Event rows to the API shape.

Learn: Reads eager-load the venue behind `venue_id`. If it resolved,
the API shape embeds a compact venue and `venueId` is that venue's id.
If the reference dangles, `venue` is null and `venueId` is the raw
reference. Every read path goes through to_api_shape so list and get
always agree.
"""

from unievents.db.models import Event, Venue
from unievents.schemas.event import EventRead
from unievents.schemas.venue import VenueRead


def venue_to_api(venue: Venue) -> VenueRead:
    return VenueRead(
        id=str(venue.id),
        name=venue.name,
        location=venue.location,
        capacity=venue.capacity,
        address=venue.address,
        map_link=venue.map_link,
    )


def to_api_shape(event: Event) -> EventRead:
    venue = event.venue
    return EventRead(
        id=str(event.id),
        title=event.title,
        description=event.description,
        type=event.type,
        start_date=event.start_date,
        end_date=event.end_date,
        registration_deadline=event.registration_deadline,
        max_participants=event.max_participants,
        registered_count=event.registered_count or 0,
        status=event.status,
        venue=venue_to_api(venue) if venue is not None else None,
        venue_id=str(venue.id) if venue is not None else event.venue_id,
        coordinators=[str(c) for c in (event.coordinators or [])],
        created_by=event.created_by,
        updated_by=event.updated_by,
        created_at=event.created_at,
        updated_at=event.updated_at,
    )
