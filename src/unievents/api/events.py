"""Event API routes.

Learn: Routes handle HTTP concerns (status codes, envelopes); the
service owns authorization and persistence. Domain errors raised by the
service (403, 404) are rendered by the handlers in errors.py.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from unievents.auth.dependencies import get_current_identity
from unievents.auth.identity import Identity
from unievents.config import Settings, get_settings
from unievents.db.engine import get_db
from unievents.errors import NotFound
from unievents.schemas.event import (
    EventCreate,
    EventEnvelope,
    EventListEnvelope,
    EventUpdate,
)
from unievents.services.event_service import EVENT_NOT_FOUND, EventService

router = APIRouter(prefix="/events")


def _svc(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> EventService:
    return EventService(db, strict_authority=settings.strict_event_authority)


@router.post("", response_model=EventEnvelope, status_code=201)
async def create_event(
    body: EventCreate,
    identity: Identity = Depends(get_current_identity),
    svc: EventService = Depends(_svc),
):
    event = await svc.create_event(body.model_dump(), identity)
    return EventEnvelope(data=event)


@router.get("", response_model=EventListEnvelope)
async def list_events(svc: EventService = Depends(_svc)):
    return EventListEnvelope(data=await svc.list_events())


@router.get("/{event_id}", response_model=EventEnvelope)
async def get_event(event_id: str, svc: EventService = Depends(_svc)):
    event = await svc.get_event(event_id)
    if event is None:
        raise NotFound(EVENT_NOT_FOUND)
    return EventEnvelope(data=event)


@router.put("/{event_id}", response_model=EventEnvelope)
async def update_event(
    event_id: str,
    body: EventUpdate,
    identity: Identity = Depends(get_current_identity),
    svc: EventService = Depends(_svc),
):
    event = await svc.update_event(
        event_id, body.model_dump(exclude_unset=True), identity
    )
    return EventEnvelope(data=event)


@router.delete("/{event_id}")
async def delete_event(
    event_id: str,
    identity: Identity = Depends(get_current_identity),
    svc: EventService = Depends(_svc),
):
    await svc.delete_event(event_id, identity)
    return {"success": True, "message": "Event deleted"}
