"""Event service — business logic for event CRUD.

Learn: Service layer separates business logic from HTTP routing.
API routes call services, services call the database. Authorization
(services/authority.py) runs here, right before the write it guards,
so every caller of the service gets the same rules.
"""

from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from unievents.auth.identity import Identity
from unievents.db.ids import is_reference
from unievents.db.models import Event
from unievents.errors import NotFound
from unievents.schemas.event import EventRead
from unievents.services.authority import (
    MutationKind,
    require_mutation,
    sanitize_ownership_fields,
)
from unievents.services.event_store import to_api_shape

logger = structlog.get_logger()

EVENT_NOT_FOUND = "Event not found"


class EventService:
    """Business logic for events."""

    def __init__(self, db: AsyncSession, strict_authority: bool = False):
        self.db = db
        self.strict_authority = strict_authority

    async def _load(self, event_id: str) -> Optional[Event]:
        if not is_reference(event_id):
            return None
        result = await self.db.execute(
            select(Event)
            .where(Event.id == event_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def create_event(self, body: dict, identity: Identity) -> EventRead:
        require_mutation(
            identity, None, MutationKind.CREATE, strict=self.strict_authority
        )
        data = sanitize_ownership_fields(identity, body, MutationKind.CREATE)

        event = Event(**data)
        self.db.add(event)
        await self.db.commit()

        created = await self._load(event.id)
        logger.info(
            "event.created",
            event_id=created.id,
            user_id=identity.id,
            coordinators=len(created.coordinators),
        )
        return to_api_shape(created)

    async def list_events(self) -> list[EventRead]:
        result = await self.db.execute(
            select(Event)
            .order_by(Event.created_at, Event.id)
            .execution_options(populate_existing=True)
        )
        return [to_api_shape(e) for e in result.scalars().all()]

    async def get_event(self, event_id: str) -> Optional[EventRead]:
        event = await self._load(event_id)
        if event is None:
            return None
        return to_api_shape(event)

    async def update_event(
        self, event_id: str, body: dict, identity: Identity
    ) -> EventRead:
        event = await self._load(event_id)
        if event is None:
            raise NotFound(EVENT_NOT_FOUND)

        require_mutation(
            identity, event, MutationKind.UPDATE, strict=self.strict_authority
        )
        data = sanitize_ownership_fields(identity, body, MutationKind.UPDATE)
        for field, value in data.items():
            setattr(event, field, value)
        await self.db.commit()

        updated = await self._load(event.id)
        logger.info(
            "event.updated",
            event_id=event_id,
            user_id=identity.id,
            fields=sorted(data),
        )
        return to_api_shape(updated)

    async def delete_event(self, event_id: str, identity: Identity) -> None:
        event = await self._load(event_id)
        if event is None:
            raise NotFound(EVENT_NOT_FOUND)

        require_mutation(
            identity, event, MutationKind.DELETE, strict=self.strict_authority
        )
        await self.db.delete(event)
        await self.db.commit()
        logger.info("event.deleted", event_id=event_id, user_id=identity.id)
