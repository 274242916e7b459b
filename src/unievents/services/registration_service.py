"""Registration service — sign a user up for an event.

Learn: Capacity is enforced by a conditional UPDATE
(registered_count < max_participants) rather than read-then-write, so
two concurrent sign-ups cannot both take the last seat. The seat and
the registration row commit together; if the row insert hits the
(event, user) unique constraint the whole transaction rolls back and
the seat is released.
"""

from datetime import datetime, timezone

import structlog
from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from unievents.auth.identity import Identity
from unievents.db.models import Event, Registration, utcnow
from unievents.errors import Conflict, Forbidden, NotFound, RegistrationClosed
from unievents.schemas.registration import RegistrationRead
from unievents.services.event_service import EVENT_NOT_FOUND

logger = structlog.get_logger()

ALREADY_REGISTERED = "Already registered for this event"
CLOSED_STATUSES = ("completed", "cancelled")


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; stored values are UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class RegistrationService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _already_registered(self, event_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            select(Registration.id).where(
                Registration.event_id == event_id,
                Registration.user_id == user_id,
            )
        )
        return result.first() is not None

    async def _take_seat(self, event_id: str) -> bool:
        result = await self.db.execute(
            update(Event)
            .where(
                Event.id == event_id,
                or_(
                    Event.max_participants.is_(None),
                    Event.registered_count < Event.max_participants,
                ),
            )
            .values(registered_count=Event.registered_count + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def register(self, body: dict, identity: Identity) -> RegistrationRead:
        user_id = identity.reference
        if user_id is None:
            raise Forbidden("Only stored accounts can register for events")

        event_id = body["event_id"]
        event = await self.db.get(Event, event_id, populate_existing=True)
        if event is None:
            raise NotFound(EVENT_NOT_FOUND)
        if event.status in CLOSED_STATUSES:
            raise RegistrationClosed(f"Event is {event.status}")
        deadline = event.registration_deadline
        if deadline is not None and _as_utc(deadline) < utcnow():
            raise RegistrationClosed("Registration deadline has passed")
        if await self._already_registered(event_id, user_id):
            raise Conflict(ALREADY_REGISTERED)

        if not await self._take_seat(event_id):
            logger.info("registration.full", event_id=event_id, user_id=user_id)
            raise RegistrationClosed("Event is full")

        registration = Registration(
            event_id=event_id,
            user_id=user_id,
            form_data=body.get("form_data") or {},
        )
        self.db.add(registration)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise Conflict(ALREADY_REGISTERED)
        await self.db.commit()

        logger.info(
            "registration.created",
            registration_id=registration.id,
            event_id=event_id,
            user_id=user_id,
        )
        return RegistrationRead.model_validate(registration)

    async def list_mine(self, identity: Identity) -> list[RegistrationRead]:
        user_id = identity.reference
        if user_id is None:
            return []
        result = await self.db.execute(
            select(Registration)
            .where(Registration.user_id == user_id)
            .order_by(Registration.created_at, Registration.id)
        )
        return [RegistrationRead.model_validate(r) for r in result.scalars().all()]
