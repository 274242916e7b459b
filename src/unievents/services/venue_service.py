"""Venue service — create and list the places events point at."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from unievents.auth.identity import Identity
from unievents.db.models import Venue
from unievents.schemas.venue import VenueRead
from unievents.services.event_store import venue_to_api

logger = structlog.get_logger()


class VenueService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_venue(self, body: dict, identity: Identity) -> VenueRead:
        venue = Venue(**body)
        self.db.add(venue)
        await self.db.commit()
        logger.info("venue.created", venue_id=venue.id, user_id=identity.id)
        return venue_to_api(venue)

    async def list_venues(self) -> list[VenueRead]:
        result = await self.db.execute(select(Venue).order_by(Venue.name))
        return [venue_to_api(v) for v in result.scalars().all()]
