"""Venue API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from unievents.auth.dependencies import get_current_identity
from unievents.auth.identity import Identity
from unievents.db.engine import get_db
from unievents.schemas.venue import VenueCreate, VenueEnvelope, VenueListEnvelope
from unievents.services.venue_service import VenueService

router = APIRouter(prefix="/venues")


def _svc(db: AsyncSession = Depends(get_db)) -> VenueService:
    return VenueService(db)


@router.post("", response_model=VenueEnvelope, status_code=201)
async def create_venue(
    body: VenueCreate,
    identity: Identity = Depends(get_current_identity),
    svc: VenueService = Depends(_svc),
):
    venue = await svc.create_venue(body.model_dump(), identity)
    return VenueEnvelope(data=venue)


@router.get("", response_model=VenueListEnvelope)
async def list_venues(svc: VenueService = Depends(_svc)):
    return VenueListEnvelope(data=await svc.list_venues())
