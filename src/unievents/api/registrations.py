"""Registration API routes. Both endpoints act on the caller's own sign-ups."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from unievents.auth.dependencies import get_current_identity
from unievents.auth.identity import Identity
from unievents.db.engine import get_db
from unievents.schemas.registration import (
    RegistrationCreate,
    RegistrationEnvelope,
    RegistrationListEnvelope,
)
from unievents.services.registration_service import RegistrationService

router = APIRouter(prefix="/registrations")


def _svc(db: AsyncSession = Depends(get_db)) -> RegistrationService:
    return RegistrationService(db)


@router.post("", response_model=RegistrationEnvelope, status_code=201)
async def register(
    body: RegistrationCreate,
    identity: Identity = Depends(get_current_identity),
    svc: RegistrationService = Depends(_svc),
):
    registration = await svc.register(body.model_dump(), identity)
    return RegistrationEnvelope(data=registration)


@router.get("/me/mine", response_model=RegistrationListEnvelope)
async def my_registrations(
    identity: Identity = Depends(get_current_identity),
    svc: RegistrationService = Depends(_svc),
):
    return RegistrationListEnvelope(data=await svc.list_mine(identity))
