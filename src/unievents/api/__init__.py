"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Read-only event and venue routes are public; mutations declare
Depends(get_current_identity) themselves because the handlers need the
identity, not just the check. Registration routes always act on the
caller, so both of them require a token. Health and login are open.
"""

from fastapi import APIRouter

from unievents.api.auth import router as auth_router
from unievents.api.events import router as events_router
from unievents.api.health import router as health_router
from unievents.api.registrations import router as registrations_router
from unievents.api.venues import router as venues_router

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(events_router, tags=["events"])
api_router.include_router(venues_router, tags=["venues"])
api_router.include_router(registrations_router, tags=["registrations"])
