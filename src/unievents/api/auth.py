"""Auth API — login and current identity.

- POST /auth/login → email/password → {token, user}
- GET /auth/me → the identity embedded in the bearer token
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from unievents.auth.credentials import AuthService
from unievents.auth.dependencies import get_auth_service, get_current_identity
from unievents.auth.identity import Identity
from unievents.schemas.auth import LoginRequest, LoginResponse, MeResponse

router = APIRouter(prefix="/auth")


@router.post(
    "/login", response_model=LoginResponse, response_model_exclude_none=True
)
async def login(
    body: Optional[LoginRequest] = Body(None),
    svc: AuthService = Depends(get_auth_service),
):
    """Login with email and password → signed token and identity."""
    body = body or LoginRequest()
    result = await svc.login(body.email, body.password)
    return LoginResponse(token=result.token, user=result.user)


@router.get("/me", response_model=MeResponse, response_model_exclude_none=True)
async def get_me(identity: Identity = Depends(get_current_identity)):
    """The identity projection carried by the token (not re-read from storage)."""
    return MeResponse(user=identity)
