"""Pydantic schemas for login and the current identity."""

from typing import Optional

from pydantic import BaseModel

from unievents.auth.identity import Identity


class LoginRequest(BaseModel):
    # Optional so a missing field reaches the service and becomes a 400.
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    user: Identity


class MeResponse(BaseModel):
    success: bool = True
    user: Identity
