"""Pydantic schemas for registrations.

Learn: The registrant is always the caller, and the status is set by
the server. A client that sends userId or status has them ignored.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from unievents.schemas.base import ApiModel
from unievents.schemas.event import REFERENCE_PATTERN


class RegistrationCreate(ApiModel):
    event_id: str = Field(..., pattern=REFERENCE_PATTERN)
    form_data: dict[str, Any] = Field(default_factory=dict)


class RegistrationRead(ApiModel):
    id: str
    event_id: str
    user_id: str
    status: str
    form_data: dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None


class RegistrationEnvelope(ApiModel):
    success: bool = True
    data: RegistrationRead


class RegistrationListEnvelope(ApiModel):
    success: bool = True
    data: list[RegistrationRead]
