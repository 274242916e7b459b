"""Pydantic schemas for events.

Learn: Separate "Create" (input), "Update" (partial input) and "Read"
(output) schemas. Ownership fields are server-managed: createdBy is
accepted on create only as a fallback, and updatedBy never.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from unievents.schemas.base import ApiModel
from unievents.schemas.venue import VenueRead

REFERENCE_PATTERN = r"^[0-9a-fA-F]{24}$"
STATUS_PATTERN = r"^(upcoming|ongoing|completed|cancelled)$"


class EventCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    type: Optional[str] = Field(None, max_length=50)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    registration_deadline: Optional[datetime] = None
    max_participants: Optional[int] = Field(None, ge=0)
    registered_count: int = Field(default=0, ge=0)
    status: str = Field(default="upcoming", pattern=STATUS_PATTERN)
    venue_id: Optional[str] = Field(None, pattern=REFERENCE_PATTERN)
    # Unfiltered here; invalid ids are dropped by the authority rules.
    coordinators: list[Optional[str]] = Field(default_factory=list)
    created_by: Optional[str] = None


class EventUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    type: Optional[str] = Field(None, max_length=50)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    registration_deadline: Optional[datetime] = None
    max_participants: Optional[int] = Field(None, ge=0)
    registered_count: Optional[int] = Field(None, ge=0)
    status: Optional[str] = Field(None, pattern=STATUS_PATTERN)
    venue_id: Optional[str] = Field(None, pattern=REFERENCE_PATTERN)
    coordinators: Optional[list[Optional[str]]] = None

    @field_validator("title", "status", "registered_count")
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it unchanged; these columns are NOT NULL.
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class EventRead(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    type: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    registration_deadline: Optional[datetime] = None
    max_participants: Optional[int] = None
    registered_count: int = 0
    status: str
    venue: Optional[VenueRead] = None
    venue_id: Optional[str] = None
    coordinators: list[str] = Field(default_factory=list)
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventEnvelope(ApiModel):
    success: bool = True
    data: EventRead


class EventListEnvelope(ApiModel):
    success: bool = True
    data: list[EventRead]
