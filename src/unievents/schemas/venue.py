"""Pydantic schemas for venues."""

from typing import Optional

from pydantic import Field

from unievents.schemas.base import ApiModel


class VenueCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=200)
    location: Optional[str] = Field(None, max_length=200)
    capacity: Optional[int] = Field(None, ge=0)
    address: Optional[str] = None
    map_link: Optional[str] = None


class VenueRead(ApiModel):
    """Compact venue shape, also embedded in listed events."""

    id: str
    name: str
    location: Optional[str] = None
    capacity: Optional[int] = None
    address: Optional[str] = None
    map_link: Optional[str] = None


class VenueEnvelope(ApiModel):
    success: bool = True
    data: VenueRead


class VenueListEnvelope(ApiModel):
    success: bool = True
    data: list[VenueRead]
