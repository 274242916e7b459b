"""SQLAlchemy ORM models — single source of truth for the database schema.

Learn: Declarative ORM mapping with SQLAlchemy 2.0 style (Mapped[] + mapped_column).
Each class = one table. Alembic migrations mirror these models.

Key concepts:
- 24-char hex object ids as primary keys (see db/ids.py)
- Cross-document references (event → venue, event → coordinators,
  event → creator) are plain id columns without foreign keys, so a
  reference may dangle; reads resolve what they can
- Generic JSON for the coordinator list and registration form data so
  the schema runs on both PostgreSQL and SQLite
- One registration per (event, user), enforced by a unique constraint
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, JSON, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from unievents.db.ids import new_object_id


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


ROLES = ("admin", "coordinator", "student")


class User(Base):
    """A stored account: students, coordinators and non-environment admins."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id
    )
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False
    )  # stored lower-cased
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default="student"
    )  # admin, coordinator, student
    department: Mapped[Optional[str]] = mapped_column(String(100))
    student_id: Mapped[Optional[str]] = mapped_column(String(50))
    faculty_id: Mapped[Optional[str]] = mapped_column(String(50))
    course: Mapped[Optional[str]] = mapped_column(String(100))
    branch: Mapped[Optional[str]] = mapped_column(String(100))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )


class Venue(Base):
    """A place events are held."""

    __tablename__ = "venues"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(200))
    capacity: Mapped[Optional[int]] = mapped_column(Integer)
    address: Mapped[Optional[str]] = mapped_column(Text)
    map_link: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )


class Event(Base):
    """A campus event.

    Learn: `venue` is a view-only relationship over the `venue_id`
    reference. It is always eager-loaded (lazy="selectin") because async
    sessions cannot lazy-load on attribute access. When `venue_id` points
    at nothing, `venue` is simply None.
    """

    __tablename__ = "events"

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    type: Mapped[Optional[str]] = mapped_column(String(50))
    start_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    end_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    registration_deadline: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True)
    )
    max_participants: Mapped[Optional[int]] = mapped_column(Integer)
    registered_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="upcoming"
    )  # upcoming, ongoing, completed, cancelled
    venue_id: Mapped[Optional[str]] = mapped_column(String(24), index=True)
    coordinators: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_by: Mapped[Optional[str]] = mapped_column(String(24))
    updated_by: Mapped[Optional[str]] = mapped_column(String(24))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    venue: Mapped[Optional["Venue"]] = relationship(
        primaryjoin="foreign(Event.venue_id) == Venue.id",
        viewonly=True,
        lazy="selectin",
    )


class Registration(Base):
    """A user's sign-up for an event.

    Learn: event_id and user_id are references like the ones on Event,
    not foreign keys. The (event_id, user_id) constraint is what makes
    a second sign-up for the same event fail, even when two requests race.
    """

    __tablename__ = "registrations"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_registrations_event_user"),
    )

    id: Mapped[str] = mapped_column(
        String(24), primary_key=True, default=new_object_id
    )
    event_id: Mapped[str] = mapped_column(String(24), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(24), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="approved"
    )  # pending, approved, rejected, cancelled
    form_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
