"""The authenticated principal behind a request.

Learn: An Identity is the public projection of an account: what gets
signed into a token and what downstream authorization checks see.
Two kinds of principal can stand behind it:

- EnvironmentAdmin — the administrator configured through env vars.
  It has no stored document; its id is the reserved ADMIN_SENTINEL.
- PersistedUser(ref) — a stored user, identified by its object id.

Authorization code asks `identity.principal` which kind it is, and
`identity.reference` for an id that may be written into another row.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from unievents.config import AdminAccount
from unievents.db.ids import is_reference
from unievents.db.models import User

ADMIN_SENTINEL = "admin-env"

Role = Literal["admin", "coordinator", "student"]


@dataclass(frozen=True)
class EnvironmentAdmin:
    """Principal for the env-configured admin (no backing document)."""


@dataclass(frozen=True)
class PersistedUser:
    """Principal for a stored user."""

    ref: str


Principal = Union[EnvironmentAdmin, PersistedUser]


class Identity(BaseModel):
    """Immutable identity projection, serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: Role
    department: Optional[str] = None
    student_id: Optional[str] = None
    faculty_id: Optional[str] = None
    course: Optional[str] = None
    branch: Optional[str] = None

    @property
    def principal(self) -> Principal:
        if self.id == ADMIN_SENTINEL:
            return EnvironmentAdmin()
        return PersistedUser(ref=self.id)

    @property
    def reference(self) -> Optional[str]:
        """The id to record as creator/updater/coordinator, if storable."""
        principal = self.principal
        if isinstance(principal, PersistedUser) and is_reference(principal.ref):
            return principal.ref
        return None

    def to_claims(self) -> dict:
        """camelCase dict with absent optional fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def for_admin(cls, admin: AdminAccount) -> "Identity":
        return cls(
            id=ADMIN_SENTINEL,
            username=admin.username,
            email=admin.email,
            first_name=admin.first_name,
            last_name=admin.last_name,
            role="admin",
        )

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            department=user.department,
            student_id=user.student_id,
            faculty_id=user.faculty_id,
            course=user.course,
            branch=user.branch,
        )
