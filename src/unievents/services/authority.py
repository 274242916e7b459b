"""Event authority — who may mutate an event, and what ownership gets recorded.

Learn: The rules, per mutation kind:

- create: any authenticated identity. createdBy is stamped from the
  identity when it has a storable reference; otherwise a well-formed
  createdBy from the request body is kept; otherwise it stays unset.
- update: a coordinator must be listed in the event's coordinators or be
  its recorded creator. Every other role passes. updatedBy is stamped
  like createdBy.
- delete: no ownership check.

`strict=True` tightens update and delete: roles other than admin and
coordinator are refused, and delete gets the coordinator rule too.

Coordinator lists never keep the admin sentinel, empty values or ids
that are not well-formed references.
"""

import enum
from typing import Any, Iterable, Optional

import structlog

from unievents.auth.identity import ADMIN_SENTINEL, Identity
from unievents.db.ids import is_reference
from unievents.db.models import Event
from unievents.errors import Forbidden

logger = structlog.get_logger()

UPDATE_DENIED_MESSAGE = (
    "You do not have permission to update this event. "
    "Only assigned coordinators can update events."
)
DELETE_DENIED_MESSAGE = (
    "You do not have permission to delete this event. "
    "Only assigned coordinators can delete events."
)

PRIVILEGED_ROLES = ("admin", "coordinator")


class MutationKind(str, enum.Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


def is_event_coordinator(identity: Identity, event: Event) -> bool:
    """True if the identity is assigned to or created the event."""
    coordinators = {str(c) for c in (event.coordinators or [])}
    if identity.id in coordinators:
        return True
    return event.created_by is not None and str(event.created_by) == identity.id


def can_mutate(
    identity: Identity,
    event: Optional[Event],
    kind: MutationKind,
    strict: bool = False,
) -> bool:
    if kind is MutationKind.CREATE:
        return True

    if strict and identity.role not in PRIVILEGED_ROLES:
        return False

    if identity.role == "coordinator" and (kind is MutationKind.UPDATE or strict):
        return event is not None and is_event_coordinator(identity, event)

    return True


def require_mutation(
    identity: Identity,
    event: Optional[Event],
    kind: MutationKind,
    strict: bool = False,
) -> None:
    """Raise Forbidden unless can_mutate() allows the mutation."""
    if can_mutate(identity, event, kind, strict=strict):
        return

    logger.warning(
        f"event.{kind.value}_denied",
        user_id=identity.id,
        role=identity.role,
        event_id=event.id if event is not None else None,
    )
    if kind is MutationKind.DELETE:
        raise Forbidden(DELETE_DENIED_MESSAGE)
    raise Forbidden(UPDATE_DENIED_MESSAGE)


def sanitize_coordinator_ids(coordinators: Iterable[Any]) -> list[str]:
    """Keep only well-formed references, never the admin sentinel."""
    return [
        str(c)
        for c in coordinators
        if c and str(c) != ADMIN_SENTINEL and is_reference(str(c))
    ]


def sanitize_ownership_fields(
    identity: Identity, body: dict, kind: MutationKind
) -> dict:
    """Return a copy of body with ownership fields set by the rules above.

    body uses model attribute names (created_by, updated_by, coordinators).
    """
    data = dict(body)
    supplied_creator = data.pop("created_by", None)
    data.pop("updated_by", None)
    ref = identity.reference

    if kind is MutationKind.CREATE:
        if ref is not None:
            data["created_by"] = ref
        elif is_reference(supplied_creator):
            data["created_by"] = supplied_creator
    elif kind is MutationKind.UPDATE and ref is not None:
        data["updated_by"] = ref

    if "coordinators" in data:
        if data["coordinators"] is None:
            del data["coordinators"]
        else:
            data["coordinators"] = sanitize_coordinator_ids(data["coordinators"])

    return data
