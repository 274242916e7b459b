"""Event authority rules — pure functions, no database."""

import pytest

from unievents.auth.identity import ADMIN_SENTINEL, Identity
from unievents.db.models import Event
from unievents.errors import Forbidden
from unievents.services.authority import (
    UPDATE_DENIED_MESSAGE,
    MutationKind,
    can_mutate,
    require_mutation,
    sanitize_coordinator_ids,
    sanitize_ownership_fields,
)

COORD_ID = "65f1a2b3c4d5e6f708192a01"
OTHER_ID = "65f1a2b3c4d5e6f708192a02"
CREATOR_ID = "65f1a2b3c4d5e6f708192a03"


def _identity(id: str, role: str) -> Identity:
    return Identity(
        id=id,
        username=role,
        email=f"{role}@uni.edu",
        first_name="F",
        last_name="L",
        role=role,
    )


def _event(coordinators=(), created_by=None) -> Event:
    return Event(
        id="65f1a2b3c4d5e6f708192aff",
        title="Tech Fest",
        coordinators=list(coordinators),
        created_by=created_by,
    )


coordinator = _identity(COORD_ID, "coordinator")
student = _identity(OTHER_ID, "student")
admin = _identity(ADMIN_SENTINEL, "admin")


# ═══════════════════════════════════════════════════════════
# can_mutate
# ═══════════════════════════════════════════════════════════


@pytest.mark.parametrize("who", [coordinator, student, admin])
def test_create_always_permitted(who):
    assert can_mutate(who, None, MutationKind.CREATE)
    assert can_mutate(who, None, MutationKind.CREATE, strict=True)


def test_unassigned_coordinator_cannot_update():
    event = _event(coordinators=[OTHER_ID], created_by=CREATOR_ID)
    assert not can_mutate(coordinator, event, MutationKind.UPDATE)


def test_unassigned_coordinator_cannot_update_event_without_creator():
    assert not can_mutate(coordinator, _event(), MutationKind.UPDATE)


def test_assigned_coordinator_can_update_regardless_of_creator():
    event = _event(coordinators=[OTHER_ID, COORD_ID], created_by=CREATOR_ID)
    assert can_mutate(coordinator, event, MutationKind.UPDATE)


def test_creator_coordinator_can_update():
    event = _event(coordinators=[OTHER_ID], created_by=COORD_ID)
    assert can_mutate(coordinator, event, MutationKind.UPDATE)


@pytest.mark.parametrize("who", [admin, student])
def test_other_roles_update_unconditionally(who):
    event = _event(coordinators=[COORD_ID], created_by=CREATOR_ID)
    assert can_mutate(who, event, MutationKind.UPDATE)


@pytest.mark.parametrize("who", [coordinator, student, admin])
def test_delete_has_no_ownership_check(who):
    assert can_mutate(who, _event(created_by=CREATOR_ID), MutationKind.DELETE)


def test_strict_mode_refuses_students():
    event = _event()
    assert not can_mutate(student, event, MutationKind.UPDATE, strict=True)
    assert not can_mutate(student, event, MutationKind.DELETE, strict=True)


def test_strict_mode_applies_ownership_to_delete():
    assert not can_mutate(coordinator, _event(), MutationKind.DELETE, strict=True)
    owned = _event(coordinators=[COORD_ID])
    assert can_mutate(coordinator, owned, MutationKind.DELETE, strict=True)
    assert can_mutate(admin, _event(), MutationKind.DELETE, strict=True)


def test_require_mutation_raises_forbidden_with_message():
    with pytest.raises(Forbidden) as exc:
        require_mutation(coordinator, _event(created_by=CREATOR_ID), MutationKind.UPDATE)
    assert exc.value.status_code == 403
    assert exc.value.message == UPDATE_DENIED_MESSAGE


# ═══════════════════════════════════════════════════════════
# Sanitization
# ═══════════════════════════════════════════════════════════


def test_sanitize_coordinators_keeps_only_references():
    assert sanitize_coordinator_ids([ADMIN_SENTINEL, "", COORD_ID]) == [COORD_ID]


def test_sanitize_coordinators_drops_none_and_short_ids():
    assert sanitize_coordinator_ids([None, "abc", "z" * 24, OTHER_ID]) == [OTHER_ID]


def test_create_stamps_creator_from_identity():
    data = sanitize_ownership_fields(
        coordinator, {"title": "T", "created_by": OTHER_ID}, MutationKind.CREATE
    )
    assert data["created_by"] == COORD_ID


def test_create_by_admin_falls_back_to_body_creator():
    data = sanitize_ownership_fields(
        admin, {"title": "T", "created_by": OTHER_ID}, MutationKind.CREATE
    )
    assert data["created_by"] == OTHER_ID


def test_create_by_admin_with_malformed_body_creator_leaves_it_unset():
    data = sanitize_ownership_fields(
        admin, {"title": "T", "created_by": ADMIN_SENTINEL}, MutationKind.CREATE
    )
    assert "created_by" not in data


def test_create_filters_coordinators():
    data = sanitize_ownership_fields(
        admin,
        {"title": "T", "coordinators": [ADMIN_SENTINEL, "", COORD_ID]},
        MutationKind.CREATE,
    )
    assert data["coordinators"] == [COORD_ID]


def test_update_stamps_updater_and_ignores_supplied_ownership():
    data = sanitize_ownership_fields(
        coordinator,
        {"title": "T", "created_by": OTHER_ID, "updated_by": OTHER_ID},
        MutationKind.UPDATE,
    )
    assert data == {"title": "T", "updated_by": COORD_ID}


def test_update_by_admin_does_not_stamp_updater():
    data = sanitize_ownership_fields(admin, {"title": "T"}, MutationKind.UPDATE)
    assert data == {"title": "T"}


def test_sanitize_does_not_mutate_input():
    body = {"title": "T", "coordinators": [ADMIN_SENTINEL]}
    sanitize_ownership_fields(admin, body, MutationKind.CREATE)
    assert body == {"title": "T", "coordinators": [ADMIN_SENTINEL]}
