"""Read-only person directory used by the budget and section layers."""
import uuid
from typing import Iterable

from .models import TeamMember


def _valid_ids(ids: Iterable) -> list[uuid.UUID]:
    out = []
    for raw in ids:
        try:
            out.append(uuid.UUID(str(raw)))
        except (TypeError, ValueError):
            continue
    return out


def list_persons():
    return [m.as_person() for m in TeamMember.objects.all()]


def members_by_id(ids: Iterable) -> dict[str, TeamMember]:
    """Map ``str(pk) -> TeamMember`` for the ids that exist; malformed ids are skipped."""
    return {str(m.pk): m for m in TeamMember.objects.filter(pk__in=_valid_ids(ids))}


def get_member(member_id) -> TeamMember | None:
    found = members_by_id([member_id])
    return next(iter(found.values()), None)
