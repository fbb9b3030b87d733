"""Section persistence with optimistic concurrency.

Every write is ``UPDATE ... WHERE id = %s AND version = %s`` and bumps the
version. Zero rows updated means someone else wrote first: the caller gets
``StaleSectionError`` and must reload.
"""
import logging
from typing import Any, Optional

from django.db import transaction
from django.db.models import F, Max
from django.utils import timezone

from budget.errors import PersonNotFoundError
from team.directory import get_member

from . import assignment
from .assignment import ActorLike
from .errors import ManagerRequiredError, SectionNotFoundError, StaleSectionError
from .models import ProposalResponse, ResponseSection

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('title', 'content', 'order_index')


def response_for_rfp(rfp) -> ProposalResponse:
    response, created = ProposalResponse.objects.get_or_create(rfp=rfp)
    if created:
        logger.info("response created rfp=%s", rfp.pk)
    return response


def load_sections(response_id) -> list[ResponseSection]:
    return list(
        ResponseSection.objects.filter(response_id=response_id).select_related('assigned_to', 'locked_by')
    )


def get_section(section_id) -> ResponseSection:
    try:
        return ResponseSection.objects.select_related('response').get(pk=section_id)
    except (ResponseSection.DoesNotExist, ValueError, TypeError):
        raise SectionNotFoundError(section_id=section_id) from None


def _conditional_write(section_id, expected_version: int, **fields: Any) -> ResponseSection:
    updated = ResponseSection.objects.filter(pk=section_id, version=expected_version).update(
        version=F('version') + 1,
        updated_at=timezone.now(),
        **fields,
    )
    if not updated:
        if not ResponseSection.objects.filter(pk=section_id).exists():
            raise SectionNotFoundError(section_id=section_id)
        logger.info("stale section write id=%s expected_version=%s", section_id, expected_version)
        raise StaleSectionError(section_id=section_id, expected_version=expected_version)
    return ResponseSection.objects.select_related('assigned_to', 'locked_by').get(pk=section_id)


def _check_version(section: ResponseSection, expected_version: Optional[int]) -> int:
    if expected_version is not None and int(expected_version) != section.version:
        raise StaleSectionError(section_id=section.pk, expected_version=expected_version)
    return section.version


def update_section(
    section_id, patch: dict[str, Any], *, actor: Optional[ActorLike], expected_version: Optional[int] = None
) -> ResponseSection:
    """Apply a content patch (title / content / order_index) if ``actor`` may edit."""
    section = get_section(section_id)
    version = _check_version(section, expected_version)
    assignment.ensure_can_edit(section.state, actor)
    fields = {k: patch[k] for k in EDITABLE_FIELDS if k in patch and patch[k] is not None}
    if not fields:
        return section
    updated = _conditional_write(section.pk, version, **fields)
    ProposalResponse.objects.filter(pk=section.response_id).update(last_saved_at=timezone.now())
    return updated


def transition(
    section_id,
    op: str,
    actor: ActorLike,
    *,
    person_id: Optional[str] = None,
    expected_version: Optional[int] = None,
) -> ResponseSection:
    """Run an assignment or lock operation and persist the resulting state.

    ``op`` is one of ``assign``, ``unassign``, ``lock``, ``unlock``. A no-op
    transition (e.g. re-locking your own lock) does not write.
    """
    section = get_section(section_id)
    version = _check_version(section, expected_version)
    state = section.state
    if op == 'assign':
        member = get_member(person_id)
        if member is None:
            raise PersonNotFoundError(person_id=person_id)
        new_state = assignment.assign(state, str(member.pk), actor)
    elif op == 'unassign':
        new_state = assignment.unassign(state, actor)
    elif op == 'lock':
        new_state = assignment.lock(state, actor)
    elif op == 'unlock':
        new_state = assignment.unlock(state, actor)
    else:
        raise ValueError(f'unknown section transition: {op}')
    if new_state == state:
        return section
    updated = _conditional_write(
        section.pk,
        version,
        assigned_to_id=new_state.assigned_to,
        is_locked=new_state.locked,
        locked_by_id=new_state.locked_by,
    )
    logger.info("section %s id=%s by=%s -> %s", op, section.pk, actor.id, new_state.phase)
    return updated


def create_section(rfp, *, title: str = '', content: str = '', order_index: Optional[int] = None) -> ResponseSection:
    response = response_for_rfp(rfp)
    if order_index is None:
        current = response.sections.aggregate(m=Max('order_index'))['m']
        order_index = 0 if current is None else current + 1
    return ResponseSection.objects.create(
        response=response,
        title=title or 'New Section',
        content=content,
        order_index=order_index,
    )


def delete_section(section_id, *, actor: ActorLike) -> None:
    if not actor.is_manager:
        raise ManagerRequiredError()
    section = get_section(section_id)
    section.delete()
    logger.info("section deleted id=%s by=%s", section_id, actor.id)


def update_sections(rfp, patches: list[dict[str, Any]], *, actor: Optional[ActorLike]) -> ProposalResponse:
    """Bulk edit; any failing section rolls back the whole batch."""
    response = response_for_rfp(rfp)
    with transaction.atomic():
        for patch in patches:
            section = get_section(patch.get('id'))
            if section.response_id != response.pk:
                raise SectionNotFoundError(section_id=section.pk)
            update_section(section.pk, patch, actor=actor, expected_version=patch.get('version'))
    return response
