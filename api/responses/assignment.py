"""Assignment and lock rules for a response section.

Assignment and locking are independent axes. A lock freezes content edits
by non-managers; managers can still reassign a locked section. Every
function takes the acting person explicitly and returns a new state.
"""
from dataclasses import dataclass, replace
from typing import Optional, Protocol

from .errors import AlreadyLockedError, ManagerRequiredError, SectionLockedError, SectionNotAssignedError


class ActorLike(Protocol):
    id: str
    is_manager: bool


@dataclass(frozen=True)
class SectionState:
    assigned_to: Optional[str] = None
    locked: bool = False
    locked_by: Optional[str] = None

    @property
    def phase(self) -> str:
        if self.locked:
            return 'locked'
        return 'assigned' if self.assigned_to else 'unassigned'


def _check_not_locked(state: SectionState, actor: ActorLike) -> None:
    if state.locked and not actor.is_manager:
        raise SectionLockedError(locked_by=state.locked_by)


def assign(state: SectionState, person_id: str, actor: ActorLike) -> SectionState:
    _check_not_locked(state, actor)
    return replace(state, assigned_to=str(person_id))


def unassign(state: SectionState, actor: ActorLike) -> SectionState:
    _check_not_locked(state, actor)
    return replace(state, assigned_to=None)


def lock(state: SectionState, actor: ActorLike) -> SectionState:
    if not actor.is_manager:
        raise ManagerRequiredError()
    if state.locked and state.locked_by == actor.id:
        return state
    # A lock with no recorded holder is claimed by the locking manager.
    if state.locked and state.locked_by is not None:
        raise AlreadyLockedError(locked_by=state.locked_by)
    return replace(state, locked=True, locked_by=actor.id)


def unlock(state: SectionState, actor: ActorLike) -> SectionState:
    if not actor.is_manager:
        raise ManagerRequiredError()
    return replace(state, locked=False, locked_by=None)


def can_edit(state: SectionState, actor: Optional[ActorLike]) -> bool:
    if actor is None:
        return False
    if actor.is_manager:
        return True
    return not state.locked and state.assigned_to == actor.id


def ensure_can_edit(state: SectionState, actor: Optional[ActorLike]) -> None:
    if can_edit(state, actor):
        return
    if state.locked:
        raise SectionLockedError(locked_by=state.locked_by)
    raise SectionNotAssignedError(assigned_to=state.assigned_to)
