"""Request-scoped identity for section permission checks.

Every state-machine call takes an explicit ``Actor``; views build it from
the authenticated user's linked team member. There is no module-level
"current user".
"""
from dataclasses import dataclass
from typing import Optional

from app.errors import DomainError

from .models import TeamMember


@dataclass(frozen=True)
class Actor:
    id: str
    is_manager: bool = False


class NoTeamMemberError(DomainError):
    code = 'no_team_member'
    status = 403
    key = 'errors.auth.no_team_member'


def actor_for(member: TeamMember) -> Actor:
    return Actor(id=str(member.pk), is_manager=member.is_manager)


def member_for_request(request) -> Optional[TeamMember]:
    user = getattr(request, 'user', None)
    if not getattr(user, 'is_authenticated', False):
        return None
    return TeamMember.objects.filter(user_id=user.id).first()


def resolve_actor(request) -> Optional[Actor]:
    member = member_for_request(request)
    return actor_for(member) if member else None


def require_actor(request) -> Actor:
    actor = resolve_actor(request)
    if actor is None:
        raise NoTeamMemberError()
    return actor
