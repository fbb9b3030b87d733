"""RFP search (the CRM view).

Title, source and state filter in the database. Keyword matching looks
inside the JSON keyword list, so it runs over the narrowed queryset.
"""
from dataclasses import dataclass
from typing import Optional

from django.db.models import Q

from team.models import TeamMember

from .models import Rfp


@dataclass(frozen=True)
class SearchFilters:
    title: str = ''
    keywords: str = ''
    consultant: str = ''
    source: str = ''
    state: str = ''

    @classmethod
    def from_query(cls, params) -> 'SearchFilters':
        return cls(**{f: (params.get(f) or '').strip() for f in cls.__dataclass_fields__})

    def keyword_terms(self) -> list[str]:
        return [k.strip() for k in self.keywords.lower().split(',') if k.strip()]


def keyword_match(rfp: Rfp, terms: list[str]) -> bool:
    """Any term is a substring of any RFP keyword, or of the title."""
    if not terms:
        return True
    rfp_keywords = [str(k).lower() for k in (rfp.keywords or [])]
    title = (rfp.title or '').lower()
    return any(term in title or any(term in kw for kw in rfp_keywords) for term in terms)


def consultant_ids(term: str) -> set[str]:
    if not term:
        return set()
    matches = TeamMember.objects.filter(Q(full_name__icontains=term) | Q(email__icontains=term))
    return {str(pk) for pk in matches.values_list('id', flat=True)}


def rfps_with_assignees(member_ids: set[str]) -> set[int]:
    from responses.models import ResponseSection

    qs = ResponseSection.objects.filter(assigned_to_id__in=list(member_ids))
    return set(qs.values_list('response__rfp_id', flat=True))


def search_rfps(filters: SearchFilters) -> list[Rfp]:
    qs = Rfp.objects.all().order_by('-created_at', '-id')
    if filters.title:
        qs = qs.filter(title__icontains=filters.title)
    if filters.source and filters.source != 'all':
        qs = qs.filter(source=filters.source)
    if filters.state:
        qs = qs.filter(state__icontains=filters.state)
    # A consultant term that matches nobody does not filter.
    allowed_rfps: Optional[set[int]] = None
    members = consultant_ids(filters.consultant)
    if members:
        allowed_rfps = rfps_with_assignees(members)
    terms = filters.keyword_terms()
    return [
        rfp
        for rfp in qs
        if keyword_match(rfp, terms) and (allowed_rfps is None or rfp.pk in allowed_rfps)
    ]
