"""Billing rate and role category resolution for budget rows.

Both lookups use the same title rules in the same order, but they read
different titles: ``effective_rate`` keys off the person's directory title,
``role_category`` off the row's own editable display title. A manager can
regroup a row by retitling it without changing what it costs.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional, Protocol


class RoleCategory(str, Enum):
    PRINCIPAL = 'principal'
    MANAGING_DIRECTOR = 'managing_director'
    CONSULTANT = 'consultant'
    RESEARCH_ASSOCIATE = 'research_associate'
    COPY_EDITOR = 'copy_editor'
    DEFAULT = 'default'

    @property
    def label(self) -> str:
        return self.value.replace('_', ' ').title()


# Priority order matters: "Principal Managing Director" is a principal.
TITLE_RULES: tuple[tuple[RoleCategory, tuple[str, ...]], ...] = (
    (RoleCategory.PRINCIPAL, ('principal',)),
    (RoleCategory.MANAGING_DIRECTOR, ('managing', 'director')),
    (RoleCategory.CONSULTANT, ('consultant',)),
    (RoleCategory.RESEARCH_ASSOCIATE, ('research', 'associate')),
    (RoleCategory.COPY_EDITOR, ('copy', 'editor')),
)

DEFAULT_RATES: dict[RoleCategory, Decimal] = {
    RoleCategory.PRINCIPAL: Decimal('250.00'),
    RoleCategory.MANAGING_DIRECTOR: Decimal('300.00'),
    RoleCategory.CONSULTANT: Decimal('175.00'),
    RoleCategory.RESEARCH_ASSOCIATE: Decimal('125.00'),
    RoleCategory.COPY_EDITOR: Decimal('100.00'),
    RoleCategory.DEFAULT: Decimal('150.00'),
}


class TitledPerson(Protocol):
    title: Optional[str]
    hourly_rate: Optional[Decimal]


class RateRow(Protocol):
    title: Optional[str]
    rate_override: Optional[Decimal]


def _match(title: Optional[str]) -> Optional[RoleCategory]:
    text = (title or '').lower()
    for category, needles in TITLE_RULES:
        if any(n in text for n in needles):
            return category
    return None


def categorize(title: Optional[str]) -> RoleCategory:
    return _match(title) or RoleCategory.DEFAULT


def default_rate(category: RoleCategory) -> Decimal:
    return DEFAULT_RATES[category]


def effective_rate(row: RateRow, person: TitledPerson) -> Decimal:
    """Hourly rate used for cost math.

    Order: row override (any value, zero included), title default from the
    person's title, the person's own hourly rate, then the global default.
    """
    if row.rate_override is not None:
        return row.rate_override
    matched = _match(person.title)
    if matched is not None:
        return DEFAULT_RATES[matched]
    if person.hourly_rate is not None:
        return person.hourly_rate
    return DEFAULT_RATES[RoleCategory.DEFAULT]


def role_category(row: RateRow) -> RoleCategory:
    return categorize(row.title)
