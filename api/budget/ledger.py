"""In-memory budget worksheet for one proposal.

A ledger holds one row per team member with hours for years 1-5 and derives
row, year and grand totals. All arithmetic is ``Decimal``; floats are
converted through ``str`` so binary representation never leaks into money.
The ledger does no I/O: ``budget.store`` loads and saves it.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Iterator, Optional

from . import rates
from .errors import (
    DuplicatePersonError,
    InvalidHoursError,
    InvalidRateError,
    InvalidYearError,
    PersonNotFoundError,
    RowNotFoundError,
)
from .rates import RoleCategory

YEARS = (1, 2, 3, 4, 5)
ZERO = Decimal('0')

# Hours and rates are kept to the cent and must fit a Decimal(10, 2) column.
MAX_DIGITS = 10
DECIMAL_PLACES = 2
CENTS = Decimal(1).scaleb(-DECIMAL_PLACES)
MAX_AMOUNT = Decimal(10) ** (MAX_DIGITS - DECIMAL_PLACES) - CENTS

EXPORT_HEADER = ('Person', 'Role/Title', 'Rate') + tuple(f'Year {y}' for y in YEARS) + ('Total',)


@dataclass(frozen=True)
class Person:
    id: str
    full_name: str
    title: str = ''
    hourly_rate: Optional[Decimal] = None


@dataclass
class BudgetRow:
    person_id: str
    title: str = ''
    rate_override: Optional[Decimal] = None
    hours: dict[int, Decimal] = field(default_factory=lambda: {y: ZERO for y in YEARS})
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def total_hours(self) -> Decimal:
        return sum((self.hours.get(y, ZERO) for y in YEARS), ZERO)


@dataclass(frozen=True)
class TableExport:
    """Format-agnostic worksheet snapshot consumed by the export adapters."""

    header: tuple[str, ...]
    rows: list[tuple[Any, ...]]
    total_row: tuple[Any, ...]

    def all_rows(self) -> list[tuple[Any, ...]]:
        return [self.header, *self.rows, self.total_row]


def to_decimal(value: Any, error=InvalidHoursError) -> Decimal:
    """Parse a non-negative amount of at most ``MAX_AMOUNT`` with no more than
    two decimal places; raise ``error`` otherwise.

    Extra precision is rejected rather than rounded, so totals computed here
    are the totals that get stored.
    """
    if isinstance(value, bool) or value is None:
        raise error(value=value)
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise error(value=value) from None
    if not number.is_finite() or number < 0 or number > MAX_AMOUNT:
        raise error(value=value)
    if number != number.quantize(CENTS):
        raise error(value=value)
    return number


class BudgetLedger:
    def __init__(self, persons: Iterable[Person] = (), rows: Iterable[BudgetRow] = ()):
        self._persons: dict[str, Person] = {p.id: p for p in persons}
        self._rows: list[BudgetRow] = list(rows)

    # --- construction -------------------------------------------------
    @classmethod
    def from_items(cls, persons: Iterable[Person], items: Iterable[dict[str, Any]]) -> 'BudgetLedger':
        """Group per-year items ``{person_id, year, hours, title?, rate_override?}`` into rows.

        Items for the same person collapse onto one row whose id is the
        person id; the first item seen supplies title and override. An absent
        title defaults to the person's, a blank one stays blank. Items are
        checked like direct edits, so stored values that no longer fit raise.
        """
        ledger = cls(persons)
        by_person: dict[str, BudgetRow] = {}
        for item in items:
            pid = str(item['person_id'])
            row = by_person.get(pid)
            if row is None:
                person = ledger._persons.get(pid)
                title = item.get('title')
                if title is None and person is not None:
                    title = person.title
                override = item.get('rate_override')
                row = BudgetRow(
                    id=pid,
                    person_id=pid,
                    title=title or '',
                    rate_override=None if override is None else to_decimal(override, InvalidRateError),
                )
                by_person[pid] = row
                ledger._rows.append(row)
            year = _check_year(item['year'])
            row.hours[year] = to_decimal(item.get('hours', ZERO))
        return ledger

    def to_items(self) -> list[dict[str, Any]]:
        """One item per row and year; ``position`` is the row's index."""
        return [
            {
                'person_id': row.person_id,
                'year': year,
                'hours': row.hours.get(year, ZERO),
                'title': row.title,
                'rate_override': row.rate_override,
                'position': position,
            }
            for position, row in enumerate(self._rows)
            for year in YEARS
        ]

    # --- accessors ----------------------------------------------------
    @property
    def rows(self) -> list[BudgetRow]:
        return list(self._rows)

    def __iter__(self) -> Iterator[BudgetRow]:
        return iter(list(self._rows))

    def __len__(self) -> int:
        return len(self._rows)

    def get_row(self, row_id: str) -> BudgetRow:
        for row in self._rows:
            if row.id == row_id:
                return row
        raise RowNotFoundError(row_id=row_id)

    def row_for_person(self, person_id: str) -> Optional[BudgetRow]:
        return next((r for r in self._rows if r.person_id == str(person_id)), None)

    def person_for(self, row: BudgetRow) -> Person:
        person = self._persons.get(row.person_id)
        if person is None:
            raise PersonNotFoundError(person_id=row.person_id)
        return person

    # --- mutations ----------------------------------------------------
    def add_row(self, person: Person) -> BudgetRow:
        if self.row_for_person(person.id) is not None:
            raise DuplicatePersonError(person_id=person.id)
        self._persons.setdefault(person.id, person)
        row = BudgetRow(person_id=person.id, title=person.title or '')
        self._rows.append(row)
        return row

    def remove_row(self, row_id: str) -> None:
        self._rows = [r for r in self._rows if r.id != row_id]

    def set_hours(self, row_id: str, year: int, hours: Any) -> None:
        row = self.get_row(row_id)
        row.hours[_check_year(year)] = to_decimal(hours)

    def set_rate_override(self, row_id: str, rate: Any) -> None:
        row = self.get_row(row_id)
        row.rate_override = None if rate is None else to_decimal(rate, InvalidRateError)

    def set_title(self, row_id: str, title: Optional[str]) -> None:
        self.get_row(row_id).title = title or ''

    # --- derived values -----------------------------------------------
    def effective_rate(self, row: BudgetRow) -> Decimal:
        return rates.effective_rate(row, self.person_for(row))

    def role_category(self, row: BudgetRow) -> RoleCategory:
        return rates.role_category(row)

    def row_total(self, row_id: str) -> Decimal:
        row = self.get_row(row_id)
        return row.total_hours() * self.effective_rate(row)

    def year_total(self, year: int) -> Decimal:
        year = _check_year(year)
        return sum((r.hours.get(year, ZERO) * self.effective_rate(r) for r in self._rows), ZERO)

    def grand_total(self) -> Decimal:
        return sum((self.row_total(r.id) for r in self._rows), ZERO)

    def categories(self) -> list[RoleCategory]:
        """Distinct categories present, in first-seen row order."""
        seen: list[RoleCategory] = []
        for row in self._rows:
            cat = self.role_category(row)
            if cat not in seen:
                seen.append(cat)
        return seen

    def rows_in_category(self, category: RoleCategory) -> list[BudgetRow]:
        return [r for r in self._rows if self.role_category(r) == category]

    def export_tabular(self) -> TableExport:
        body = []
        for row in self._rows:
            person = self.person_for(row)
            body.append(
                (person.full_name, row.title, self.effective_rate(row))
                + tuple(row.hours.get(y, ZERO) for y in YEARS)
                + (self.row_total(row.id),)
            )
        total_row = ('TOTAL', '', '') + tuple(self.year_total(y) for y in YEARS) + (self.grand_total(),)
        return TableExport(header=EXPORT_HEADER, rows=body, total_row=total_row)


def _check_year(year: Any) -> int:
    try:
        y = int(year)
    except (TypeError, ValueError):
        raise InvalidYearError(year=year) from None
    if y not in YEARS or str(year).strip() != str(y):
        raise InvalidYearError(year=year)
    return y
