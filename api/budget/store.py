"""Persistence for budget ledgers.

Rows travel through the ledger's per-year item projection
(``BudgetLedger.to_items`` / ``from_items``). Saving replaces the whole
stored set for the RFP (delete then re-insert) inside one transaction. Row
ids of loaded rows are the person ids, which are unique within a ledger.
"""
import logging
from typing import Iterable

from django.db import transaction

from team.directory import list_persons, members_by_id

from .errors import PersonNotFoundError
from .ledger import YEARS, BudgetLedger, BudgetRow
from .models import BudgetItem

logger = logging.getLogger(__name__)


def _stored_items(rfp_id) -> list[dict]:
    return [
        {
            'person_id': str(item.member_id),
            'year': item.year,
            'hours': item.hours,
            'title': item.title,
            'rate_override': item.rate_override,
        }
        for item in BudgetItem.objects.filter(rfp_id=rfp_id, year__in=YEARS).order_by('position', 'year')
    ]


def load_ledger(rfp_id) -> BudgetLedger:
    return BudgetLedger.from_items(list_persons(), _stored_items(rfp_id))


def load_rows(rfp_id) -> list[BudgetRow]:
    return load_ledger(rfp_id).rows


def save_ledger(rfp_id, ledger: BudgetLedger) -> int:
    """Replace every stored item for ``rfp_id`` with the ledger's rows. Returns rows written."""
    items = ledger.to_items()
    members = members_by_id(item['person_id'] for item in items)
    for item in items:
        if item['person_id'] not in members:
            raise PersonNotFoundError(person_id=item['person_id'])
    objs = [
        BudgetItem(
            rfp_id=rfp_id,
            member=members[item['person_id']],
            year=item['year'],
            hours=item['hours'],
            title=item['title'],
            rate_override=item['rate_override'],
            position=item['position'],
        )
        for item in items
    ]
    with transaction.atomic():
        BudgetItem.objects.filter(rfp_id=rfp_id).delete()
        BudgetItem.objects.bulk_create(objs)
    logger.info("budget saved rfp=%s rows=%d", rfp_id, len(ledger))
    return len(ledger)


def save_rows(rfp_id, rows: Iterable[BudgetRow]) -> int:
    return save_ledger(rfp_id, BudgetLedger(rows=rows))
