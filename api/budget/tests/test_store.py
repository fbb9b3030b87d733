from decimal import Decimal

from django.test import TestCase

from budget.errors import PersonNotFoundError
from budget.ledger import BudgetLedger, BudgetRow
from budget.models import BudgetItem
from budget.store import load_ledger, load_rows, save_ledger, save_rows
from rfps.models import Rfp
from team.models import TeamMember


class BudgetStoreTests(TestCase):
    def setUp(self):
        self.rfp = Rfp.objects.create(title='Evaluation Services')
        self.sarah = TeamMember.objects.create(
            username='sarah', email='sarah@example.com', full_name='Sarah Johnson', title='Principal'
        )
        self.lisa = TeamMember.objects.create(
            username='lisa', email='lisa@example.com', full_name='Lisa Thompson', title='Copy Editor'
        )

    def _ledger(self):
        ledger = load_ledger(self.rfp.pk)
        lisa = ledger.add_row(self.lisa.as_person())
        sarah = ledger.add_row(self.sarah.as_person())
        ledger.set_hours(sarah.id, 1, 10)
        ledger.set_hours(lisa.id, 2, '2.5')
        ledger.set_rate_override(lisa.id, 90)
        return ledger

    def test_save_writes_five_items_per_row(self):
        save_ledger(self.rfp.pk, self._ledger())
        self.assertEqual(BudgetItem.objects.filter(rfp=self.rfp).count(), 10)

    def test_load_preserves_order_and_values(self):
        save_ledger(self.rfp.pk, self._ledger())
        ledger = load_ledger(self.rfp.pk)
        self.assertEqual([r.person_id for r in ledger.rows], [str(self.lisa.pk), str(self.sarah.pk)])
        lisa = ledger.row_for_person(str(self.lisa.pk))
        self.assertEqual(lisa.rate_override, Decimal('90'))
        self.assertEqual(lisa.hours[2], Decimal('2.5'))
        self.assertEqual(ledger.grand_total(), Decimal('2725.00'))

    def test_save_replaces_previous_rows(self):
        save_ledger(self.rfp.pk, self._ledger())
        ledger = load_ledger(self.rfp.pk)
        ledger.remove_row(str(self.lisa.pk))
        save_ledger(self.rfp.pk, ledger)
        rows = load_rows(self.rfp.pk)
        self.assertEqual([r.person_id for r in rows], [str(self.sarah.pk)])
        self.assertEqual(BudgetItem.objects.filter(rfp=self.rfp).count(), 5)

    def test_unknown_member_rejected_without_writing(self):
        save_ledger(self.rfp.pk, self._ledger())
        ghost = BudgetRow(person_id='00000000-0000-0000-0000-000000000000')
        with self.assertRaises(PersonNotFoundError):
            save_rows(self.rfp.pk, [ghost])
        self.assertEqual(BudgetItem.objects.filter(rfp=self.rfp).count(), 10)

    def test_empty_ledger_clears_budget(self):
        save_ledger(self.rfp.pk, self._ledger())
        save_ledger(self.rfp.pk, BudgetLedger())
        self.assertFalse(BudgetItem.objects.filter(rfp=self.rfp).exists())

    def test_blank_title_survives_reload(self):
        ledger = self._ledger()
        ledger.set_title(ledger.row_for_person(str(self.sarah.pk)).id, '')
        save_ledger(self.rfp.pk, ledger)
        sarah = load_ledger(self.rfp.pk).row_for_person(str(self.sarah.pk))
        self.assertEqual(sarah.title, '')
        self.assertEqual(sarah.id, str(self.sarah.pk))

    def test_stored_items_match_ledger_items(self):
        ledger = self._ledger()
        save_ledger(self.rfp.pk, ledger)
        stored = list(
            BudgetItem.objects.filter(rfp=self.rfp).values_list('member_id', 'year', 'hours', 'position')
        )
        expected = [(item['person_id'], item['year'], item['hours'], item['position']) for item in ledger.to_items()]
        self.assertEqual(sorted((str(m), y, h, p) for m, y, h, p in stored), sorted(expected))
