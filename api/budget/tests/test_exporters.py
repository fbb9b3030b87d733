import csv
import io
from decimal import Decimal

from django.test import SimpleTestCase

from budget.exporters import display_rows, format_hours, format_money, to_csv, to_docx, to_html_document
from budget.ledger import BudgetLedger, Person

SARAH = Person(id='sarah', full_name='Sarah Johnson', title='Principal')
MALLORY = Person(id='m', full_name='=HYPERLINK("x")', title='<b>Consultant</b>')


def _table():
    ledger = BudgetLedger()
    row = ledger.add_row(SARAH)
    ledger.set_hours(row.id, 1, '10.5')
    other = ledger.add_row(MALLORY)
    ledger.set_hours(other.id, 2, 4)
    return ledger.export_tabular()


class FormatTests(SimpleTestCase):
    def test_money(self):
        self.assertEqual(format_money(Decimal('1234.5')), '$1,234.50')
        self.assertEqual(format_money(Decimal('0')), '$0.00')
        self.assertEqual(format_money(Decimal('0.005')), '$0.01')

    def test_hours(self):
        self.assertEqual(format_hours(Decimal('10.50')), '10.5')
        self.assertEqual(format_hours(Decimal('40')), '40')
        self.assertEqual(format_hours(Decimal('0')), '0')


class BudgetExporterTests(SimpleTestCase):
    def test_display_rows(self):
        rows = display_rows(_table())
        self.assertEqual(rows[0][0], 'Person')
        self.assertEqual(rows[1], ['Sarah Johnson', 'Principal', '$250.00', '10.5', '0', '0', '0', '0', '$2,625.00'])
        self.assertEqual(rows[-1][0], 'TOTAL')
        self.assertEqual(rows[-1][-1], '$3,325.00')

    def test_csv_guards_formula_cells(self):
        parsed = list(csv.reader(io.StringIO(to_csv(_table()))))
        self.assertEqual(len(parsed), 4)
        self.assertEqual(parsed[2][0], '\'=HYPERLINK("x")')
        self.assertEqual(parsed[3][3], '$2,625.00')

    def test_html_document_escapes_and_declares_word(self):
        doc = to_html_document(_table(), title='Budget <draft>')
        self.assertIn("xmlns:w='urn:schemas-microsoft-com:office:word'", doc)
        self.assertIn('&lt;b&gt;Consultant&lt;/b&gt;', doc)
        self.assertIn('Budget &lt;draft&gt;', doc)
        self.assertNotIn('<b>Consultant', doc)

    def test_docx_deterministic(self):
        data1, sum1 = to_docx(_table(), title='Budget')
        data2, sum2 = to_docx(_table(), title='Budget')
        self.assertEqual(sum1, sum2)
        self.assertEqual(data1, data2)
        self.assertEqual(len(sum1), 64)
