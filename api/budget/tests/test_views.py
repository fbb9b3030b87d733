from django.test import TestCase
from rest_framework.test import APIClient

from budget.models import BudgetItem
from budget.views import ledger_from_payload
from rfps.models import Rfp
from team.models import TeamMember


class BudgetApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.rfp = Rfp.objects.create(title='Evaluation Services')
        self.sarah = TeamMember.objects.create(
            username='sarah', email='sarah@example.com', full_name='Sarah Johnson', title='Principal'
        )
        self.emily = TeamMember.objects.create(
            username='emily', email='emily@example.com', full_name='Emily Rodriguez', title='Senior Consultant'
        )
        self.url = f'/api/rfps/{self.rfp.pk}/budget'

    def _put(self, rows):
        return self.client.put(self.url, {'rows': rows}, format='json')

    def test_empty_budget(self):
        r = self.client.get(self.url)
        self.assertEqual(r.status_code, 200, r.content)
        body = r.json()
        self.assertEqual(body['rows'], [])
        self.assertEqual(body['grand_total'], '0.00')
        self.assertEqual(body['rfp_id'], self.rfp.pk)

    def test_put_and_get(self):
        r = self._put(
            [
                {'person_id': str(self.sarah.pk), 'hours': {'1': 10}},
                {'person_id': str(self.emily.pk), 'title': 'Research Lead', 'rate_override': '180', 'hours': {'2': '4'}},
            ]
        )
        self.assertEqual(r.status_code, 200, r.content)
        body = self.client.get(self.url).json()
        self.assertEqual(body['grand_total'], '3220.00')
        self.assertEqual(body['year_totals']['1'], '2500.00')
        sarah, emily = body['rows']
        self.assertEqual(sarah['effective_rate'], '250.00')
        self.assertEqual(sarah['role_category'], 'principal')
        self.assertEqual(emily['title'], 'Research Lead')
        self.assertEqual(emily['role_category'], 'research_associate')
        self.assertEqual(emily['effective_rate'], '180.00')
        self.assertEqual(
            [c['value'] for c in body['categories']], ['principal', 'research_associate']
        )

    def test_duplicate_person_conflict(self):
        pid = str(self.sarah.pk)
        r = self._put([{'person_id': pid}, {'person_id': pid}])
        self.assertEqual(r.status_code, 409, r.content)
        self.assertEqual(r.json()['error']['code'], 'duplicate_person')
        self.assertFalse(BudgetItem.objects.exists())

    def test_negative_hours_rejected(self):
        r = self._put([{'person_id': str(self.sarah.pk), 'hours': {'1': -3}}])
        self.assertEqual(r.status_code, 400, r.content)
        self.assertEqual(r.json()['error']['code'], 'invalid_hours')

    def test_unknown_person(self):
        r = self._put([{'person_id': '00000000-0000-0000-0000-000000000000'}])
        self.assertEqual(r.status_code, 404, r.content)
        self.assertEqual(r.json()['error']['code'], 'person_not_found')

    def test_put_replaces_previous_budget(self):
        self._put([{'person_id': str(self.sarah.pk), 'hours': {'1': 10}}])
        self._put([{'person_id': str(self.emily.pk), 'hours': {'1': 1}}])
        rows = self.client.get(self.url).json()['rows']
        self.assertEqual([r['person_id'] for r in rows], [str(self.emily.pk)])

    def test_unknown_rfp(self):
        self.assertEqual(self.client.get('/api/rfps/999999/budget').status_code, 404)

    def test_oversized_hours_rejected_before_writing(self):
        self._put([{'person_id': str(self.sarah.pk), 'hours': {'1': 10}}])
        r = self._put([{'person_id': str(self.sarah.pk), 'hours': {'1': '1E+12'}}])
        self.assertEqual(r.status_code, 400, r.content)
        self.assertEqual(r.json()['error']['code'], 'invalid_hours')
        body = self.client.get(self.url).json()
        self.assertEqual(body['grand_total'], '2500.00')

    def test_oversized_rate_rejected(self):
        r = self._put([{'person_id': str(self.sarah.pk), 'rate_override': '123456789', 'hours': {'1': 1}}])
        self.assertEqual(r.status_code, 400, r.content)
        self.assertEqual(r.json()['error']['code'], 'invalid_rate')
        self.assertFalse(BudgetItem.objects.exists())

    def test_sub_cent_hours_rejected(self):
        r = self._put([{'person_id': str(self.sarah.pk), 'hours': {'1': '0.125', '2': '0.125'}}])
        self.assertEqual(r.status_code, 400, r.content)
        self.assertEqual(r.json()['error']['code'], 'invalid_hours')
        self.assertFalse(BudgetItem.objects.exists())

    def test_fractional_hours_totals_match_ledger(self):
        rows = [{'person_id': str(self.sarah.pk), 'hours': {'1': '0.25', '2': '0.75', '3': '1.05'}}]
        expected = ledger_from_payload(rows)
        r = self._put(rows)
        self.assertEqual(r.status_code, 200, r.content)
        body = r.json()
        self.assertEqual(body['grand_total'], f"{expected.grand_total():.2f}")
        self.assertEqual(body['grand_total'], '512.50')
        self.assertEqual(body['rows'][0]['hours']['3'], '1.05')
        self.assertEqual(self.client.get(self.url).json()['grand_total'], '512.50')
