from django.test import TestCase

from responses.store import create_section, transition
from rfps.models import Rfp
from rfps.search import SearchFilters, search_rfps
from team.actor import actor_for
from team.models import TeamMember


class RfpSearchTests(TestCase):
    def setUp(self):
        self.fed = Rfp.objects.create(
            title='Federal Evaluation Services', source='federal', keywords=['evaluation', 'Health']
        )
        self.ca = Rfp.objects.create(
            title='Workforce Study', source='state', state='California', keywords=['workforce']
        )
        self.tx = Rfp.objects.create(title='Education Audit', source='state', state='Texas', keywords=[])

    def _titles(self, **params):
        return {r.title for r in search_rfps(SearchFilters(**params))}

    def test_no_filters_returns_all(self):
        self.assertEqual(len(search_rfps(SearchFilters())), 3)

    def test_title_is_case_insensitive(self):
        self.assertEqual(self._titles(title='workforce'), {'Workforce Study'})

    def test_source(self):
        self.assertEqual(self._titles(source='state'), {'Workforce Study', 'Education Audit'})
        self.assertEqual(len(self._titles(source='all')), 3)

    def test_state(self):
        self.assertEqual(self._titles(state='calif'), {'Workforce Study'})

    def test_keywords_any_term(self):
        self.assertEqual(self._titles(keywords='health, workforce'), {'Federal Evaluation Services', 'Workforce Study'})

    def test_empty_keyword_terms_ignored(self):
        self.assertEqual(len(self._titles(keywords=' , ,')), 3)

    def test_consultant_filters_by_assigned_sections(self):
        pm = TeamMember.objects.create(username='pm', email='pm@example.com', full_name='Pat Manager', role='pm')
        emily = TeamMember.objects.create(username='emily', email='emily@example.com', full_name='Emily Rodriguez')
        section = create_section(self.ca, title='Approach')
        transition(section.pk, 'assign', actor_for(pm), person_id=str(emily.pk))
        self.assertEqual(self._titles(consultant='emily'), {'Workforce Study'})

    def test_unknown_consultant_does_not_filter(self):
        self.assertEqual(len(self._titles(consultant='nobody-matches')), 3)

    def test_from_query_strips_values(self):
        filters = SearchFilters.from_query({'title': '  audit ', 'source': 'state'})
        self.assertEqual(filters.title, 'audit')
        self.assertEqual(filters.keyword_terms(), [])
