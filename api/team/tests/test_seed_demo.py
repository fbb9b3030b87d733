from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from library.models import Template
from rfps.models import Rfp
from team.models import TeamMember


class SeedDemoTests(TestCase):
    def test_idempotent(self):
        call_command('seed_demo', stdout=StringIO())
        call_command('seed_demo', stdout=StringIO())
        self.assertEqual(TeamMember.objects.count(), 5)
        self.assertEqual(Template.objects.count(), 3)
        self.assertEqual(Rfp.objects.count(), 1)
        self.assertTrue(TeamMember.objects.get(username='sarah').is_manager)
