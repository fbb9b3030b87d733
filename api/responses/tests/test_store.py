from django.test import TestCase

from responses import store
from responses.errors import SectionLockedError, SectionNotFoundError, StaleSectionError
from responses.models import ResponseSection
from rfps.models import Rfp
from team.actor import actor_for
from team.models import TeamMember


class SectionStoreTests(TestCase):
    def setUp(self):
        self.rfp = Rfp.objects.create(title='Evaluation Services')
        self.pm = TeamMember.objects.create(username='pm', email='pm@example.com', full_name='Pat Manager', role='pm')
        self.writer = TeamMember.objects.create(
            username='writer', email='w@example.com', full_name='Wren Writer', role='consultant'
        )
        self.pm_actor = actor_for(self.pm)
        self.writer_actor = actor_for(self.writer)
        self.section = store.create_section(self.rfp, title='Approach')

    def test_create_appends_order_index(self):
        second = store.create_section(self.rfp)
        self.assertEqual(second.order_index, self.section.order_index + 1)
        self.assertEqual(second.title, 'New Section')
        self.assertEqual([s.pk for s in store.load_sections(second.response_id)], [self.section.pk, second.pk])

    def test_update_bumps_version(self):
        updated = store.update_section(self.section.pk, {'content': 'Draft'}, actor=self.pm_actor)
        self.assertEqual(updated.content, 'Draft')
        self.assertEqual(updated.version, 2)

    def test_stale_version_rejected(self):
        store.update_section(self.section.pk, {'content': 'one'}, actor=self.pm_actor, expected_version=1)
        with self.assertRaises(StaleSectionError):
            store.update_section(self.section.pk, {'content': 'two'}, actor=self.pm_actor, expected_version=1)
        self.assertEqual(ResponseSection.objects.get(pk=self.section.pk).content, 'one')

    def test_concurrent_writer_loses(self):
        # Both writers read version 1; the second conditional write finds no row.
        store._conditional_write(self.section.pk, 1, content='first')
        with self.assertRaises(StaleSectionError):
            store._conditional_write(self.section.pk, 1, content='second')

    def test_assign_then_lock_blocks_writer(self):
        store.transition(self.section.pk, 'assign', self.pm_actor, person_id=str(self.writer.pk))
        store.update_section(self.section.pk, {'content': 'mine'}, actor=self.writer_actor)
        store.transition(self.section.pk, 'lock', self.pm_actor)
        with self.assertRaises(SectionLockedError):
            store.update_section(self.section.pk, {'content': 'again'}, actor=self.writer_actor)
        section = ResponseSection.objects.get(pk=self.section.pk)
        self.assertTrue(section.is_locked)
        self.assertEqual(section.locked_by_id, self.pm.pk)
        self.assertEqual(section.assigned_to_id, self.writer.pk)

    def test_noop_lock_does_not_bump_version(self):
        locked = store.transition(self.section.pk, 'lock', self.pm_actor)
        again = store.transition(self.section.pk, 'lock', self.pm_actor)
        self.assertEqual(locked.version, again.version)

    def test_missing_section(self):
        with self.assertRaises(SectionNotFoundError):
            store.get_section(999999)

    def test_bulk_update_is_atomic(self):
        other = store.create_section(self.rfp, title='Budget narrative')
        store.transition(other.pk, 'lock', self.pm_actor)
        store.transition(self.section.pk, 'assign', self.pm_actor, person_id=str(self.writer.pk))
        patches = [
            {'id': self.section.pk, 'content': 'ok'},
            {'id': other.pk, 'content': 'blocked'},
        ]
        with self.assertRaises(SectionLockedError):
            store.update_sections(self.rfp, patches, actor=self.writer_actor)
        self.assertEqual(ResponseSection.objects.get(pk=self.section.pk).content, '')
