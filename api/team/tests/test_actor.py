from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from team.actor import NoTeamMemberError, actor_for, require_actor
from team.directory import get_member, list_persons, members_by_id
from team.models import TeamMember

User = get_user_model()


class _Request:
    def __init__(self, user):
        self.user = user


class ActorTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='pat', password='pass')
        self.member = TeamMember.objects.create(
            user=self.user, username='pat', email='pat@example.com', full_name='Pat Manager', role='pm'
        )

    def test_actor_from_linked_member(self):
        actor = require_actor(_Request(self.user))
        self.assertEqual(actor.id, str(self.member.pk))
        self.assertTrue(actor.is_manager)

    def test_unlinked_user_has_no_actor(self):
        other = User.objects.create_user(username='nobody', password='pass')
        with self.assertRaises(NoTeamMemberError):
            require_actor(_Request(other))

    @override_settings(SECTION_MANAGER_ROLES=['managing_director'])
    def test_manager_roles_are_configurable(self):
        self.assertFalse(actor_for(self.member).is_manager)


class DirectoryTests(TestCase):
    def setUp(self):
        self.a = TeamMember.objects.create(
            username='a', email='a@example.com', full_name='Alex Able', title='Consultant', hourly_rate='120.00'
        )

    def test_list_persons(self):
        (person,) = list_persons()
        self.assertEqual(person.id, str(self.a.pk))
        self.assertEqual(person.title, 'Consultant')

    def test_lookup_skips_malformed_ids(self):
        self.assertEqual(list(members_by_id([str(self.a.pk), 'not-a-uuid'])), [str(self.a.pk)])
        self.assertIsNone(get_member('not-a-uuid'))
        self.assertEqual(get_member(str(self.a.pk)), self.a)


class TeamApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_create_and_filter_by_role(self):
        r = self.client.post(
            '/api/team',
            {'username': 'lisa', 'email': 'lisa@example.com', 'full_name': 'Lisa Thompson', 'role': 'copy_editor'},
            format='json',
        )
        self.assertEqual(r.status_code, 201, r.content)
        self.assertFalse(r.json()['is_manager'])
        self.assertEqual(len(self.client.get('/api/team', {'role': 'copy_editor'}).json()), 1)
        self.assertEqual(self.client.get('/api/team', {'role': 'pm'}).json(), [])

    def test_negative_rate_rejected(self):
        r = self.client.post(
            '/api/team',
            {'username': 'x', 'email': 'x@example.com', 'full_name': 'X', 'hourly_rate': '-1'},
            format='json',
        )
        self.assertEqual(r.status_code, 400)

    def test_me_anonymous_and_linked(self):
        self.assertFalse(self.client.get('/api/me').json()['authenticated'])
        user = User.objects.create_user(username='pat', password='pass')
        TeamMember.objects.create(user=user, username='pat', email='p@example.com', full_name='Pat', role='pm')
        self.client.force_authenticate(user)
        body = self.client.get('/api/me').json()
        self.assertTrue(body['authenticated'])
        self.assertTrue(body['actor']['is_manager'])

    def test_token_login(self):
        User.objects.create_user(username='pat', password='pass12345')
        r = self.client.post('/api/token', {'username': 'pat', 'password': 'pass12345'}, format='json')
        self.assertEqual(r.status_code, 200, r.content)
        self.assertIn('access', r.json())
