from django.test import TestCase
from rest_framework.test import APIClient

from library.models import Template


class TemplateApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_crud_and_ordering(self):
        self.client.post('/api/templates', {'name': 'Technical Approach', 'category': 'Technical'}, format='json')
        r = self.client.post(
            '/api/templates', {'name': 'Executive Summary', 'content': 'Intro', 'category': 'Overview'}, format='json'
        )
        self.assertEqual(r.status_code, 201, r.content)
        names = [t['name'] for t in self.client.get('/api/templates').json()]
        self.assertEqual(names, ['Executive Summary', 'Technical Approach'])

        tpl_id = r.json()['id']
        r = self.client.patch(f'/api/templates/{tpl_id}', {'content': 'Updated'}, format='json')
        self.assertEqual(r.json()['content'], 'Updated')
        self.assertEqual(self.client.delete(f'/api/templates/{tpl_id}').status_code, 204)
        self.assertFalse(Template.objects.filter(pk=tpl_id).exists())

    def test_category_filter(self):
        Template.objects.create(name='A', category='Overview')
        Template.objects.create(name='B', category='Technical')
        r = self.client.get('/api/templates', {'category': 'Technical'})
        self.assertEqual([t['name'] for t in r.json()], ['B'])
