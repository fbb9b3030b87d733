from django.test import Client, TestCase


class HealthTests(TestCase):
    def setUp(self):
        self.client = Client()

    def test_healthz(self):
        resp = self.client.get('/healthz')
        self.assertEqual(resp.status_code, 200)
        self.assertIn(b'ok', resp.content)

    def test_liveness(self):
        r = self.client.get('/api/health')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {'status': 'ok'})

    def test_readiness_checks_db_and_cache(self):
        r = self.client.get('/api/ready')
        self.assertEqual(r.status_code, 200)
        data = r.json()
        self.assertEqual(data['status'], 'ok')
        self.assertTrue(data['db'])
        self.assertIn(data['cache'], (True, False))
