from django.test import SimpleTestCase

from app.errors import DomainError, error_response, exception_handler
from budget.errors import DuplicatePersonError, InvalidHoursError


class ErrorEnvelopeTests(SimpleTestCase):
    def test_error_response_shape(self):
        resp = error_response('missing_file', 'file is required', meta={'field': 'file'})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(
            resp.data,
            {'error': {'code': 'missing_file', 'message': 'file is required', 'version': 'v1', 'meta': {'field': 'file'}}},
        )

    def test_domain_error_mapped(self):
        resp = exception_handler(InvalidHoursError(value=-1), {})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data['error']['code'], 'invalid_hours')
        self.assertEqual(resp.data['error']['message'], 'Hours must be a non-negative number up to 99,999,999.99 with at most two decimal places (got -1).')
        self.assertEqual(resp.data['error']['meta'], {'value': '-1'})

    def test_none_meta_dropped(self):
        resp = exception_handler(DuplicatePersonError(person_id=None), {})
        self.assertEqual(resp.status_code, 409)
        self.assertNotIn('meta', resp.data['error'])

    def test_base_domain_error(self):
        err = DomainError('boom')
        self.assertEqual(str(err), 'boom')
        self.assertEqual(err.status, 400)

    def test_other_exceptions_left_to_drf(self):
        self.assertIsNone(exception_handler(ValueError('x'), {}))
