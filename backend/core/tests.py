from unittest.mock import patch

from django.db import OperationalError
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from .responses import build_envelope, first_error_message


class EnvelopeTests(SimpleTestCase):

    def test_success_envelope(self):
        self.assertEqual(
            build_envelope(200, [1, 2], 'ok'),
            {'status_code': 200, 'success': True, 'message': 'ok', 'data': [1, 2]},
        )

    def test_error_envelope(self):
        envelope = build_envelope(404, None, 'Location not found')
        self.assertFalse(envelope['success'])
        self.assertIsNone(envelope['data'])

    def test_first_error_message(self):
        errors = {'lat': ['A valid number is required.'], 'lon': ['This field is required.']}
        self.assertEqual(first_error_message(errors), 'lat: A valid number is required.')
        self.assertEqual(first_error_message({'non_field_errors': ['Bad input']}), 'Bad input')
        self.assertEqual(
            first_error_message({'userLocation': {'latitude': ['This field is required.']}}),
            'userLocation: latitude: This field is required.',
        )


class HealthCheckTests(APITestCase):

    def test_health(self):
        response = self.client.get(reverse('core:health'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'status': 'Server is running'})


class ErrorHandlingTests(APITestCase):

    def test_unknown_route_returns_json_404(self):
        response = self.client.get('/api/does-not-exist/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()['message'], 'Route not found')

    def test_method_not_allowed_is_wrapped(self):
        response = self.client.delete(reverse('locations:tag-list'))
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(response.data['status_code'], 405)
        self.assertFalse(response.data['success'])

    def test_storage_error_becomes_server_error(self):
        with patch(
            'locations.services.GeoService.find_nearby',
            side_effect=OperationalError('connection refused'),
        ):
            with self.assertLogs('core.exceptions', level='ERROR'):
                response = self.client.get(reverse('locations:location-list'), {'lat': 0, 'lon': 0})

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['message'], 'Internal server error')
        self.assertIsNone(response.data['data'])


class ValidationShortCircuitTests(TestCase):

    def test_invalid_query_never_reaches_storage(self):
        with patch('locations.services.GeoService.find_nearby') as find_nearby:
            response = self.client.get(reverse('locations:location-list'), {'lat': 'x', 'lon': 0})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        find_nearby.assert_not_called()
