from unittest.mock import MagicMock, patch

import requests
from django.contrib.auth.models import User
from django.test import override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from AuditSystem.models import AuditLog


@override_settings(SOCIAL_PUBLISH_WEBHOOK_URL='')
class SocialPostViewTest(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username='testuser', email='test@example.com', password='testpass123')
        self.client.force_authenticate(user=self.user)

    def test_post_is_acknowledged_without_publisher(self):
        response = self.client.post('/api/social/post', {
            'platform': 'Facebook',
            'content': 'Our launch is live!',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        body = response.json()
        self.assertTrue(body['success'])
        self.assertEqual(body['platform'], 'facebook')
        self.assertEqual(body['status'], 'accepted')
        self.assertIsNone(body['reference'])
        self.assertTrue(AuditLog.objects.filter(action='social_post_submitted').exists())

    @override_settings(SOCIAL_PUBLISH_WEBHOOK_URL='https://publisher.example/hook')
    @patch('SocialMediaIntegration.services.social_publish_service.requests.post')
    def test_post_is_forwarded_to_publisher(self, mock_post):
        mock_post.return_value = MagicMock(
            headers={'Content-Type': 'application/json'},
            json=MagicMock(return_value={'id': 'pub-42'}),
        )

        response = self.client.post('/api/social/post', {
            'platform': 'linkedin',
            'content': 'Hiring now',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.json()['status'], 'forwarded')
        self.assertEqual(response.json()['reference'], 'pub-42')
        self.assertEqual(mock_post.call_args.args[0], 'https://publisher.example/hook')
        self.assertEqual(mock_post.call_args.kwargs['json'], {
            'platform': 'linkedin',
            'content': 'Hiring now',
            'user_id': self.user.id,
        })

    @override_settings(SOCIAL_PUBLISH_WEBHOOK_URL='https://publisher.example/hook')
    @patch('SocialMediaIntegration.services.social_publish_service.requests.post')
    def test_unreadable_publisher_body_still_acknowledges(self, mock_post):
        mock_post.return_value = MagicMock(
            headers={'Content-Type': 'application/json'},
            json=MagicMock(side_effect=ValueError("Expecting value: line 1 column 1 (char 0)")),
        )

        response = self.client.post('/api/social/post', {
            'platform': 'facebook',
            'content': 'hi',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.json()['status'], 'forwarded')
        self.assertIsNone(response.json()['reference'])
        self.assertTrue(AuditLog.objects.filter(action='social_post_submitted').exists())

    @override_settings(SOCIAL_PUBLISH_WEBHOOK_URL='https://publisher.example/hook')
    @patch('SocialMediaIntegration.services.social_publish_service.requests.post')
    def test_publisher_failure_is_bad_gateway(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("connection refused")

        response = self.client.post('/api/social/post', {
            'platform': 'twitter',
            'content': 'Hello',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.json()['code'], 'SOCIAL_PUBLISH_FAILED')
        log = AuditLog.objects.get(action='social_post_failed')
        self.assertEqual(log.status, 'failure')

    def test_unknown_platform_is_rejected(self):
        response = self.client.post('/api/social/post', {
            'platform': 'myspace',
            'content': 'Hello',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['code'], 'VALIDATION_ERROR')

    def test_blank_content_is_rejected(self):
        response = self.client.post('/api/social/post', {
            'platform': 'facebook',
            'content': '  ',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)

        response = self.client.post('/api/social/post', {
            'platform': 'facebook',
            'content': 'Hello',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
