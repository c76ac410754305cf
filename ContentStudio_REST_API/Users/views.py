import logging
from urllib.parse import urlencode, urljoin

import requests
from allauth.socialaccount.providers.google.views import GoogleOAuth2Adapter
from allauth.socialaccount.providers.oauth2.client import OAuth2Client
from dj_rest_auth.registration.views import SocialLoginView
from django.conf import settings
from django.shortcuts import redirect
from django.urls import reverse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"


def get_google_callback_url():
    return f"{settings.BACKEND_BASE_URL}/api/auth/google/callback/"


class GoogleLogin(SocialLoginView):
    """Exchange a Google authorization code for an authenticated session."""
    adapter_class = GoogleOAuth2Adapter
    client_class = OAuth2Client

    @property
    def callback_url(self):
        return get_google_callback_url()


@api_view(['POST'])
@permission_classes([AllowAny])
def google_auth(request):
    """Return the Google consent URL the client should redirect to."""
    client_id = settings.SOCIALACCOUNT_PROVIDERS['google']['APP']['client_id']
    if not client_id:
        return Response(
            {'error': 'Google login is not configured'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    params = urlencode({
        'client_id': client_id,
        'redirect_uri': get_google_callback_url(),
        'scope': 'email profile',
        'response_type': 'code',
        'access_type': 'online',
    })
    return Response({'auth_url': f"{GOOGLE_AUTH_URL}?{params}"})


@api_view(['GET'])
@permission_classes([AllowAny])
def google_callback(request):
    """
    Google redirects here after consent. The code is exchanged through
    GoogleLogin and the browser is sent back to the frontend.
    """
    code = request.GET.get('code')
    error = request.GET.get('error')
    frontend_callback = f"{settings.FRONTEND_URL}/auth/google/callback"

    if error:
        error_params = urlencode(
            {'error': error, 'error_description': 'Google authentication failed'})
        return redirect(f'{frontend_callback}?{error_params}')

    if not code:
        error_params = urlencode(
            {'error': 'no_code', 'error_description': 'No authorization code received'})
        return redirect(f'{frontend_callback}?{error_params}')

    token_endpoint_url = urljoin(
        settings.BACKEND_BASE_URL, reverse('google_login'))
    try:
        response = requests.post(
            url=token_endpoint_url, data={'code': code}, timeout=30)
    except requests.RequestException as e:
        logger.error("Google code exchange failed: %s", e)
        error_params = urlencode(
            {'error': 'server_error', 'error_description': str(e)})
        return redirect(f'{frontend_callback}?{error_params}')

    if response.status_code != 200:
        logger.warning(
            "Google code exchange rejected with status %s", response.status_code)
        error_params = urlencode(
            {'error': 'auth_failed', 'error_description': 'Google authentication failed'})
        return redirect(f'{frontend_callback}?{error_params}')

    success_params = urlencode({
        'success': 'true',
        'access_token': response.json().get('access', ''),
    })
    return redirect(f'{frontend_callback}?{success_params}')
