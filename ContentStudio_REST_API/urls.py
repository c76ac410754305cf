"""
URL configuration for ContentStudio_REST_API project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import include, path

from ContentStudio_REST_API.Users.views import (
    GoogleLogin,
    google_auth,
    google_callback,
)

urlpatterns = [
    path('admin/', admin.site.urls),

    # Authentication: login, logout, user, registration
    path('api/auth/', include('dj_rest_auth.urls')),
    path('api/auth/registration/', include('dj_rest_auth.registration.urls')),
    path('api/auth/google/', GoogleLogin.as_view(), name='google_login'),
    path('api/auth/google/auth/', google_auth, name='google_auth'),
    path('api/auth/google/callback/', google_callback, name='google_callback'),

    # Content generation: generate, content, models
    path('api/', include('ContentGeneration.urls')),

    # Provider API keys
    path('api/settings/', include('APIKeys.urls')),

    # Social publishing
    path('api/social/', include('SocialMediaIntegration.urls')),
]
