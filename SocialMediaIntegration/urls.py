"""
SocialMediaIntegration URL Configuration
"""

from django.urls import path

from .views import post_to_social

urlpatterns = [
    path('post', post_to_social, name='social-post'),
]
