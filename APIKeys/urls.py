from django.urls import path

from . import views

urlpatterns = [
    path('api-keys', views.api_keys, name='api_keys'),
    path('api-keys/<int:pk>', views.api_key_detail, name='api_key_detail'),
]
