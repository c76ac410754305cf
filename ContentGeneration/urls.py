from django.urls import path

from . import views

urlpatterns = [
    path('generate', views.generate_content, name='generate_content'),
    path('content', views.list_content, name='list_content'),
    path('models', views.list_models, name='list_models'),
]
