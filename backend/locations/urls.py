"""
URL routing for locations app.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import CountryViewSet, LocationViewSet, TagViewSet

router = DefaultRouter()
router.register(r'locations', LocationViewSet, basename='location')
router.register(r'tags', TagViewSet, basename='tag')
router.register(r'countries', CountryViewSet, basename='country')

app_name = 'locations'

urlpatterns = [
    path('', include(router.urls)),
]
