"""
URL configuration for the recommendations module.
"""
from django.urls import path
from recommendations.views import RecommendLocationsView

app_name = 'recommendations'

urlpatterns = [
    path('', RecommendLocationsView.as_view(), name='recommend_locations'),
]
