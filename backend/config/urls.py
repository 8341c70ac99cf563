from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('core.urls')),
    # Before the locations router so "recommendations" is not read as a location id
    path('api/locations/recommendations/', include('recommendations.urls')),
    path('api/', include('locations.urls')),
]

handler404 = 'core.views.route_not_found'
