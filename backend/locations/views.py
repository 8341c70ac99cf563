"""
API views for locations app endpoints.
"""
import logging

from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny

from core.responses import ApiResponse, first_error_message
from .serializers import (
    CountrySerializer,
    LocationDetailSerializer,
    NearbyLocationSerializer,
    NearbyQuerySerializer,
    TagSerializer,
)
from .services import GeoService

logger = logging.getLogger(__name__)

UUID_PATTERN = r'[0-9a-fA-F-]{32,36}'


class LocationViewSet(viewsets.ViewSet):
    """
    Read-only location queries.

    GET /api/locations/?lat=&lon=&radius=   nearby search (radius in km, default 2)
    GET /api/locations/<id>/                place detail
    """
    permission_classes = [AllowAny]
    lookup_value_regex = UUID_PATTERN

    def list(self, request):
        """
        Find locations near a position.

        Query parameters:
        - lat: float (required)
        - lon: float (required)
        - radius: float in kilometers (default: 2)
        """
        params = NearbyQuerySerializer(data=request.query_params)
        if not params.is_valid():
            return ApiResponse(
                data=params.errors,
                message=first_error_message(params.errors),
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        center = params.to_geo_point()
        radius_km = params.validated_data['radius']
        locations = GeoService.find_nearby(center, radius_km)

        serializer = NearbyLocationSerializer(locations, many=True)
        data = serializer.data
        logger.info(
            f"Nearby query at ({center.latitude}, {center.longitude}) "
            f"radius={radius_km}km returned {len(data)} locations"
        )
        return ApiResponse(data=data, message='Nearby locations fetched successfully')

    def retrieve(self, request, pk=None):
        location = GeoService.get_place_detail(pk)
        serializer = LocationDetailSerializer(location)
        return ApiResponse(data=serializer.data, message='Location details fetched successfully')


class TagViewSet(viewsets.ViewSet):
    """
    Tag catalog used by the filter page.

    GET /api/tags/
    """
    permission_classes = [AllowAny]

    def list(self, request):
        serializer = TagSerializer(GeoService.list_tags(), many=True)
        return ApiResponse(data=serializer.data, message='Tags retrieved successfully')


class CountryViewSet(viewsets.ViewSet):
    """
    Country list for dropdowns.

    GET /api/countries/
    """
    permission_classes = [AllowAny]

    def list(self, request):
        serializer = CountrySerializer(GeoService.list_countries(), many=True)
        return ApiResponse(data=serializer.data, message='Countries retrieved successfully')
