"""
Domain services for the locations app implementing the geospatial
read queries: radius containment, nearby search and place details.
"""
import logging
from typing import Union
from uuid import UUID

from django.contrib.gis.measure import Distance
from django.db.models import Prefetch, QuerySet
from django.http import Http404
from rest_framework.exceptions import NotFound
from rest_framework.generics import get_object_or_404

from .geo import DEFAULT_NEARBY_RADIUS_KM, GeoPoint, km_to_meters
from .models import Country, Location, Tag

logger = logging.getLogger(__name__)


class GeoService:
    """
    Domain Service that encapsulates all spatial business logic.
    Isolates direct database queries ensuring controllers/views interact
    with a clean API rather than raw ORM/SQL calls.
    """

    @staticmethod
    def within_radius(queryset: QuerySet, center: GeoPoint, radius_km: float) -> QuerySet:
        """
        Restricts a Location queryset to rows within radius_km of center.

        Compiles to PostGIS ST_DWithin on the geography column, so the distance
        is measured on the WGS84 spheroid in meters and the boundary is
        inclusive. Point and distance are bound as query parameters.

        Args:
            queryset: QuerySet over Location
            center: Query position
            radius_km: Radius in kilometers

        Returns:
            Filtered QuerySet
        """
        return queryset.filter(
            location__dwithin=(center.to_point(), Distance(m=km_to_meters(radius_km)))
        )

    @staticmethod
    def with_tags(queryset: QuerySet) -> QuerySet:
        """Joins the country and prefetches every associated tag."""
        return queryset.select_related('country').prefetch_related(
            Prefetch('tags', queryset=Tag.objects.order_by('name'))
        )

    @staticmethod
    def find_nearby(center: GeoPoint, radius_km: float = DEFAULT_NEARBY_RADIUS_KM) -> QuerySet:
        """
        Retrieves every location within radius_km of center, tags included.
        No ordering is applied.

        Args:
            center: Query position
            radius_km: Radius in kilometers (default 2)

        Returns:
            QuerySet of Location objects within the radius
        """
        logger.debug(
            f"Nearby query at ({center.latitude}, {center.longitude}) radius={radius_km}km"
        )
        return GeoService.with_tags(
            GeoService.within_radius(Location.objects.all(), center, radius_km)
        )

    @staticmethod
    def get_place_detail(location_id: Union[str, UUID]) -> Location:
        """
        Loads one location with its complete tag list.

        Raises:
            NotFound: no location has this identifier (malformed ids included)
        """
        queryset = GeoService.with_tags(Location.objects.all())
        try:
            return get_object_or_404(queryset, pk=location_id)
        except Http404:
            logger.info(f"Location {location_id} not found")
            raise NotFound('Location not found')

    @staticmethod
    def list_tags() -> QuerySet:
        """All tags ordered alphabetically."""
        return Tag.objects.order_by('name')

    @staticmethod
    def list_countries() -> QuerySet:
        """All countries ordered alphabetically."""
        return Country.objects.order_by('name')
