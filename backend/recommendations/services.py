"""
Recommendation query: locations within a radius that carry ALL requested tags.

Runs in two reads. The candidate read joins locations to the requested tags
only, groups by location and keeps those whose distinct match count equals
the number of requested tags. A plain join or DISTINCT would keep locations
matching ANY tag. The assembly read then loads the full records with every
tag for exactly those ids. The reads are not wrapped in a transaction.
"""
import logging
from typing import List
from uuid import UUID

from django.db.models import Count, QuerySet

from locations.models import Location
from locations.services import GeoService
from .dtos import RecommendationQuery, RecommendationResult

logger = logging.getLogger(__name__)


class TagMatchService:
    """
    Set-intersection matching of locations against requested tag names.
    """

    @staticmethod
    def find_matching_location_ids(query: RecommendationQuery) -> List[UUID]:
        """
        Candidate phase.

        SELECT id FROM location JOIN place_tag JOIN tag
        WHERE ST_DWithin(...) AND tag.name IN (...)
        GROUP BY id HAVING COUNT(DISTINCT tag.name) = %s

        Args:
            query: validated recommendation query

        Returns:
            Ids of locations within the radius tagged with every requested name
        """
        nearby = GeoService.within_radius(Location.objects.all(), query.user_location, query.radius_km)
        candidates = (
            nearby
            .filter(tags__name__in=query.tag_names)
            .values('id')
            .annotate(matched_tags=Count('tags__name', distinct=True))
            .filter(matched_tags=query.required_tag_count)
            .order_by()
        )
        return [row['id'] for row in candidates]

    @staticmethod
    def fetch_locations(location_ids: List[UUID]) -> QuerySet:
        """
        Assembly phase: full records and all of their tags, not only the
        matched ones. No distance filter; the ids already satisfy it.
        """
        return GeoService.with_tags(Location.objects.filter(id__in=location_ids))

    @staticmethod
    def recommend(query: RecommendationQuery) -> RecommendationResult:
        """
        Runs both phases. Returns an unmatched empty result without running
        the assembly phase when no location qualifies.
        """
        location_ids = TagMatchService.find_matching_location_ids(query)
        logger.info(
            f"Recommendation query at ({query.user_location.latitude}, {query.user_location.longitude}) "
            f"radius={query.radius_km}km tags={query.tag_names} matched {len(location_ids)} locations"
        )

        if not location_ids:
            return RecommendationResult(locations=[], matched=False)

        locations = list(TagMatchService.fetch_locations(location_ids))
        return RecommendationResult(locations=locations, matched=True)
