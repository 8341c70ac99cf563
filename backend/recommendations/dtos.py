"""
Data Transfer Objects (DTOs) for the tag-filtered recommendation query.
"""
from dataclasses import dataclass, field
from typing import List

from locations.geo import DEFAULT_RECOMMENDATION_RADIUS_KM, GeoPoint


@dataclass
class RecommendationQuery:
    """
    A position, a radius and the tag names every result must carry.
    Tag names are matched exactly; duplicates are dropped, order is kept.
    """
    user_location: GeoPoint
    tag_names: List[str]
    radius_km: float = DEFAULT_RECOMMENDATION_RADIUS_KM

    def __post_init__(self):
        self.tag_names = list(dict.fromkeys(self.tag_names))
        if not self.tag_names:
            raise ValueError("At least one tag is required for recommendations")

    @property
    def required_tag_count(self) -> int:
        return len(self.tag_names)


@dataclass
class RecommendationResult:
    """
    Outcome of a recommendation query. matched is False when no location
    carried every requested tag; that is an empty result, not an error.
    """
    locations: list = field(default_factory=list)
    matched: bool = False
