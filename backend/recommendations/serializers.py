"""
Serializers for the recommendation request body.
"""
from rest_framework import serializers

from locations.geo import DEFAULT_RECOMMENDATION_RADIUS_KM, GeoPoint
from locations.serializers import PointSerializer, radius_field
from .dtos import RecommendationQuery


class RecommendationRequestSerializer(serializers.Serializer):
    """
    POST body:
    {
        "tags": ["Museum", "Cafe"],
        "radius": 5,
        "userLocation": {"latitude": 40.7128, "longitude": -74.0060}
    }
    """
    tags = serializers.ListField(
        child=serializers.CharField(allow_blank=False, trim_whitespace=False),
        allow_empty=False,
        error_messages={
            'required': 'At least one tag is required for recommendations',
            'empty': 'At least one tag is required for recommendations',
        },
    )
    radius = radius_field(DEFAULT_RECOMMENDATION_RADIUS_KM)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Wire name is camelCase, as sent by the web client
        self.fields['userLocation'] = PointSerializer(
            error_messages={'required': 'User location with latitude and longitude is required'},
        )

    def to_query(self) -> RecommendationQuery:
        location = self.validated_data['userLocation']
        return RecommendationQuery(
            user_location=GeoPoint(latitude=location['latitude'], longitude=location['longitude']),
            tag_names=self.validated_data['tags'],
            radius_km=self.validated_data['radius'],
        )
