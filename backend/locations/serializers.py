"""
DRF Serializers for locations, tags, countries and the nearby query parameters.
"""
import math

from rest_framework import serializers

from .geo import DEFAULT_NEARBY_RADIUS_KM, GeoPoint
from .models import Country, Location, Tag


class FiniteFloatField(serializers.FloatField):
    """FloatField that also rejects NaN and infinity."""

    default_error_messages = {
        'not_finite': 'A finite number is required.',
    }

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if not math.isfinite(value):
            self.fail('not_finite')
        return value


def latitude_field(**kwargs):
    return FiniteFloatField(min_value=-90, max_value=90, **kwargs)


def longitude_field(**kwargs):
    return FiniteFloatField(min_value=-180, max_value=180, **kwargs)


def radius_field(default):
    return FiniteFloatField(min_value=0, required=False, default=default, help_text="Radius in kilometers")


class PointSerializer(serializers.Serializer):
    """{latitude, longitude} as sent by clients"""

    latitude = latitude_field()
    longitude = longitude_field()


class NearbyQuerySerializer(serializers.Serializer):
    """Query parameters of the nearby search: lat, lon, radius (km)"""

    lat = latitude_field(error_messages={'required': 'Latitude and Longitude are required'})
    lon = longitude_field(error_messages={'required': 'Latitude and Longitude are required'})
    radius = radius_field(DEFAULT_NEARBY_RADIUS_KM)

    def to_geo_point(self) -> GeoPoint:
        return GeoPoint(latitude=self.validated_data['lat'], longitude=self.validated_data['lon'])


class TagSummarySerializer(serializers.ModelSerializer):
    """Tag fields needed to draw a map marker"""

    class Meta:
        model = Tag
        fields = ['name', 'icon_prefix', 'icon_suffix']


class TagSerializer(serializers.ModelSerializer):

    class Meta:
        model = Tag
        fields = ['id', 'name', 'icon_prefix', 'icon_suffix']


class CountrySerializer(serializers.ModelSerializer):

    class Meta:
        model = Country
        fields = ['id', 'name', 'code', 'flag']


class LocationSerializer(serializers.ModelSerializer):
    """Serializer for Location with geospatial data handling"""

    # Named fields only; the stored (lon, lat) order never reaches clients
    latitude = serializers.SerializerMethodField()
    longitude = serializers.SerializerMethodField()
    country_code = serializers.CharField(source='country.code', read_only=True)
    tags = TagSerializer(many=True, read_only=True)

    class Meta:
        model = Location
        fields = [
            'id',
            'external_id',
            'name',
            'address',
            'description',
            'links',
            'latitude',
            'longitude',
            'country_code',
            'icon_prefix',
            'icon_suffix',
            'tags',
        ]

    def get_latitude(self, obj):
        """Extract latitude from location PointField"""
        if obj.location:
            return GeoPoint.from_point(obj.location).latitude
        return None

    def get_longitude(self, obj):
        """Extract longitude from location PointField"""
        if obj.location:
            return GeoPoint.from_point(obj.location).longitude
        return None


class NearbyLocationSerializer(LocationSerializer):
    """Map listing: tags reduced to name and icon fields"""

    tags = TagSummarySerializer(many=True, read_only=True)


class LocationDetailSerializer(LocationSerializer):
    """Place detail: full tags plus the nested country"""

    country = CountrySerializer(read_only=True)

    class Meta(LocationSerializer.Meta):
        fields = LocationSerializer.Meta.fields + ['country', 'created_at', 'updated_at']
