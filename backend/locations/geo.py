"""
Geographic point value type and the unit conventions shared by the
location queries.

Requests and responses speak (latitude, longitude) as named fields. Stored
geometries are (x=longitude, y=latitude) in SRID 4326. The swap between the
two happens only in GeoPoint.to_point() and GeoPoint.from_point().
"""
import math
from dataclasses import dataclass

from django.contrib.gis.geos import Point

WGS84_SRID = 4326

DEFAULT_NEARBY_RADIUS_KM = 2.0
DEFAULT_RECOMMENDATION_RADIUS_KM = 5.0

METERS_PER_KM = 1000


def km_to_meters(radius_km: float) -> float:
    return radius_km * METERS_PER_KM


def is_location_valid(lat: float, lon: float) -> bool:
    """
    Validates that the coordinates are finite and fall within WGS84 bounds.
    """
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 position in degrees."""
    latitude: float
    longitude: float

    def __post_init__(self):
        if not is_location_valid(self.latitude, self.longitude):
            raise ValueError(
                f"Invalid coordinates ({self.latitude}, {self.longitude}): "
                "latitude must be -90 to 90, longitude must be -180 to 180"
            )

    def to_point(self) -> Point:
        """
        Build the storage geometry. GEOS points are (x, y) = (longitude, latitude).
        """
        return Point(self.longitude, self.latitude, srid=WGS84_SRID)

    @classmethod
    def from_point(cls, point: Point) -> 'GeoPoint':
        """
        Unpack a stored geometry back into named latitude/longitude.
        """
        return cls(latitude=point.y, longitude=point.x)
