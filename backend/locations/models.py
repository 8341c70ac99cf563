import uuid
from django.db import models
from django.contrib.gis.db import models as gis_models
from django.core.validators import RegexValidator

from .geo import WGS84_SRID, GeoPoint, is_location_valid


class Country(models.Model):
    """
    Reference data: countries a location can belong to.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    code = models.CharField(
        max_length=2,
        unique=True,
        validators=[
            RegexValidator(
                regex=r'^[A-Z]{2}$',
                message="Country code must be exactly 2 uppercase characters (ISO 3166-1 alpha-2)",
            )
        ],
        help_text="ISO 3166-1 alpha-2 code",
    )
    flag = models.CharField(max_length=20, blank=True, null=True, help_text="Country flag emoji")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'locations_country'
        ordering = ['name']
        verbose_name_plural = 'countries'

    def __str__(self):
        return f"{self.name} ({self.code})"


class Tag(models.Model):
    """
    Category label attached to locations (e.g. "Museum", "Cafe").
    Names are matched exactly as stored.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)

    # Marker image URL = icon_prefix + <size> + icon_suffix
    icon_prefix = models.CharField(max_length=255, blank=True, null=True)
    icon_suffix = models.CharField(max_length=255, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'locations_tag'
        ordering = ['name']

    def __str__(self):
        return self.name


class Location(models.Model):
    """
    Place record - primary database entity for the discovery queries.
    Read-only from the API; rows are created and updated by ingestion.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Provenance key, used for idempotent upserts and lookups
    external_id = models.CharField(
        max_length=255,
        unique=True,
        help_text="Unique ID from source provider (e.g. Foursquare place id)"
    )

    # Basic Information
    name = models.CharField(max_length=255, help_text="The official name of the place")
    address = models.CharField(max_length=512, help_text="Human readable physical address")
    description = models.TextField(blank=True, null=True)
    links = models.JSONField(
        default=list,
        blank=True,
        help_text="List of link strings such as website or phone"
    )

    # Geospatial Data
    location = gis_models.PointField(
        srid=WGS84_SRID,
        geography=True,
        help_text="PostGIS geography point (SRID=4326) stored as Longitude/Latitude"
    )

    country = models.ForeignKey(Country, on_delete=models.PROTECT, related_name='locations')

    icon_prefix = models.CharField(max_length=255, blank=True, null=True)
    icon_suffix = models.CharField(max_length=255, blank=True, null=True)

    tags = models.ManyToManyField(Tag, through='PlaceTag', related_name='locations')

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'locations_location'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        """
        Overridden save method to ensure coordinates are valid.
        """
        if self.location:
            lat = self.location.y
            lon = self.location.x
            if not is_location_valid(lat, lon):
                raise ValueError("Invalid coordinates: latitude must be -90 to 90, longitude must be -180 to 180")

        super().save(*args, **kwargs)

    def get_lat_lon(self):
        """
        Helper method to return coordinates in a frontend-friendly format.

        Returns:
            Tuple of (latitude: float, longitude: float)
        """
        if self.location:
            point = GeoPoint.from_point(self.location)
            return (point.latitude, point.longitude)
        return None


class PlaceTag(models.Model):
    """
    Junction between Location and Tag. A location's tags form a set:
    the recommendation query counts distinct matches per location.
    """
    location = models.ForeignKey(Location, on_delete=models.CASCADE, related_name='place_tags')
    tag = models.ForeignKey(Tag, on_delete=models.CASCADE, related_name='place_tags')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'locations_place_tag'
        constraints = [
            models.UniqueConstraint(fields=['location', 'tag'], name='unique_place_tag'),
        ]

    def __str__(self):
        return f"{self.location_id} - {self.tag_id}"
