import uuid

from django.contrib.gis.geos import Point
from django.db import IntegrityError, transaction
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.test import APITestCase

from .geo import WGS84_SRID, GeoPoint, km_to_meters
from .models import Country, Location, PlaceTag, Tag
from .services import GeoService

# Length of one degree of longitude along the equator on the WGS84 spheroid
METERS_PER_EQUATOR_DEGREE = 111319.4908


def equator_longitude(meters):
    """Longitude of the equator point `meters` east of (0, 0)."""
    return meters / METERS_PER_EQUATOR_DEGREE


def make_location(country, name, lat, lon, tags=(), **extra):
    location = Location.objects.create(
        external_id=extra.pop('external_id', f"fsq-{uuid.uuid4().hex[:12]}"),
        name=name,
        address=extra.pop('address', f"{name} street"),
        location=GeoPoint(latitude=lat, longitude=lon).to_point(),
        country=country,
        **extra
    )
    for tag in tags:
        PlaceTag.objects.create(location=location, tag=tag)
    return location


class GeoPointTests(SimpleTestCase):

    def test_to_point_swaps_to_lon_lat(self):
        """Storage geometry is (x=longitude, y=latitude) in SRID 4326."""
        point = GeoPoint(latitude=40.0, longitude=-73.0).to_point()
        self.assertEqual(point.x, -73.0)
        self.assertEqual(point.y, 40.0)
        self.assertEqual(point.srid, WGS84_SRID)

    def test_from_point_swaps_back(self):
        geo_point = GeoPoint.from_point(Point(-73.0, 40.0, srid=WGS84_SRID))
        self.assertEqual(geo_point, GeoPoint(latitude=40.0, longitude=-73.0))

    def test_rejects_out_of_range(self):
        with self.assertRaises(ValueError):
            GeoPoint(latitude=91.0, longitude=0.0)
        with self.assertRaises(ValueError):
            GeoPoint(latitude=0.0, longitude=-180.5)

    def test_rejects_non_finite(self):
        with self.assertRaises(ValueError):
            GeoPoint(latitude=float('nan'), longitude=0.0)
        with self.assertRaises(ValueError):
            GeoPoint(latitude=0.0, longitude=float('inf'))

    def test_km_to_meters(self):
        self.assertEqual(km_to_meters(2), 2000)
        self.assertEqual(km_to_meters(0.5), 500)


class LocationModelTests(TestCase):
    def setUp(self):
        self.country = Country.objects.create(name="United States", code="US", flag="🇺🇸")
        self.museum = Tag.objects.create(name="Museum")
        self.location = make_location(self.country, "Test Location", 40.0, -73.0, tags=[self.museum])

    def test_coordinate_round_trip(self):
        """Stored as (lon, lat) but read back as latitude=40, longitude=-73."""
        stored = Location.objects.get(pk=self.location.pk)
        self.assertEqual(stored.location.x, -73.0)
        self.assertEqual(stored.location.y, 40.0)
        self.assertEqual(stored.get_lat_lon(), (40.0, -73.0))

    def test_invalid_coordinates(self):
        """Test that invalid coordinates raise a ValueError during save."""
        location = Location(
            external_id="fsq-bad",
            name="Bad Location",
            address="Nowhere",
            location=Point(200.0, 100.0, srid=WGS84_SRID),
            country=self.country,
        )
        with self.assertRaises(ValueError):
            location.save()

    def test_place_tag_is_a_set(self):
        """The same (location, tag) pair cannot be stored twice."""
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                PlaceTag.objects.create(location=self.location, tag=self.museum)

    def test_external_id_is_unique(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                make_location(self.country, "Duplicate", 0.0, 0.0, external_id=self.location.external_id)


class GeoServiceTests(TestCase):
    def setUp(self):
        self.country = Country.objects.create(name="Null Island", code="NI")
        self.center = GeoPoint(latitude=0.0, longitude=0.0)
        self.origin = make_location(self.country, "Origin", 0.0, 0.0)
        self.inside = make_location(self.country, "Inside", 0.0, equator_longitude(1999))
        self.outside = make_location(self.country, "Outside", 0.0, equator_longitude(2001))
        self.far = make_location(self.country, "Far", 10.0, 10.0)

    def test_radius_containment_boundary(self):
        """1.999 km is within a 2 km radius, 2.001 km is not."""
        results = set(GeoService.find_nearby(self.center, radius_km=2))

        self.assertIn(self.origin, results)
        self.assertIn(self.inside, results)
        self.assertNotIn(self.outside, results)
        self.assertNotIn(self.far, results)

    def test_default_radius_is_two_km(self):
        default = set(GeoService.find_nearby(self.center))
        explicit = set(GeoService.find_nearby(self.center, radius_km=2))
        self.assertEqual(default, explicit)

    def test_larger_radius_includes_more(self):
        results = set(GeoService.find_nearby(self.center, radius_km=2.5))
        self.assertIn(self.outside, results)
        self.assertNotIn(self.far, results)

    def test_zero_radius_keeps_exact_position(self):
        results = set(GeoService.find_nearby(self.center, radius_km=0))
        self.assertEqual(results, {self.origin})

    def test_nearby_is_idempotent(self):
        first = {location.id for location in GeoService.find_nearby(self.center, 2)}
        second = {location.id for location in GeoService.find_nearby(self.center, 2)}
        self.assertEqual(first, second)

    def test_get_place_detail_not_found(self):
        with self.assertRaises(NotFound):
            GeoService.get_place_detail(uuid.uuid4())


class LocationAPITests(APITestCase):
    def setUp(self):
        self.country = Country.objects.create(name="Turkey", code="TR", flag="🇹🇷")
        self.museum = Tag.objects.create(
            name="Museum",
            icon_prefix="https://ss3.4sqi.net/img/categories_v2/arts_entertainment/museum_",
            icon_suffix=".png",
        )
        self.cafe = Tag.objects.create(name="Cafe")
        self.location = make_location(
            self.country,
            "API Test Location",
            41.0082,
            28.9784,
            tags=[self.museum, self.cafe],
            description="Old city",
            links=["https://example.com", "+90 212 000 00 00"],
        )
        self.far = make_location(self.country, "Ankara", 39.9334, 32.8597, tags=[self.museum])
        self.nearby_url = reverse('locations:location-list')
        self.detail_url = reverse('locations:location-detail', args=[self.location.id])

    def test_nearby_endpoint(self):
        response = self.client.get(self.nearby_url, {'lat': 41.0082, 'lon': 28.9784, 'radius': 1})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertEqual(response.data['message'], 'Nearby locations fetched successfully')
        self.assertEqual(len(response.data['data']), 1)

        item = response.data['data'][0]
        self.assertEqual(item['id'], str(self.location.id))
        self.assertEqual(item['latitude'], 41.0082)
        self.assertEqual(item['longitude'], 28.9784)
        self.assertEqual(item['country_code'], 'TR')
        self.assertEqual(
            sorted(item['tags'], key=lambda tag: tag['name']),
            [
                {'name': 'Cafe', 'icon_prefix': None, 'icon_suffix': None},
                {
                    'name': 'Museum',
                    'icon_prefix': self.museum.icon_prefix,
                    'icon_suffix': '.png',
                },
            ],
        )

    def test_nearby_uses_default_radius(self):
        response = self.client.get(self.nearby_url, {'lat': 41.0082, 'lon': 28.9784})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['name'] for item in response.data['data']], ['API Test Location'])

    def test_nearby_requires_coordinates(self):
        response = self.client.get(self.nearby_url, {'lat': 41.0})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])
        self.assertIn('lon', response.data['data'])

    def test_nearby_rejects_non_numeric_values(self):
        for params in (
            {'lat': 'abc', 'lon': 28.9},
            {'lat': 41.0, 'lon': 'east'},
            {'lat': 41.0, 'lon': 28.9, 'radius': 'far'},
            {'lat': 'nan', 'lon': 28.9},
            {'lat': 41.0, 'lon': 28.9, 'radius': 'inf'},
        ):
            with self.subTest(params=params):
                response = self.client.get(self.nearby_url, params)
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data['status_code'], 400)

    def test_nearby_rejects_out_of_range_latitude(self):
        response = self.client.get(self.nearby_url, {'lat': 95, 'lon': 28.9})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_place_detail(self):
        response = self.client.get(self.detail_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'Location details fetched successfully')

        data = response.data['data']
        self.assertEqual(data['name'], 'API Test Location')
        self.assertEqual(data['description'], 'Old city')
        self.assertEqual(data['links'], ["https://example.com", "+90 212 000 00 00"])
        self.assertEqual(data['country']['code'], 'TR')
        self.assertEqual(
            {tag['name'] for tag in data['tags']},
            {'Museum', 'Cafe'},
        )
        self.assertIn('id', data['tags'][0])

    def test_place_detail_not_found(self):
        url = reverse('locations:location-detail', args=[uuid.uuid4()])
        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Location not found')
        self.assertIsNone(response.data['data'])

    def test_list_tags(self):
        response = self.client.get(reverse('locations:tag-list'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([tag['name'] for tag in response.data['data']], ['Cafe', 'Museum'])

    def test_list_countries(self):
        Country.objects.create(name="Germany", code="DE")
        response = self.client.get(reverse('locations:country-list'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([country['code'] for country in response.data['data']], ['DE', 'TR'])
