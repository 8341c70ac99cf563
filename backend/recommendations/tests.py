"""
Tests for the recommendations module.
"""
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from locations.geo import GeoPoint
from locations.models import Country, Location, PlaceTag, Tag
from recommendations.dtos import RecommendationQuery
from recommendations.services import TagMatchService


def create_location(country, external_id, lat, lon, tags):
    location = Location.objects.create(
        external_id=external_id,
        name=external_id.upper(),
        address=f"{external_id} street",
        location=GeoPoint(latitude=lat, longitude=lon).to_point(),
        country=country,
    )
    for tag in tags:
        PlaceTag.objects.create(location=location, tag=tag)
    return location


class RecommendationQueryTestCase(SimpleTestCase):
    """Test cases for the query DTO"""

    def test_duplicate_tags_are_dropped(self):
        query = RecommendationQuery(
            user_location=GeoPoint(latitude=0.0, longitude=0.0),
            tag_names=['Museum', 'Cafe', 'Museum'],
        )
        self.assertEqual(query.tag_names, ['Museum', 'Cafe'])
        self.assertEqual(query.required_tag_count, 2)

    def test_default_radius_is_five_km(self):
        query = RecommendationQuery(user_location=GeoPoint(latitude=0.0, longitude=0.0), tag_names=['Cafe'])
        self.assertEqual(query.radius_km, 5.0)

    def test_empty_tag_set_is_rejected(self):
        with self.assertRaises(ValueError):
            RecommendationQuery(user_location=GeoPoint(latitude=0.0, longitude=0.0), tag_names=[])


class TagMatchServiceTestCase(TestCase):
    """Test cases for TagMatchService"""

    def setUp(self):
        """Set up test fixtures"""
        self.country = Country.objects.create(name="Null Island", code="NI")
        self.museum = Tag.objects.create(name="Museum")
        self.cafe = Tag.objects.create(name="Cafe")
        self.park = Tag.objects.create(name="Park")
        Tag.objects.create(name="Stadium")

        self.center = GeoPoint(latitude=0.0, longitude=0.0)
        # L1 fails the tag match, L3 fails the radius (~1,500 km away)
        self.l1 = create_location(self.country, 'l1', 0.0, 0.0, [self.museum])
        self.l2 = create_location(self.country, 'l2', 0.0, 0.01, [self.museum, self.cafe])
        self.l3 = create_location(self.country, 'l3', 10.0, 10.0, [self.museum, self.cafe])

    def recommend(self, tag_names, radius_km=5.0):
        query = RecommendationQuery(user_location=self.center, tag_names=tag_names, radius_km=radius_km)
        return TagMatchService.recommend(query)

    def test_concrete_scenario(self):
        result = self.recommend(['Museum', 'Cafe'])

        self.assertTrue(result.matched)
        self.assertEqual({location.id for location in result.locations}, {self.l2.id})

    def test_no_match_scenario(self):
        result = self.recommend(['Stadium'])

        self.assertFalse(result.matched)
        self.assertEqual(result.locations, [])

    def test_superset_of_requested_tags_matches(self):
        """A location tagged {A, B, C} matches a query for {A, B}."""
        PlaceTag.objects.create(location=self.l2, tag=self.park)

        result = self.recommend(['Museum', 'Cafe'])

        self.assertEqual({location.id for location in result.locations}, {self.l2.id})

    def test_all_tags_required_not_any(self):
        """Of {A}, {B} and {A, B} only the last is returned for {A, B}."""
        only_cafe = create_location(self.country, 'cafe-only', 0.0, 0.005, [self.cafe])

        ids = TagMatchService.find_matching_location_ids(
            RecommendationQuery(user_location=self.center, tag_names=['Museum', 'Cafe'])
        )

        self.assertEqual(set(ids), {self.l2.id})
        self.assertNotIn(self.l1.id, ids)
        self.assertNotIn(only_cafe.id, ids)

    def test_single_tag_matches_every_tagged_location_in_radius(self):
        result = self.recommend(['Museum'])
        self.assertEqual({location.id for location in result.locations}, {self.l1.id, self.l2.id})

    def test_assembly_returns_all_tags_not_only_matched(self):
        result = self.recommend(['Cafe'])

        self.assertEqual(len(result.locations), 1)
        tag_names = {tag.name for tag in result.locations[0].tags.all()}
        self.assertEqual(tag_names, {'Museum', 'Cafe'})

    def test_tag_names_are_case_sensitive(self):
        result = self.recommend(['museum', 'cafe'])
        self.assertFalse(result.matched)

    def test_unknown_tag_is_silently_ignored(self):
        """
        A requested name with no Tag row never matches, so the whole
        request finds nothing instead of failing.
        """
        result = self.recommend(['Museum', 'Cafe', 'Does Not Exist'])

        self.assertFalse(result.matched)
        self.assertEqual(result.locations, [])

    def test_radius_limits_candidates(self):
        # l2 is ~1.1 km east of the center
        self.assertFalse(self.recommend(['Cafe'], radius_km=1).matched)
        self.assertTrue(self.recommend(['Cafe'], radius_km=1.2).matched)

    def test_recommendation_is_idempotent(self):
        first = {location.id for location in self.recommend(['Museum', 'Cafe']).locations}
        second = {location.id for location in self.recommend(['Museum', 'Cafe']).locations}
        self.assertEqual(first, second)


class RecommendationAPITestCase(APITestCase):
    """Test cases for POST /api/locations/recommendations/"""

    def setUp(self):
        self.country = Country.objects.create(name="Null Island", code="NI")
        self.museum = Tag.objects.create(name="Museum", icon_prefix="https://icons/museum_", icon_suffix=".png")
        self.cafe = Tag.objects.create(name="Cafe")
        self.l1 = create_location(self.country, 'l1', 0.0, 0.0, [self.museum])
        self.l2 = create_location(self.country, 'l2', 0.0, 0.01, [self.museum, self.cafe])
        self.l3 = create_location(self.country, 'l3', 10.0, 10.0, [self.museum, self.cafe])
        # ~4.5 km away: inside the default 5 km radius only
        self.l4 = create_location(self.country, 'l4', 0.0, 0.04, [self.museum, self.cafe])
        self.url = reverse('recommendations:recommend_locations')

    def post(self, body):
        return self.client.post(self.url, body, format='json')

    def test_recommendations_endpoint(self):
        response = self.post({
            'tags': ['Museum', 'Cafe'],
            'radius': 2,
            'userLocation': {'latitude': 0, 'longitude': 0},
        })

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'Recommended locations fetched successfully')
        data = response.data['data']
        self.assertEqual([item['external_id'] for item in data], ['l2'])
        self.assertEqual(data[0]['latitude'], 0.0)
        self.assertEqual(data[0]['longitude'], 0.01)
        self.assertEqual({tag['name'] for tag in data[0]['tags']}, {'Museum', 'Cafe'})
        self.assertIn('id', data[0]['tags'][0])

    def test_default_radius(self):
        with_default = self.post({'tags': ['Cafe'], 'userLocation': {'latitude': 0, 'longitude': 0}})
        explicit = self.post({'tags': ['Cafe'], 'radius': 5, 'userLocation': {'latitude': 0, 'longitude': 0}})

        default_ids = {item['id'] for item in with_default.data['data']}
        self.assertEqual(default_ids, {item['id'] for item in explicit.data['data']})
        self.assertEqual(default_ids, {str(self.l2.id), str(self.l4.id)})

    def test_no_match_is_success(self):
        response = self.post({'tags': ['Stadium'], 'userLocation': {'latitude': 0, 'longitude': 0}})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertEqual(response.data['data'], [])
        self.assertEqual(response.data['message'], 'No locations found matching all selected tags')

    def test_empty_tags_rejected(self):
        response = self.post({'tags': [], 'userLocation': {'latitude': 0, 'longitude': 0}})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('tags', response.data['data'])

    def test_non_array_tags_rejected(self):
        response = self.post({'tags': 'Museum', 'userLocation': {'latitude': 0, 'longitude': 0}})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_missing_tags_rejected(self):
        response = self.post({'userLocation': {'latitude': 0, 'longitude': 0}})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_missing_user_location_rejected(self):
        response = self.post({'tags': ['Museum']})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('userLocation', response.data['data'])

    def test_invalid_user_location_rejected(self):
        for location in (
            {'latitude': 0},
            {'latitude': 'north', 'longitude': 0},
            {'latitude': 120, 'longitude': 0},
            'somewhere',
        ):
            with self.subTest(userLocation=location):
                response = self.post({'tags': ['Museum'], 'userLocation': location})
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertFalse(response.data['success'])

    def test_non_numeric_radius_rejected(self):
        response = self.post({
            'tags': ['Museum'],
            'radius': 'wide',
            'userLocation': {'latitude': 0, 'longitude': 0},
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
