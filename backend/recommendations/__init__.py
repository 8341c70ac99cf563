"""
Recommendations Module Summary
==============================

Tag-filtered discovery: given a position, a radius in kilometers and a set
of tag names, returns the locations within the radius that carry EVERY
requested tag.

1. RecommendationQuery / RecommendationResult - request and outcome DTOs
2. TagMatchService - candidate (AND-match by distinct count) and assembly reads
3. RecommendLocationsView - POST /api/locations/recommendations/
"""
