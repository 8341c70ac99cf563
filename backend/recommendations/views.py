"""
Views for the recommendations module.
"""
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from core.responses import ApiResponse, first_error_message
from locations.serializers import LocationSerializer
from recommendations.serializers import RecommendationRequestSerializer
from recommendations.services import TagMatchService


class RecommendLocationsView(APIView):
    """
    API endpoint for locations near the user that carry every selected tag.

    POST /api/locations/recommendations/
    Body:
    {
        "tags": ["Museum", "Cafe"],
        "radius": 5,
        "userLocation": {"latitude": 40.7128, "longitude": -74.0060}
    }
    """
    permission_classes = [AllowAny]

    def post(self, request):
        """Recommend locations matching all tags"""
        request_serializer = RecommendationRequestSerializer(data=request.data)
        if not request_serializer.is_valid():
            return ApiResponse(
                data=request_serializer.errors,
                message=first_error_message(request_serializer.errors),
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        result = TagMatchService.recommend(request_serializer.to_query())

        if not result.matched:
            return ApiResponse(
                data=[],
                message='No locations found matching all selected tags',
                status_code=status.HTTP_200_OK,
            )

        serializer = LocationSerializer(result.locations, many=True)
        return ApiResponse(
            data=serializer.data,
            message='Recommended locations fetched successfully',
            status_code=status.HTTP_200_OK,
        )
