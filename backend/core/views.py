"""
Service-level endpoints that do not belong to a domain app.
"""
from django.http import JsonResponse
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .responses import build_envelope


class HealthCheckView(APIView):
    """
    Liveness probe.

    GET /health/
    """
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'Server is running'}, status=status.HTTP_200_OK)


def route_not_found(request, exception=None):
    """JSON 404 for unknown routes, used as the project's handler404."""
    return JsonResponse(
        build_envelope(status.HTTP_404_NOT_FOUND, None, 'Route not found'),
        status=status.HTTP_404_NOT_FOUND,
    )
