"""
Project-wide DRF exception handler.

Every error leaves the API in the same envelope as successful responses.
Storage and unexpected failures become a generic 500 and are logged; they
are not retried here.
"""
import logging

from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.views import exception_handler

from .responses import ApiResponse, first_error_message

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = 'Internal server error'

# Headers set by DRF's default handler that clients rely on.
FORWARDED_HEADERS = ('WWW-Authenticate', 'Retry-After', 'Allow')


def api_exception_handler(exc, context):
    """
    Wrap DRF's default handling in the response envelope.

    Validation errors keep their field errors under ``data``; other API
    exceptions (404, 405, ...) carry only their message. Anything DRF does
    not know how to handle, database errors included, becomes a 500.
    """
    response = exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, exceptions.ValidationError):
            wrapped = ApiResponse(
                data=response.data,
                message=first_error_message(response.data),
                status_code=response.status_code,
            )
        else:
            detail = response.data.get('detail', '') if isinstance(response.data, dict) else response.data
            wrapped = ApiResponse(
                data=None,
                message=str(detail),
                status_code=response.status_code,
            )
        for header in FORWARDED_HEADERS:
            if response.has_header(header):
                wrapped[header] = response[header]
        return wrapped

    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown view'
    if isinstance(exc, DatabaseError):
        logger.error(f"Storage error in {view_name}: {exc}", exc_info=exc)
    else:
        logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=exc)

    return ApiResponse(
        data=None,
        message=SERVER_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
