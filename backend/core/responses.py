"""
Uniform response envelope shared by every API endpoint.
"""
from rest_framework import status
from rest_framework.response import Response


def build_envelope(status_code: int, data=None, message: str = '') -> dict:
    """
    Build the envelope body: status_code, success, message, data.
    """
    return {
        'status_code': status_code,
        'success': status_code < 400,
        'message': message,
        'data': data,
    }


class ApiResponse(Response):
    """
    DRF Response whose body is always wrapped in the project envelope.
    """

    def __init__(self, data=None, message: str = '', status_code: int = status.HTTP_200_OK, **kwargs):
        super().__init__(build_envelope(status_code, data, message), status=status_code, **kwargs)


def first_error_message(detail) -> str:
    """
    Pick the first readable message out of serializer errors, prefixed
    with the field it belongs to.
    """
    if isinstance(detail, dict):
        for field, errors in detail.items():
            message = first_error_message(errors)
            if field == 'non_field_errors':
                return message
            return f"{field}: {message}"
        return 'Invalid request'
    if isinstance(detail, (list, tuple)):
        return first_error_message(detail[0]) if detail else 'Invalid request'
    return str(detail)
