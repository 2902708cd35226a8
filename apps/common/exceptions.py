"""
Service-layer errors and the DRF exception handler that renders them
"""
from rest_framework.views import exception_handler
from rest_framework.exceptions import ParseError, ValidationError
from rest_framework import status
from rest_framework.response import Response
import logging

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """
    Structured exception raised by services.

    Carries a stable machine-readable code, a human-readable message and
    the HTTP status it maps to.

    Usage:
        try:
            points = service.get_points(receipt_id)
        except ServiceError as e:
            if e.code == "RECEIPT_NOT_FOUND":
                handle_not_found()
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = 'SERVICE_ERROR'
    default_message = 'Internal server error'

    def __init__(self, message=None, code=None):
        self.message = message or self.default_message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.code}] {self.message}"


def _error_message(exc, response):
    """Pick a single error string for an APIException response"""
    if isinstance(exc, (ParseError, ValidationError)):
        return 'Invalid request payload'

    detail = getattr(exc, 'detail', None)
    if isinstance(detail, str):
        return str(detail)
    if isinstance(response.data, dict) and 'detail' in response.data:
        return str(response.data['detail'])
    return 'An error occurred'


def custom_exception_handler(exc, context):
    """
    Exception handler that returns errors as {"error": "<message>"}
    """
    if isinstance(exc, ServiceError):
        if exc.status_code >= 500:
            logger.error(f"Service error: {exc}", exc_info=exc.__cause__ or exc)
        else:
            logger.warning(f"Request rejected: {exc}")
        return Response({'error': exc.message}, status=exc.status_code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        logger.warning(f"API Exception: {exc}")
        response.data = {'error': _error_message(exc, response)}

    return response
