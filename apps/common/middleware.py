"""
Middleware for request tracing, access logging and error handling
"""

import logging
import re
import time
import uuid
from contextvars import ContextVar

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = 'X-Request-ID'

# Inbound ids are echoed back, so only accept short token-like values
_VALID_REQUEST_ID = re.compile(r'^[A-Za-z0-9._-]{1,128}$')

_current_request_id = ContextVar('request_id', default='-')


def get_request_id():
    """Id of the request being served in the current context, '-' outside a request"""
    return _current_request_id.get()


class RequestIDLogFilter(logging.Filter):
    """Attach the current request id to every log record"""

    def filter(self, record):
        record.request_id = get_request_id()
        return True


class RequestIDMiddleware(MiddlewareMixin):
    """
    Assign every request an id, reusing a well-formed inbound X-Request-ID.
    The id is available as request.request_id and returned in the response.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        super().__init__(get_response)

    def __call__(self, request):
        request_id = request.headers.get(REQUEST_ID_HEADER, '')
        if not _VALID_REQUEST_ID.match(request_id):
            request_id = uuid.uuid4().hex

        request.request_id = request_id
        token = _current_request_id.set(request_id)
        try:
            response = self.get_response(request)
        finally:
            _current_request_id.reset(token)

        response[REQUEST_ID_HEADER] = request_id
        return response


class AccessLogMiddleware(MiddlewareMixin):
    """Log method, path, status and duration of every request"""

    def __init__(self, get_response):
        self.get_response = get_response
        super().__init__(get_response)

    def __call__(self, request):
        start_time = time.monotonic()
        response = self.get_response(request)
        duration_ms = (time.monotonic() - start_time) * 1000

        logger.info(
            f"{request.method} {request.get_full_path()} "
            f"{response.status_code} {duration_ms:.2f}ms"
        )
        return response


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Secure error handling middleware that prevents information leakage
    """

    def process_exception(self, request, exception):
        """Handle exceptions that escaped the views"""
        # Log the actual exception for debugging
        logger.error(f"Exception in {request.path}: {str(exception)}", exc_info=True)

        # Return generic error response without exposing internal details
        return JsonResponse({'error': 'Internal server error'}, status=500)
