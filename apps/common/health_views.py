"""
Health check views for the receipt server.
Provides an endpoint for monitoring application health and status.
"""
from django.apps import apps
from django.http import JsonResponse
from django.utils import timezone
from django.views import View
import time
import logging

from receipt_server import __version__

logger = logging.getLogger(__name__)


class BasicHealthCheckView(View):
    """
    Basic health check endpoint that returns HTTP 200 with JSON response.
    No authentication required for monitoring tools.
    Includes score store connectivity verification.
    """

    def get(self, request):
        """
        Handle GET request to /health/ endpoint.
        Returns basic health status with timestamp and store connectivity.
        """
        start_time = time.time()

        health_response = {
            'status': 'healthy',
            'timestamp': timezone.now().isoformat(),
            'version': __version__
        }

        store_status, store_error = self._check_store_health()
        health_response['store'] = store_status

        if store_status['status'] != 'healthy':
            health_response['status'] = 'unhealthy'
            logger.error(f"Score store health check failed: {store_error}")

        response_time_ms = (time.time() - start_time) * 1000
        health_response['response_time_ms'] = round(response_time_ms, 2)

        status_code = 200 if health_response['status'] == 'healthy' else 503

        return JsonResponse(health_response, status=status_code)

    def _check_store_health(self):
        """
        Ping the configured score store.

        Returns:
            tuple: (store_status_dict, error_message)
        """
        store = apps.get_app_config('receipts').store
        backend = type(store).__name__

        try:
            alive = store.ping()
        except Exception as e:
            return {
                'status': 'unhealthy',
                'backend': backend,
                'message': 'Score store connectivity error'
            }, str(e)

        if alive:
            return {
                'status': 'healthy',
                'backend': backend,
                'message': 'Score store reachable'
            }, None

        return {
            'status': 'unhealthy',
            'backend': backend,
            'message': 'Score store did not answer'
        }, 'Ping returned False'
