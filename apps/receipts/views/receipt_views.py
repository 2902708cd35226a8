"""
Receipt processing and points lookup views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from ..serializers import (
    ReceiptSerializer, ProcessReceiptResponseSerializer,
    PointsResponseSerializer, ErrorResponseSerializer
)
from ..services import ReceiptService


class ReceiptServiceMixin:
    """
    Gives a view its ReceiptService.

    The store defaults to the one owned by the receipts app; a different one
    can be injected with View.as_view(store=...).
    """
    store = None

    def get_service(self):
        return ReceiptService(store=self.store)


class ProcessReceiptView(ReceiptServiceMixin, APIView):
    """Score a receipt and return the id its points are stored under"""

    @extend_schema(
        request=ReceiptSerializer,
        responses={
            200: ProcessReceiptResponseSerializer,
            400: ErrorResponseSerializer,
            500: ErrorResponseSerializer,
        },
    )
    def post(self, request):
        receipt_id = self.get_service().process_receipt(request.data)
        return Response({'id': receipt_id})


class ReceiptPointsView(ReceiptServiceMixin, APIView):
    """Return the points awarded to a processed receipt"""

    @extend_schema(
        responses={
            200: PointsResponseSerializer,
            404: ErrorResponseSerializer,
            500: ErrorResponseSerializer,
        },
    )
    def get(self, request, receipt_id):
        points = self.get_service().get_points(receipt_id)
        return Response({'points': points})
