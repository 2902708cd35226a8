"""
Receipt serializers module.
"""
from .receipt_serializers import (
    ItemSerializer, ReceiptSerializer,
    ProcessReceiptResponseSerializer, PointsResponseSerializer, ErrorResponseSerializer
)

__all__ = [
    'ItemSerializer',
    'ReceiptSerializer',
    'ProcessReceiptResponseSerializer',
    'PointsResponseSerializer',
    'ErrorResponseSerializer',
]
