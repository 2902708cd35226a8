"""
Receipt views module.
"""
from .receipt_views import ProcessReceiptView, ReceiptPointsView

__all__ = [
    'ProcessReceiptView',
    'ReceiptPointsView',
]
