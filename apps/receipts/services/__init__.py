"""
Receipt services module.
"""
from .points_calculator import ReceiptPointsCalculator, calculate_points, points_breakdown
from .receipt_service import ReceiptService

__all__ = [
    'ReceiptPointsCalculator',
    'calculate_points',
    'points_breakdown',
    'ReceiptService',
]
