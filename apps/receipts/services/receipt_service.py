"""
Receipt service: decode, validate, score and store receipts.
"""
import logging

from ..exceptions import MalformedPayload
from ..serializers import ReceiptSerializer
from ..storage import get_score_store
from ..validators import validate_receipt
from .points_calculator import calculate_points

logger = logging.getLogger(__name__)


class ReceiptService:
    """Service for scoring receipts and looking up their points"""

    def __init__(self, store=None):
        self.store = store if store is not None else get_score_store()

    @staticmethod
    def decode_receipt(payload):
        """Turn a parsed request body into a Receipt or raise MalformedPayload"""
        serializer = ReceiptSerializer(data=payload)
        if not serializer.is_valid():
            raise MalformedPayload(errors=serializer.errors)
        return serializer.save()

    def process_receipt(self, payload):
        """
        Score a submitted receipt and store the result.

        Returns:
            str: identifier the points can be fetched with

        Raises:
            MalformedPayload, ReceiptValidationError, StorageFailure
        """
        receipt = self.decode_receipt(payload)
        validate_receipt(receipt)

        points = calculate_points(receipt)
        receipt_id = self.store.save(points)

        logger.info(f"Receipt processed successfully: id={receipt_id} points={points}")
        return receipt_id

    def get_points(self, receipt_id):
        """
        Points stored for a processed receipt.

        Raises:
            ReceiptNotFound, StorageFailure
        """
        points = self.store.get(receipt_id)
        logger.info(f"Points retrieved successfully: id={receipt_id} points={points}")
        return points
