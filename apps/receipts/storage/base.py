"""
Score store interface.
"""
import uuid
from abc import ABC, abstractmethod


class ScoreStore(ABC):
    """
    Keyed storage of computed points.

    Records are created once by save() and never updated or deleted.
    """

    @staticmethod
    def generate_id():
        """Random 128-bit identifier rendered as a UUID string"""
        return str(uuid.uuid4())

    @abstractmethod
    def save(self, points):
        """
        Store points under a freshly generated identifier.

        Returns:
            str: the new identifier

        Raises:
            StorageFailure: the backend could not record the score
        """

    @abstractmethod
    def get(self, receipt_id):
        """
        Look up the points stored under an identifier.

        Raises:
            ReceiptNotFound: nothing is stored under receipt_id
            StorageFailure: the backend could not be read
        """

    def ping(self):
        """Whether the backend is reachable"""
        return True
