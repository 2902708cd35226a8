"""
In-memory score store.
"""
from ..exceptions import ReceiptNotFound
from .base import ScoreStore
from .locks import ReadWriteLock


class InMemoryScoreStore(ScoreStore):
    """
    Process-local dict of identifier to points.

    Contents are lost when the process exits.
    """

    def __init__(self):
        self._points = {}
        self._lock = ReadWriteLock()

    def save(self, points):
        with self._lock.write_lock():
            receipt_id = self.generate_id()
            while receipt_id in self._points:
                receipt_id = self.generate_id()
            self._points[receipt_id] = points
        return receipt_id

    def get(self, receipt_id):
        with self._lock.read_lock():
            try:
                return self._points[receipt_id]
            except KeyError:
                raise ReceiptNotFound() from None

    def __len__(self):
        with self._lock.read_lock():
            return len(self._points)
