"""
Score store backed by a Django cache alias.

Pointing the alias at a shared cache (Redis, Memcached) lets several
processes see the same scores.
"""
import logging

from django.conf import settings
from django.core.cache import caches

from ..exceptions import ReceiptNotFound, StorageFailure
from .base import ScoreStore

logger = logging.getLogger(__name__)


class CacheScoreStore(ScoreStore):
    """Scores kept in a Django cache without expiry"""

    key_prefix = 'receipt_points'
    ping_key = 'receipt_points_ping'

    def __init__(self, alias=None):
        self.alias = alias or settings.RECEIPTS_CACHE_ALIAS

    @property
    def cache(self):
        return caches[self.alias]

    def _key(self, receipt_id):
        return f"{self.key_prefix}:{receipt_id}"

    def save(self, points):
        receipt_id = self.generate_id()
        try:
            added = self.cache.add(self._key(receipt_id), points, timeout=None)
        except Exception as e:
            logger.error(f"Failed to write score to cache '{self.alias}': {e}")
            raise StorageFailure() from e

        if not added:
            # Key already present: treat as a failed write rather than overwrite
            raise StorageFailure()
        return receipt_id

    def get(self, receipt_id):
        try:
            points = self.cache.get(self._key(receipt_id))
        except Exception as e:
            logger.error(f"Failed to read score from cache '{self.alias}': {e}")
            raise StorageFailure('Failed to get points') from e

        if points is None:
            raise ReceiptNotFound()
        return points

    def ping(self):
        self.cache.set(self.ping_key, 1, timeout=10)
        return self.cache.get(self.ping_key) == 1
