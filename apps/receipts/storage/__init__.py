"""
Score storage module.

Backends are selected with the RECEIPTS_STORE_BACKEND setting.
"""
from django.apps import apps

from .base import ScoreStore
from .memory import InMemoryScoreStore
from .cache import CacheScoreStore

__all__ = [
    'ScoreStore',
    'InMemoryScoreStore',
    'CacheScoreStore',
    'get_score_store',
]


def get_score_store():
    """Return the store owned by the receipts app"""
    return apps.get_app_config('receipts').store
