"""
Test configuration for the receipt server.
"""
import os

import pytest


def pytest_configure():
    """Point Django at the test settings."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'receipt_server.settings.test')
    os.environ.setdefault('ENVIRONMENT', 'test')


@pytest.fixture
def score_store(monkeypatch):
    """A fresh in-memory store installed as the receipts app store."""
    from django.apps import apps
    from apps.receipts.storage import InMemoryScoreStore

    store = InMemoryScoreStore()
    monkeypatch.setattr(apps.get_app_config('receipts'), 'store', store)
    return store


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def target_receipt_payload():
    """Two-item Target receipt worth 18 points."""
    return {
        'retailer': 'Target',
        'purchaseDate': '2022-01-01',
        'purchaseTime': '13:01',
        'items': [
            {'shortDescription': 'Pepsi - 12-oz', 'price': '1.25'},
            {'shortDescription': 'Dasani', 'price': '1.40'},
        ],
        'total': '2.65',
    }
