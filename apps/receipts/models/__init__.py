"""
Receipt models module.

Receipts are transient request values, not database rows.
"""
from .receipt import Item, Receipt

__all__ = [
    'Item',
    'Receipt',
]
