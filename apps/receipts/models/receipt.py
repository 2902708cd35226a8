from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Item:
    """A receipt line: free-text description and unit price as submitted"""
    short_description: str = ''
    price: str = ''


@dataclass(frozen=True)
class Receipt:
    """
    A submitted purchase receipt awaiting scoring.

    Every field keeps the raw submitted text; parsing belongs to the
    validator and the points calculator.
    """
    retailer: str = ''
    purchase_date: str = ''
    purchase_time: str = ''
    items: Tuple[Item, ...] = field(default_factory=tuple)
    total: str = ''

    @property
    def item_count(self):
        return len(self.items)
