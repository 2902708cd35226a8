"""
Receipt validators and the field parsers they share with the points calculator.
"""
import re
from datetime import datetime
from decimal import Decimal

from .exceptions import EmptyRetailer, InvalidDate, InvalidTime, NoItems, InvalidTotal

DATE_FORMAT = '%Y-%m-%d'
TIME_FORMAT = '%H:%M'

_DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
_TIME_PATTERN = re.compile(r'[0-9]{1,2}:[0-9]{2}')
# Plain decimal notation only: no exponent, no inf/nan, no surrounding spaces
_AMOUNT_PATTERN = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')


def parse_purchase_date(value):
    """
    Parse a YYYY-MM-DD purchase date.

    Returns:
        datetime.date, or None when the text is not a real calendar date
    """
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def parse_purchase_time(value):
    """
    Parse a 24-hour HH:MM purchase time. A one-digit hour is accepted.

    Returns:
        datetime.time, or None when the text is not a valid time of day
    """
    if not isinstance(value, str) or not _TIME_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        return None


def parse_amount(value):
    """
    Parse a currency amount written in decimal notation.

    Returns:
        decimal.Decimal, or None when the text is not a finite decimal number
    """
    if not isinstance(value, str) or not _AMOUNT_PATTERN.fullmatch(value):
        return None
    return Decimal(value)


def validate_receipt(receipt):
    """
    Check a decoded receipt before it is scored.

    Checks run in a fixed order and the first failure is raised. Item
    descriptions and prices are not checked; unparsable prices score zero.

    Args:
        receipt: Receipt instance

    Raises:
        EmptyRetailer: retailer is blank after trimming
        InvalidDate: purchase date is not YYYY-MM-DD
        InvalidTime: purchase time is not HH:MM
        NoItems: the receipt lists no items
        InvalidTotal: total is not a decimal number
    """
    if not receipt.retailer.strip():
        raise EmptyRetailer()

    if parse_purchase_date(receipt.purchase_date) is None:
        raise InvalidDate()

    if parse_purchase_time(receipt.purchase_time) is None:
        raise InvalidTime()

    if not receipt.items:
        raise NoItems()

    if parse_amount(receipt.total) is None:
        raise InvalidTotal()
