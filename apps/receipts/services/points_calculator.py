"""
Points calculator for receipt-based point awards.
"""
import math
from datetime import time
from fractions import Fraction

from ..validators import parse_amount, parse_purchase_date, parse_purchase_time


class ReceiptPointsCalculator:
    """
    Calculate the points awarded for a receipt.

    Every rule is independent and adds a non-negative amount. Amounts are
    handled as exact fractions so cent values never pick up binary
    rounding error.
    """

    ROUND_DOLLAR_POINTS = 50
    QUARTER_MULTIPLE_POINTS = 25
    ITEM_PAIR_POINTS = 5
    DESCRIPTION_LENGTH_DIVISOR = 3
    DESCRIPTION_PRICE_MULTIPLIER = Fraction(1, 5)
    ODD_DAY_POINTS = 6
    AFTERNOON_POINTS = 10
    AFTERNOON_START = time(14, 0)
    AFTERNOON_END = time(16, 0)

    @staticmethod
    def _exact_amount(value):
        amount = parse_amount(value)
        if amount is None:
            return None
        return Fraction(amount)

    @classmethod
    def retailer_points(cls, receipt):
        """One point per ASCII letter or digit in the retailer name"""
        return sum(1 for char in receipt.retailer if char.isascii() and char.isalnum())

    @classmethod
    def round_dollar_points(cls, receipt):
        """Bonus when the total has no cents"""
        total = cls._exact_amount(receipt.total)
        if total is not None and total.denominator == 1:
            return cls.ROUND_DOLLAR_POINTS
        return 0

    @classmethod
    def quarter_multiple_points(cls, receipt):
        """Bonus when the total in cents is divisible by 25"""
        total = cls._exact_amount(receipt.total)
        if total is not None and (total * 4).denominator == 1:
            return cls.QUARTER_MULTIPLE_POINTS
        return 0

    @classmethod
    def item_pair_points(cls, receipt):
        """Points for every complete pair of items"""
        return (receipt.item_count // 2) * cls.ITEM_PAIR_POINTS

    @classmethod
    def description_points(cls, receipt):
        """
        For items whose trimmed description length is a multiple of 3,
        award 20% of the price rounded up. An empty description counts,
        and a price that does not parse counts as zero.
        """
        points = 0
        for item in receipt.items:
            if len(item.short_description.strip()) % cls.DESCRIPTION_LENGTH_DIVISOR != 0:
                continue
            price = cls._exact_amount(item.price) or 0
            points += max(0, math.ceil(price * cls.DESCRIPTION_PRICE_MULTIPLIER))
        return points

    @classmethod
    def odd_day_points(cls, receipt):
        """Bonus when the purchase falls on an odd day of the month"""
        purchase_date = parse_purchase_date(receipt.purchase_date)
        if purchase_date is not None and purchase_date.day % 2 == 1:
            return cls.ODD_DAY_POINTS
        return 0

    @classmethod
    def afternoon_points(cls, receipt):
        """Bonus for purchases strictly between 14:00 and 16:00"""
        purchase_time = parse_purchase_time(receipt.purchase_time)
        if purchase_time is not None and cls.AFTERNOON_START < purchase_time < cls.AFTERNOON_END:
            return cls.AFTERNOON_POINTS
        return 0

    @classmethod
    def rules(cls):
        """Rule name to rule function, in evaluation order"""
        return {
            'retailer_name': cls.retailer_points,
            'round_dollar_total': cls.round_dollar_points,
            'quarter_multiple_total': cls.quarter_multiple_points,
            'item_pairs': cls.item_pair_points,
            'item_descriptions': cls.description_points,
            'odd_purchase_day': cls.odd_day_points,
            'afternoon_purchase': cls.afternoon_points,
        }

    @classmethod
    def breakdown(cls, receipt):
        """Points contributed by each rule"""
        return {name: rule(receipt) for name, rule in cls.rules().items()}

    @classmethod
    def calculate(cls, receipt):
        """Total points for a receipt that passed validation"""
        return sum(cls.breakdown(receipt).values())


def calculate_points(receipt):
    return ReceiptPointsCalculator.calculate(receipt)


def points_breakdown(receipt):
    return ReceiptPointsCalculator.breakdown(receipt)
