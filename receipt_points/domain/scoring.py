"""Points scoring engine - core business logic for receipt rewards"""

import logging
import math
import re
from datetime import time
from typing import Sequence

from receipt_points.domain.models import Item, PointsBreakdown, Receipt
from receipt_points.utils.date_utils import parse_purchase_date, parse_purchase_time

logger = logging.getLogger(__name__)

_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]")

ROUND_TOTAL_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = 0.2
ODD_DAY_POINTS = 6
AFTERNOON_WINDOW_POINTS = 10
AFTERNOON_WINDOW_START = time(14, 0)
AFTERNOON_WINDOW_END = time(16, 0)


def retailer_name_points(retailer: str) -> int:
    """One point per ASCII letter or digit in the retailer name"""
    return len(_ALPHANUMERIC.findall(retailer))


def round_total_points(total: float) -> int:
    """50 points if the total has no cents"""
    return ROUND_TOTAL_POINTS if total.is_integer() else 0


def quarter_multiple_points(total: float) -> int:
    """
    25 points if the total is a multiple of 0.25.

    Exact float comparison, no tolerance: 0.25 is exactly representable,
    so any two-decimal total that qualifies leaves a remainder of exactly 0.
    """
    return QUARTER_MULTIPLE_POINTS if math.fmod(total, 0.25) == 0 else 0


def item_pair_points(items: Sequence[Item]) -> int:
    """5 points for every two items on the receipt"""
    return (len(items) // 2) * POINTS_PER_ITEM_PAIR


def item_description_points(item: Item) -> int:
    """
    Points for a single item based on its description length.

    If the trimmed description length is a multiple of 3 (blank counts),
    award the price multiplied by 0.2, rounded up to the nearest integer.
    """
    if len(item.short_description.strip()) % DESCRIPTION_LENGTH_FACTOR != 0:
        return 0
    return math.ceil(item.price * DESCRIPTION_PRICE_MULTIPLIER)


def odd_day_points(purchase_date: str) -> int:
    """6 points if the day in the purchase date is odd; unparseable dates score 0"""
    parsed = parse_purchase_date(purchase_date)
    if parsed is None:
        logger.debug("Unparseable purchase date", extra={"purchase_date": purchase_date})
        return 0
    return ODD_DAY_POINTS if parsed.day % 2 == 1 else 0


def afternoon_window_points(purchase_time: str) -> int:
    """10 points if purchased after 14:00 and before 16:00, both bounds excluded"""
    parsed = parse_purchase_time(purchase_time)
    if parsed is None:
        logger.debug("Unparseable purchase time", extra={"purchase_time": purchase_time})
        return 0
    return AFTERNOON_WINDOW_POINTS if AFTERNOON_WINDOW_START < parsed < AFTERNOON_WINDOW_END else 0


def score_receipt(receipt: Receipt) -> PointsBreakdown:
    """
    Evaluate every rule against a receipt.

    Rules are independent: a malformed date or time only zeroes its own
    rule, it never aborts scoring of the rest of the receipt.
    """
    return PointsBreakdown(
        retailer_name=retailer_name_points(receipt.retailer),
        round_total=round_total_points(receipt.total),
        quarter_multiple=quarter_multiple_points(receipt.total),
        item_pairs=item_pair_points(receipt.items),
        item_descriptions=sum(item_description_points(item) for item in receipt.items),
        odd_day=odd_day_points(receipt.purchase_date),
        afternoon_window=afternoon_window_points(receipt.purchase_time),
    )


def calculate_points(receipt: Receipt) -> int:
    """Main entry point: total points awarded for a receipt"""
    return score_receipt(receipt).total
