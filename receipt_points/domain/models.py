"""Domain models - pure Python dataclasses representing receipts and their scores"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Item:
    """Single purchased line item"""

    short_description: str
    price: float


@dataclass(frozen=True)
class Receipt:
    """Decoded purchase receipt submitted for scoring"""

    retailer: str
    purchase_date: str  # YYYY-MM-DD, parsed lazily by the odd-day rule
    purchase_time: str  # HH:MM (24h), parsed lazily by the afternoon rule
    total: float
    items: Tuple[Item, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PointsBreakdown:
    """Contribution of each scoring rule for one receipt"""

    retailer_name: int
    round_total: int
    quarter_multiple: int
    item_pairs: int
    item_descriptions: int
    odd_day: int
    afternoon_window: int

    @property
    def total(self) -> int:
        return (
            self.retailer_name
            + self.round_total
            + self.quarter_multiple
            + self.item_pairs
            + self.item_descriptions
            + self.odd_day
            + self.afternoon_window
        )
