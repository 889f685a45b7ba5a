"""Pydantic schemas for API request/response validation"""

import math
from typing import Annotated, List

from pydantic import AfterValidator, BaseModel, Field, StringConstraints

from receipt_points.domain.models import Item, Receipt


def _check_finite(value: str) -> str:
    if not math.isfinite(float(value)):
        raise ValueError("amount out of range")
    return value


# Amounts travel as JSON strings holding an ASCII decimal number, e.g. "35.00" or "3.5e1"
DecimalString = Annotated[
    str,
    StringConstraints(pattern=r"^-?[0-9]+(\.[0-9]*)?([eE][+-]?[0-9]+)?$"),
    AfterValidator(_check_finite),
]


class ItemSchema(BaseModel):
    """Single line item in a submitted receipt"""

    short_description: str = Field(..., alias="shortDescription")
    price: DecimalString

    def to_domain(self) -> Item:
        return Item(short_description=self.short_description, price=float(self.price))


class ReceiptRequest(BaseModel):
    """Request body for POST /receipts/process"""

    retailer: str
    purchase_date: str = Field(..., alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: str = Field(..., alias="purchaseTime", description="HH:MM, 24h")
    total: DecimalString
    items: List[ItemSchema]

    def to_domain(self) -> Receipt:
        """Convert the wire representation into the scoring model"""
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            total=float(self.total),
            items=tuple(item.to_domain() for item in self.items),
        )


class ProcessReceiptResponse(BaseModel):
    """Response for POST /receipts/process"""

    id: str


class PointsResponse(BaseModel):
    """Response for GET /receipts/{id}/points"""

    points: int


class ErrorResponse(BaseModel):
    """Shared shape of every error body"""

    error: str
