"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from receipt_points.api.main import create_app
from receipt_points.domain.models import Item, Receipt
from receipt_points.infrastructure.store import ReceiptStore


@pytest.fixture
def store() -> ReceiptStore:
    """Fresh in-memory score table"""
    return ReceiptStore()


@pytest.fixture
def client(store: ReceiptStore) -> TestClient:
    """Create FastAPI test client backed by the test store"""
    app = create_app(store=store)
    return TestClient(app)


@pytest.fixture
def target_receipt_payload() -> dict:
    """Wire receipt worth 28 points"""
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
        "total": "35.35",
    }


@pytest.fixture
def corner_market_payload() -> dict:
    """Wire receipt worth 109 points"""
    return {
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "items": [
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
        ],
        "total": "9.00",
    }


@pytest.fixture
def baseline_receipt() -> Receipt:
    """Receipt on which every rule but the retailer name scores zero"""
    return Receipt(
        retailer="",
        purchase_date="2022-01-02",
        purchase_time="10:00",
        total=35.10,
        items=(Item(short_description="Gatorade", price=2.25),),
    )
