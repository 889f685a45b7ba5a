"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from receipt_points.infrastructure.store import IdFactory, ReceiptStore


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_receipt_store(request: Request) -> ReceiptStore:
    """Provide the score table created at application startup"""
    return request.app.state.receipt_store


def get_id_factory(request: Request) -> IdFactory:
    """Provide the receipt identifier generator"""
    return request.app.state.id_factory
