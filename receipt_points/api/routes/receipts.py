"""POST /receipts/process and GET /receipts/{id}/points - receipt scoring endpoints"""

import logging
import time

from fastapi import APIRouter, Depends, Request

from receipt_points.api.dependencies import get_id_factory, get_receipt_store, get_request_id
from receipt_points.api.schemas import (
    ErrorResponse,
    PointsResponse,
    ProcessReceiptResponse,
    ReceiptRequest,
)
from receipt_points.domain.exceptions import InternalServiceError, ReceiptNotFoundError
from receipt_points.domain.scoring import calculate_points
from receipt_points.infrastructure.observability.logging import log_receipt_processed
from receipt_points.infrastructure.observability.metrics import record_lookup, record_receipt_processed
from receipt_points.infrastructure.store import IdFactory, ReceiptStore

router = APIRouter()


@router.post(
    "/receipts/process",
    response_model=ProcessReceiptResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def process_receipt(
    request_body: ReceiptRequest,
    request: Request,
    store: ReceiptStore = Depends(get_receipt_store),
    id_factory: IdFactory = Depends(get_id_factory),
):
    """
    Score a receipt and store the result under a new identifier.

    Flow:
    1. Convert the validated body into a domain Receipt
    2. Generate a fresh identifier
    3. Calculate points
    4. Store points under the identifier
    5. Return the identifier
    """
    start_time = time.time()
    request_id = get_request_id(request)
    receipt = request_body.to_domain()

    try:
        receipt_id = id_factory()
        points = calculate_points(receipt)
        store.put(receipt_id, points)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", exc_info=True, extra={"request_id": request_id})
        raise InternalServiceError() from e

    duration_ms = (time.time() - start_time) * 1000
    record_receipt_processed(points)
    log_receipt_processed(request_id, receipt_id, points, len(receipt.items), duration_ms)

    return ProcessReceiptResponse(id=receipt_id)


@router.get(
    "/receipts/{receipt_id}/points",
    response_model=PointsResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_receipt_store)):
    """
    Retrieve points awarded to a previously processed receipt.

    Raises:
        ReceiptNotFoundError: No receipt was processed under this identifier
    """
    points, found = store.get(receipt_id)
    record_lookup(found)
    if not found:
        raise ReceiptNotFoundError()

    return PointsResponse(points=points)
