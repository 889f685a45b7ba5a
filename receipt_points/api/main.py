"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from receipt_points.api.error_handlers import register_error_handlers
from receipt_points.api.middleware import RequestIDMiddleware, MetricsMiddleware
from receipt_points.api.routes import receipts
from receipt_points.infrastructure.observability.logging import setup_logging
from receipt_points.infrastructure.store import IdFactory, ReceiptStore, new_receipt_id
from receipt_points.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(store: ReceiptStore | None = None, id_factory: IdFactory | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        store: Score table shared by all requests (default: a new empty store)
        id_factory: Receipt identifier generator (default: random UUID4)
    """
    app = FastAPI(
        title="Receipt Points Service",
        description="Receipt scoring and points lookup service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # One store per application; lives until the process exits
    app.state.receipt_store = store if store is not None else ReceiptStore()
    app.state.id_factory = id_factory or new_receipt_id

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_error_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(receipts.router, tags=["receipts"])

    return app


app = create_app()
