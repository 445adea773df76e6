"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from purchase_coach.api.middleware import RequestIDMiddleware, MetricsMiddleware
from purchase_coach.api.v1 import categories, decision
from purchase_coach.infrastructure.observability.logging import setup_logging
from purchase_coach.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Purchase Coach",
        description="Buy / wait / skip recommendations for prospective purchases",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(decision.router, prefix="/v1", tags=["decisions"])
    app.include_router(categories.router, prefix="/v1", tags=["categories"])

    return app


app = create_app()
