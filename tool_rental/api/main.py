"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from tool_rental.api.middleware import RequestIDMiddleware, MetricsMiddleware
from tool_rental.api.v1 import checkout, tools
from tool_rental.infrastructure.observability.logging import setup_logging
from tool_rental.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Tool Rental Service",
        description="Tool checkout pricing and rental agreements",
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
    app.include_router(checkout.router, prefix="/v1", tags=["checkout"])
    app.include_router(tools.router, prefix="/v1", tags=["tools"])

    return app


app = create_app()
