"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from instruction_gateway.api.error_handlers import register_error_handlers
from instruction_gateway.api.middleware import RequestContextMiddleware
from instruction_gateway.api.v1 import payment_instructions
from instruction_gateway.infrastructure.observability.logging import setup_logging
from instruction_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Payment Instruction Gateway",
        description="Parses and settles free-text payment instructions",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(RequestContextMiddleware)

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
    app.include_router(payment_instructions.router, prefix="/v1", tags=["payment-instructions"])

    return app


app = create_app()
