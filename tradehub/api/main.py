"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradehub.api.errors import register_exception_handlers
from tradehub.api.routes import categories, health, products, trade_suggestions
from tradehub.config import settings
from tradehub.logging_config import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging()
    logger.info("tradehub_starting", event_publisher=settings.event_publisher)
    yield
    logger.info("tradehub_stopping")


def create_app() -> FastAPI:
    app = FastAPI(
        title="TradeHub API",
        description="Browse and publish B2B product listings and trade suggestions.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(trade_suggestions.router)
    app.include_router(categories.router)

    register_exception_handlers(app)

    return app


app = create_app()
