from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mealorder.api.error_handling import register_exception_handlers
from mealorder.api.middleware.request_context import (
    REQUEST_ID_HEADER,
    AccessLogMiddleware,
    RequestIDMiddleware,
)
from mealorder.api.routes.health import router as health_router
from mealorder.api.routes.menu import router as menu_router
from mealorder.api.routes.metrics import router as metrics_router
from mealorder.api.routes.orders import router as orders_router
from mealorder.application.ports.catalog import DishCatalog
from mealorder.application.use_cases.take_order import build_take_order
from mealorder.infrastructure.catalog.in_memory import build_default_catalog
from mealorder.infrastructure.observability.logging_config import configure_logging
from mealorder.infrastructure.observability.otel import configure_otel


def _cors_allow_origins() -> list[str]:
    env = os.getenv("APP_ENV", "dev").lower()

    # Dev/test: unblock everything (no credentials allowed)
    if env in {"dev", "test"}:
        return ["*"]

    default_value = "https://your-prod-domain.com"
    raw_value = os.getenv("CORS_ALLOW_ORIGINS", default_value)
    return [origin.strip() for origin in raw_value.split(",") if origin.strip()]


def create_app(catalog: DishCatalog | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(title="Meal Order Backend", version="0.1.0")
    app.state.catalog = catalog if catalog is not None else build_default_catalog()
    app.state.take_order = build_take_order(app.state.catalog)

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(menu_router)
    app.include_router(orders_router)

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_allow_origins(),
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    configure_otel(app)
    return app


app = create_app()
