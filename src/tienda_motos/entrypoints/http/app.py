import logging
import os

from fastapi import FastAPI

from tienda_motos.entrypoints.http.exception_handlers import register_exception_handlers
from tienda_motos.entrypoints.http.routes.financial_entities import (
    router as financial_entities_router,
)
from tienda_motos.entrypoints.http.routes.health import router as health_router
from tienda_motos.entrypoints.http.routes.quotes import router as quotes_router
from tienda_motos.entrypoints.http.routes.vehicles import router as vehicles_router


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_app() -> FastAPI:
    app = FastAPI(
        title="Tienda Motos API",
        description="""
        Motorcycle storefront API: catalog lookup and cash/credit quotes.

        ## Features
        - Get catalog vehicles
        - Quote a vehicle for cash or credit in a city scenario
        - Estimate purchasing power from a daily budget
        - Apply the published usury rate to synced lenders

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(quotes_router, prefix="/v1")
    app.include_router(financial_entities_router, prefix="/v1")

    return app


configure_logging()
app = build_app()
