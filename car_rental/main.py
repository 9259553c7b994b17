"""
➡️ But : assembler toutes les pièces du puzzle.

create_app(settings) construit l'instance FastAPI et le ServiceContext
(engine DB, réglages JWT, horloge) puis configure :

logging + middleware de log des requêtes

CORS

handlers d'erreurs ({"message": ...})

routers (/api/auth, /api/cars, /api/bookings, /api/dashboard, /health)

création des tables au démarrage (lifespan)

Point unique d’exécution : uvicorn car_rental.main:app --reload (ou la commande `car-rental`).
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from car_rental.core.config import Settings, settings as default_settings
from car_rental.core.context import ServiceContext
from car_rental.core.errors import register_exception_handlers
from car_rental.core.logging import RequestLoggingMiddleware, setup_logging
from car_rental.core.openapi import custom_openapi
from car_rental.db.session import build_engine, init_db

from car_rental.api.routers import authentication, bookings, cars, dashboard, health

API_PREFIX = "/api"

logger = logging.getLogger("car_rental")


def create_app(
    settings: Optional[Settings] = None,
    *,
    now_fn: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    engine = build_engine(
        settings.DATABASE_URL,
        echo=settings.DB_ECHO and settings.ENV == "development",
    )
    ctx = ServiceContext(settings=settings, engine=engine, jwt=settings.jwt)
    if now_fn is not None:
        ctx.now_fn = now_fn

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        logger.info("Connected to %s (%s)", engine.dialect.name, settings.ENV)
        yield
        engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        openapi_tags=[
            {"name": "auth", "description": "Inscription, connexion, réglages du compte"},
            {"name": "cars", "description": "Gestion de la flotte"},
            {"name": "bookings", "description": "Gestion des réservations"},
            {"name": "dashboard", "description": "Statistiques"},
            {"name": "health", "description": "Supervision"},
        ],
        lifespan=lifespan,
    )
    app.state.ctx = ctx

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    # Routers
    app.include_router(authentication.router, prefix=API_PREFIX)
    app.include_router(cars.router, prefix=API_PREFIX)
    app.include_router(bookings.router, prefix=API_PREFIX)
    app.include_router(dashboard.router, prefix=API_PREFIX)
    app.include_router(health.router)

    app.openapi = lambda: custom_openapi(app)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "car_rental.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=(default_settings.ENV == "development"),
    )


if __name__ == "__main__":
    run()
