"""
➡️ But : Configurer le logging (stdlib) et tracer chaque requête HTTP.

setup_logging() : handler console + format commun, niveau depuis les settings.

RequestLoggingMiddleware : une ligne par requête (méthode, chemin, statut, durée).
Le corps des requêtes n'est jamais loggé (il peut contenir des mots de passe).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

LOG_FORMAT = "%(asctime)s %(name)-12s %(levelname)-8s %(message)s"

logger = logging.getLogger("car_rental.http")


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger("car_rental")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
