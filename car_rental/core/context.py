"""
➡️ But : Regrouper les dépendances construites une seule fois au démarrage.

ServiceContext est créé par create_app() puis stocké dans app.state.ctx ;
les dépendances FastAPI le relisent à chaque requête (pas d'état global mutable).
"""

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.engine import Engine

from car_rental.core.config import Settings
from car_rental.security.tokens import JWTSettings


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ServiceContext:
    settings: Settings
    engine: Engine
    jwt: JWTSettings
    now_fn: Callable[[], datetime] = _utc_now
    started_at: float = field(default_factory=time.monotonic)

    @property
    def uptime(self) -> float:
        """Secondes écoulées depuis le démarrage du process."""
        return time.monotonic() - self.started_at
