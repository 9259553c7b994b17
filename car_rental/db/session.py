"""
➡️ But : Configurer la base et gérer les sessions de base de données.

build_engine(settings) : connexion à la base (sqlite:///car_rental.db par défaut).

init_db(engine) : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session sur l'engine du ServiceContext,
la fournit aux routes, puis la ferme proprement (rollback implicite si pas de commit).
"""

from typing import Any, Dict, Iterator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

# Import all models for creating all tables
from car_rental.db.models.users import User  # noqa: F401
from car_rental.db.models.cars import Car  # noqa: F401
from car_rental.db.models.bookings import Booking  # noqa: F401


def build_engine(url: str, *, echo: bool = False) -> Engine:
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")
    is_memory = is_sqlite and (url in ("sqlite://", "sqlite:///:memory:"))

    connect_args: Dict[str, Any] = {}
    kwargs: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False
    if is_memory:
        # une seule connexion partagée, sinon chaque connexion a sa propre base vide
        kwargs["poolclass"] = StaticPool

    engine = create_engine(
        url,
        echo=echo,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
        **kwargs,
    )

    if is_sqlite:
        # SQLite n'applique les FKs (ON DELETE SET NULL) que sur demande
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_db(engine: Engine) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod, préfère des migrations.
    """
    SQLModel.metadata.create_all(engine)


def ping(engine: Engine) -> bool:
    """Aller-retour minimal vers la base ; False si injoignable."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False


def get_session(request: Request) -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    engine: Engine = request.app.state.ctx.engine
    with Session(engine) as session:
        yield session
