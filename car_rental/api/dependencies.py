"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Tout part du ServiceContext (app.state.ctx) : session DB, réglages JWT, horloge.

get_current_identity() : garde d'accès. Appliquée au niveau des routers protégés,
elle rejette la requête (401) avant que quoi que ce soit d'autre ne touche la base.

require_role() : point d'extension pour restreindre une route à certains rôles.
"""

from typing import Callable, Optional

from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from car_rental.core.context import ServiceContext
from car_rental.core.errors import AuthError, ForbiddenError
from car_rental.db.session import get_session

from car_rental.db.repositories.users import UserRepository
from car_rental.db.repositories.cars import CarRepository
from car_rental.db.repositories.bookings import BookingRepository

from car_rental.features.authentication.services import CredentialStore, Identity, TokenService
from car_rental.features.cars.services import FleetRegistry
from car_rental.features.bookings.services import BookingLedger
from car_rental.features.dashboard.services import StatsAggregator
from car_rental.features.health.services import HealthService


def get_ctx(request: Request) -> ServiceContext:
    return request.app.state.ctx


# -----------------------------
# Repositories
# -----------------------------
def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)

def get_car_repository(session: Session = Depends(get_session)) -> CarRepository:
    return CarRepository(session)

def get_booking_repository(session: Session = Depends(get_session)) -> BookingRepository:
    return BookingRepository(session)


# -----------------------------
# Auth
# -----------------------------
def get_credential_store(
    user_repo: UserRepository = Depends(get_user_repository),
    ctx: ServiceContext = Depends(get_ctx),
) -> CredentialStore:
    return CredentialStore(user_repo=user_repo, bcrypt_rounds=ctx.settings.BCRYPT_ROUNDS)

def get_token_service(ctx: ServiceContext = Depends(get_ctx)) -> TokenService:
    return TokenService(jwt_settings=ctx.jwt, now_fn=ctx.now_fn)


# -----------------------------
# Domain services
# -----------------------------
def get_fleet_registry(
    car_repo: CarRepository = Depends(get_car_repository),
    booking_repo: BookingRepository = Depends(get_booking_repository),
) -> FleetRegistry:
    return FleetRegistry(repo=car_repo, booking_repo=booking_repo)

def get_booking_ledger(
    booking_repo: BookingRepository = Depends(get_booking_repository),
    car_repo: CarRepository = Depends(get_car_repository),
) -> BookingLedger:
    return BookingLedger(repo=booking_repo, car_repo=car_repo)

def get_stats_aggregator(
    car_repo: CarRepository = Depends(get_car_repository),
    booking_repo: BookingRepository = Depends(get_booking_repository),
) -> StatsAggregator:
    return StatsAggregator(car_repo=car_repo, booking_repo=booking_repo)

def get_health_service(ctx: ServiceContext = Depends(get_ctx)) -> HealthService:
    return HealthService(ctx)


# -----------------------------
# Access guard
# -----------------------------
bearer_scheme = HTTPBearer(auto_error=False)

def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    if not credentials or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthError("Unauthorized")
    identity = tokens.verify(credentials.credentials)
    request.state.identity = identity
    return identity


def require_role(*roles: str) -> Callable[..., Identity]:
    """
    Dépendance qui n'accepte que les identités dont le rôle est listé.
    Utilisation :
        @router.delete("/{id}", dependencies=[Depends(require_role("admin"))])
    """
    allowed = {getattr(r, "value", r) for r in roles}

    def _checker(identity: Identity = Depends(get_current_identity)) -> Identity:
        if identity.role not in allowed:
            raise ForbiddenError("Forbidden")
        return identity

    return _checker
