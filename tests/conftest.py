import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from car_rental.core.config import Settings
from car_rental.db.repositories.bookings import BookingRepository
from car_rental.db.repositories.cars import CarRepository
from car_rental.db.repositories.users import UserRepository
from car_rental.db.session import build_engine, init_db
from car_rental.features.authentication.services import CredentialStore, TokenService
from car_rental.features.bookings.services import BookingLedger
from car_rental.features.cars.schemas import CarCreateIn
from car_rental.features.cars.services import FleetRegistry
from car_rental.features.dashboard.services import StatsAggregator
from car_rental.main import create_app
from tests.util import FrozenClock, car_payload, fake


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        ENV="test",
        JWT_SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


# -----------------------------
# Service level
# -----------------------------

@pytest.fixture
def session():
    engine = build_engine("sqlite://")
    init_db(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def credential_store(session) -> CredentialStore:
    return CredentialStore(user_repo=UserRepository(session), bcrypt_rounds=4)


@pytest.fixture
def token_service(settings, clock) -> TokenService:
    return TokenService(jwt_settings=settings.jwt, now_fn=clock)


@pytest.fixture
def fleet(session) -> FleetRegistry:
    return FleetRegistry(repo=CarRepository(session), booking_repo=BookingRepository(session))


@pytest.fixture
def ledger(session) -> BookingLedger:
    return BookingLedger(repo=BookingRepository(session), car_repo=CarRepository(session))


@pytest.fixture
def stats_aggregator(session) -> StatsAggregator:
    return StatsAggregator(car_repo=CarRepository(session), booking_repo=BookingRepository(session))


@pytest.fixture
def random_car(fleet):
    """Creates a random available car in the database."""
    data = car_payload(brand=fake.company(), model=fake.last_name())
    return fleet.create(CarCreateIn(**data))


# -----------------------------
# HTTP level
# -----------------------------

@pytest.fixture
def client(settings, clock):
    app = create_app(settings, now_fn=clock)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers(client) -> dict:
    username, password = fake.user_name(), fake.password()
    assert client.post("/api/auth/signup", json={"username": username, "password": password}).status_code == 201
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def api_car(client, auth_headers) -> dict:
    resp = client.post("/api/cars", json=car_payload(), headers=auth_headers)
    assert resp.status_code == 201
    return resp.json()
