from datetime import date, datetime, timedelta, timezone

from faker import Faker
from faker.providers import automotive, person

fake = Faker()
fake.add_provider(automotive)
fake.add_provider(person)


class FrozenClock:
    """Horloge injectable : renvoie toujours `now`, que les tests font avancer."""

    def __init__(self, now: datetime = None):
        self.now = now or datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def car_payload(**overrides) -> dict:
    data = {
        "brand": "Toyota",
        "model": "Corolla",
        "registrationNo": fake.unique.license_plate(),
        "pricePerDay": 20,
    }
    data.update(overrides)
    return data


def booking_payload(car_id: int, **overrides) -> dict:
    today = date.today()
    data = {
        "customerName": fake.name(),
        "car": car_id,
        "rentFrom": today.isoformat(),
        "rentTo": (today + timedelta(days=3)).isoformat(),
    }
    data.update(overrides)
    return data
