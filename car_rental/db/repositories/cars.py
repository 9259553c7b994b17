from typing import List, Optional, Sequence

from sqlmodel import select

from car_rental.db.repositories.base import BaseRepository
from car_rental.db.models.cars import Car, CarStatus


def fleet_ordering(dialect_name: str) -> List:
    """
    Tri (marque, modèle) par octets, majuscules avant minuscules.
    SQLite compare en BINARY par défaut ; Postgres suivrait la locale sans COLLATE "C".
    """
    keys = [Car.brand, Car.model]
    if dialect_name == "postgresql":
        keys = [k.collate("C") for k in keys]
    return [k.asc() for k in keys]


class CarRepository(BaseRepository[Car]):
    """CRUD Cars + requêtes spécifiques."""
    model = Car

    def list(self) -> Sequence[Car]:
        """Toute la flotte, triée par (marque, modèle) croissants."""
        dialect_name = self.session.get_bind().dialect.name
        statement = select(self.model).order_by(*fleet_ordering(dialect_name))
        return self.session.exec(statement).all()

    def get_by_registration(self, registration_no: str) -> Optional[Car]:
        return self.session.exec(
            select(self.model).where(self.model.registration_no == registration_no)
        ).first()

    def count_available(self) -> int:
        return self.count(status=CarStatus.AVAILABLE)
