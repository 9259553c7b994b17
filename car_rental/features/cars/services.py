"""
➡️ But : Logique métier de la flotte (CRUD voitures).

FleetRegistry : unicité de l'immatriculation, existence avant update/delete,
interdiction de supprimer une voiture référencée par une réservation active.

Le statut available/rented n'est jamais écrit ici : il appartient au BookingLedger.
"""

import logging
from typing import Sequence

from sqlalchemy.exc import IntegrityError

from car_rental.core.errors import ConflictError, NotFoundError, ValidationError
from car_rental.db.models.cars import Car, CarStatus
from car_rental.db.repositories.bookings import BookingRepository
from car_rental.db.repositories.cars import CarRepository
from car_rental.features.cars.schemas import CarCreateIn, CarUpdateIn

logger = logging.getLogger(__name__)


class FleetRegistry:
    def __init__(self, *, repo: CarRepository, booking_repo: BookingRepository):
        self.repo = repo
        self.booking_repo = booking_repo

    # -------- Reads --------

    def list(self) -> Sequence[Car]:
        return self.repo.list()

    def get(self, car_id: int) -> Car:
        car = self.repo.get(car_id)
        if not car:
            raise NotFoundError("Car not found")
        return car

    # -------- Writes --------

    def create(self, payload: CarCreateIn) -> Car:
        self._assert_registration_free(payload.registration_no)
        try:
            car = self.repo.create(
                model=payload.model,
                brand=payload.brand,
                registration_no=payload.registration_no,
                price_per_day=payload.price_per_day,
                status=CarStatus.AVAILABLE,
            )
        except IntegrityError:
            self.repo.rollback()
            raise ValidationError("Registration number already exists")

        logger.info("Car created: id=%s registration=%s", car.id, car.registration_no)
        return car

    def update(self, car_id: int, payload: CarUpdateIn) -> Car:
        car = self.get(car_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)

        new_registration = changes.get("registration_no")
        if new_registration is not None and new_registration != car.registration_no:
            self._assert_registration_free(new_registration)

        try:
            return self.repo.update(car, **changes)
        except IntegrityError:
            self.repo.rollback()
            raise ValidationError("Registration number already exists")

    def delete(self, car_id: int) -> None:
        """
        Comptage des réservations actives et suppression dans la même transaction.
        """
        car = self.get(car_id)
        try:
            if self.booking_repo.count_active_for_car(car.id) > 0:
                raise ConflictError("Cannot delete car with active bookings")
            self.repo.delete(car, commit=False)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise
        logger.info("Car deleted: id=%s", car_id)

    # -------- Helpers --------

    def _assert_registration_free(self, registration_no: str) -> None:
        if self.repo.get_by_registration(registration_no):
            raise ValidationError("Registration number already exists")
