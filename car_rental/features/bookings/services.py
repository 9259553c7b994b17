"""
➡️ But : Logique métier des réservations + statut des voitures.

BookingLedger : CRUD des réservations. Chaque écriture qui peut changer l'activité
d'une réservation (create, update, delete) repasse par `_sync_car_status`, qui
recalcule le statut de la voiture depuis le nombre de réservations actives :

    rented  <=>  au moins une réservation `active` référence la voiture

L'écriture de la réservation précède toujours celle du statut, et les deux
partent dans le même commit.
"""

import logging
from datetime import date
from typing import List, Optional

from car_rental.core.errors import NotFoundError, ValidationError
from car_rental.db.models.bookings import Booking
from car_rental.db.models.cars import Car, CarStatus
from car_rental.db.repositories.bookings import BookingRepository
from car_rental.db.repositories.cars import CarRepository
from car_rental.features.bookings.schemas import (
    BookingCreateIn,
    BookingUpdateIn,
    BookingWithCarOut,
)

logger = logging.getLogger(__name__)


class BookingLedger:
    def __init__(self, *, repo: BookingRepository, car_repo: CarRepository):
        self.repo = repo
        self.car_repo = car_repo

    # -------- Reads --------

    def list(self) -> List[BookingWithCarOut]:
        return [BookingWithCarOut.from_row(b, c) for b, c in self.repo.list_with_car()]

    def get(self, booking_id: int) -> BookingWithCarOut:
        row = self.repo.get_with_car(booking_id)
        if not row:
            raise NotFoundError("Booking not found")
        return BookingWithCarOut.from_row(*row)

    # -------- Writes --------

    def create(self, payload: BookingCreateIn) -> Booking:
        car = self._resolve_car(payload.car)
        self._assert_dates(payload.rent_from, payload.rent_to)

        try:
            booking = self.repo.create(
                commit=False,
                customer_name=payload.customer_name,
                car_id=car.id,
                rent_from=payload.rent_from,
                rent_to=payload.rent_to,
                status=payload.status,
            )
            self._sync_car_status(car)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        self.repo.session.refresh(booking)
        logger.info("Booking created: id=%s car=%s", booking.id, booking.car_id)
        return booking

    def update(self, booking_id: int, payload: BookingUpdateIn) -> Booking:
        booking = self._get_entity(booking_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)

        previous_car_id = booking.car_id
        new_car: Optional[Car] = None
        if "car" in changes:
            new_car = self._resolve_car(changes.pop("car"))
            changes["car_id"] = new_car.id

        self._assert_dates(
            changes.get("rent_from", booking.rent_from),
            changes.get("rent_to", booking.rent_to),
        )

        try:
            booking = self.repo.update(booking, commit=False, **changes)
            touched = {previous_car_id, booking.car_id} - {None}
            for car_id in touched:
                car = new_car if new_car is not None and new_car.id == car_id else self.car_repo.get(car_id)
                if car is not None:
                    self._sync_car_status(car)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        self.repo.session.refresh(booking)
        return booking

    def delete(self, booking_id: int) -> None:
        booking = self._get_entity(booking_id)
        car = self.car_repo.get(booking.car_id) if booking.car_id is not None else None

        try:
            self.repo.delete(booking, commit=False)
            if car is not None:
                self._sync_car_status(car)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise
        logger.info("Booking deleted: id=%s", booking_id)

    # -------- Helpers --------

    def _get_entity(self, booking_id: int) -> Booking:
        booking = self.repo.get(booking_id)
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    def _resolve_car(self, car_id: int) -> Car:
        car = self.car_repo.get(car_id)
        if not car:
            raise ValidationError("Car not found")
        return car

    @staticmethod
    def _assert_dates(rent_from: date, rent_to: date) -> None:
        if rent_from > rent_to:
            raise ValidationError("rentFrom must be on or before rentTo")

    def _sync_car_status(self, car: Car) -> None:
        """Recalcule le statut de la voiture (sans commit, le flush suffit)."""
        active = self.repo.count_active_for_car(car.id)
        target = CarStatus.RENTED if active > 0 else CarStatus.AVAILABLE
        if car.status != target:
            self.car_repo.update(car, commit=False, status=target)
            logger.info("Car %s status -> %s", car.id, target.value)
