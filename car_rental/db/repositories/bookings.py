from typing import Optional, Sequence, Tuple

from sqlmodel import select

from car_rental.db.repositories.base import BaseRepository
from car_rental.db.models.bookings import Booking, BookingStatus
from car_rental.db.models.cars import Car


class BookingRepository(BaseRepository[Booking]):
    """CRUD Bookings + jointure avec la voiture référencée."""
    model = Booking

    # ---------- HELPERS ----------

    def _select_with_car(self):
        # jointure externe : une réservation terminée peut survivre à sa voiture
        return (
            select(Booking, Car)
            .join(Car, Car.id == Booking.car_id, isouter=True)
            .order_by(Booking.id.asc())
        )

    # ---------- LISTES ----------

    def list_with_car(self) -> Sequence[Tuple[Booking, Optional[Car]]]:
        return self.session.exec(self._select_with_car()).all()

    def get_with_car(self, booking_id: int) -> Optional[Tuple[Booking, Optional[Car]]]:
        return self.session.exec(
            self._select_with_car().where(Booking.id == booking_id)
        ).first()

    # ---------- COMPTAGES ----------

    def count_active_for_car(self, car_id: int) -> int:
        return self.count(car_id=car_id, status=BookingStatus.ACTIVE)

    def count_active(self) -> int:
        return self.count(status=BookingStatus.ACTIVE)
