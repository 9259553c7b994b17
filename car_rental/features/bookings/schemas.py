from datetime import date, datetime
from typing import Optional

from pydantic import Field

from car_rental.core.schemas import MAX_ID, CamelModel
from car_rental.db.models.bookings import Booking, BookingStatus
from car_rental.db.models.cars import Car
from car_rental.features.cars.schemas import CarOut


# ---------- IN / UPDATE ----------

class BookingCreateIn(CamelModel):
    customer_name: str = Field(..., min_length=1, description="Nom du client")
    car: int = Field(..., ge=1, le=MAX_ID, description="Identifiant de la voiture réservée")
    rent_from: date
    rent_to: date
    status: BookingStatus = BookingStatus.ACTIVE


class BookingUpdateIn(CamelModel):
    customer_name: Optional[str] = Field(default=None, min_length=1)
    car: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    rent_from: Optional[date] = None
    rent_to: Optional[date] = None
    status: Optional[BookingStatus] = None


# ---------- OUT ----------

class BookingOut(CamelModel):
    id: int
    customer_name: str
    car: Optional[int] = None
    rent_from: date
    rent_to: date
    status: BookingStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingOut":
        return cls(
            id=booking.id,
            customer_name=booking.customer_name,
            car=booking.car_id,
            rent_from=booking.rent_from,
            rent_to=booking.rent_to,
            status=booking.status,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )


class BookingWithCarOut(BookingOut):
    """Réservation avec la voiture résolue (null si la voiture a été supprimée)."""
    car: Optional[CarOut] = None

    @classmethod
    def from_row(cls, booking: Booking, car: Optional[Car]) -> "BookingWithCarOut":
        data = BookingOut.from_entity(booking).model_dump()
        data["car"] = CarOut.model_validate(car) if car is not None else None
        return cls(**data)
