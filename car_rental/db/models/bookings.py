from datetime import date
from enum import Enum
from typing import Optional

from sqlmodel import Field

from .base import BaseModelDB


class BookingStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Booking(BaseModelDB, table=True):
    """Réservation d'une voiture par un client (référence non propriétaire vers Car)."""

    customer_name: str
    # NULL une fois la voiture supprimée (seules les réservations inactives peuvent survivre à leur voiture)
    car_id: Optional[int] = Field(default=None, index=True, foreign_key="car.id", ondelete="SET NULL")
    rent_from: date
    rent_to: date
    status: BookingStatus = Field(default=BookingStatus.ACTIVE, index=True)
