from enum import Enum

from sqlmodel import Field

from .base import BaseModelDB


class CarStatus(str, Enum):
    AVAILABLE = "available"
    RENTED = "rented"


class Car(BaseModelDB, table=True):
    """Voiture de la flotte. Le statut est dérivé des réservations actives."""

    model: str = Field(description="Modèle (ex: Corolla)")
    brand: str = Field(index=True, description="Marque (ex: Toyota)")
    registration_no: str = Field(index=True, unique=True, description="Immatriculation")
    price_per_day: float = Field(ge=0, description="Prix par jour")
    status: CarStatus = Field(default=CarStatus.AVAILABLE, index=True)
