from datetime import datetime
from typing import Optional

from pydantic import Field

from car_rental.core.schemas import CamelModel
from car_rental.db.models.cars import CarStatus


# ---------- IN / UPDATE ----------

class CarCreateIn(CamelModel):
    model: str = Field(..., min_length=1, description="Modèle")
    brand: str = Field(..., min_length=1, description="Marque")
    registration_no: str = Field(..., min_length=1, description="Immatriculation (unique)")
    price_per_day: float = Field(..., ge=0, description="Prix par jour")


class CarUpdateIn(CamelModel):
    # le statut n'est pas modifiable : il suit les réservations actives
    model: Optional[str] = Field(default=None, min_length=1)
    brand: Optional[str] = Field(default=None, min_length=1)
    registration_no: Optional[str] = Field(default=None, min_length=1)
    price_per_day: Optional[float] = Field(default=None, ge=0)


# ---------- OUT ----------

class CarOut(CamelModel):
    id: int
    model: str
    brand: str
    registration_no: str
    price_per_day: float
    status: CarStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
