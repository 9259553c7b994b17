"""
➡️ But : Endpoints CRUD de la flotte (/api/cars).

Toutes les routes passent par la garde d'accès (Bearer token) déclarée au niveau du router.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from car_rental.api.dependencies import get_current_identity, get_fleet_registry
from car_rental.core.schemas import MAX_ID, MessageOut
from car_rental.features.cars.schemas import CarCreateIn, CarOut, CarUpdateIn
from car_rental.features.cars.services import FleetRegistry

router = APIRouter(
    prefix="/cars",
    tags=["cars"],
    dependencies=[Depends(get_current_identity)],
    responses={401: {"description": "Unauthorized"}, 404: {"description": "Car not found"}},
)


@router.get("", summary="Lister les voitures (triées par marque puis modèle)", response_model=List[CarOut])
def list_cars(svc: FleetRegistry = Depends(get_fleet_registry)):
    return svc.list()


@router.post("", summary="Ajouter une voiture", status_code=status.HTTP_201_CREATED, response_model=CarOut)
def create_car(payload: CarCreateIn, svc: FleetRegistry = Depends(get_fleet_registry)):
    return svc.create(payload)


@router.get("/{car_id}", summary="Récupérer une voiture", response_model=CarOut)
def get_car(car_id: int = Path(..., ge=1, le=MAX_ID), svc: FleetRegistry = Depends(get_fleet_registry)):
    return svc.get(car_id)


@router.put("/{car_id}", summary="Modifier une voiture", response_model=CarOut)
def update_car(
    payload: CarUpdateIn,
    car_id: int = Path(..., ge=1, le=MAX_ID),
    svc: FleetRegistry = Depends(get_fleet_registry),
):
    return svc.update(car_id, payload)


@router.delete(
    "/{car_id}",
    summary="Supprimer une voiture",
    description="Refusé (400) tant qu'une réservation active référence la voiture.",
    response_model=MessageOut,
)
def delete_car(car_id: int = Path(..., ge=1, le=MAX_ID), svc: FleetRegistry = Depends(get_fleet_registry)):
    svc.delete(car_id)
    return MessageOut(message="Car deleted successfully")
