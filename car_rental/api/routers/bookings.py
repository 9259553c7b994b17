from typing import List

from fastapi import APIRouter, Depends, Path, status

from car_rental.api.dependencies import get_booking_ledger, get_current_identity
from car_rental.core.schemas import MAX_ID, MessageOut
from car_rental.features.bookings.schemas import (
    BookingCreateIn,
    BookingOut,
    BookingUpdateIn,
    BookingWithCarOut,
)
from car_rental.features.bookings.services import BookingLedger

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
    dependencies=[Depends(get_current_identity)],
    responses={401: {"description": "Unauthorized"}, 404: {"description": "Booking not found"}},
)


@router.get("", summary="Lister les réservations (voiture incluse)", response_model=List[BookingWithCarOut])
def list_bookings(svc: BookingLedger = Depends(get_booking_ledger)):
    return svc.list()


@router.post(
    "",
    summary="Créer une réservation",
    description="La voiture réservée passe en `rented`.",
    status_code=status.HTTP_201_CREATED,
    response_model=BookingOut,
)
def create_booking(payload: BookingCreateIn, svc: BookingLedger = Depends(get_booking_ledger)):
    return BookingOut.from_entity(svc.create(payload))


@router.get("/{booking_id}", summary="Récupérer une réservation", response_model=BookingWithCarOut)
def get_booking(booking_id: int = Path(..., ge=1, le=MAX_ID), svc: BookingLedger = Depends(get_booking_ledger)):
    return svc.get(booking_id)


@router.put(
    "/{booking_id}",
    summary="Modifier une réservation",
    description="Le statut des voitures concernées est recalculé.",
    response_model=BookingOut,
)
def update_booking(
    payload: BookingUpdateIn,
    booking_id: int = Path(..., ge=1, le=MAX_ID),
    svc: BookingLedger = Depends(get_booking_ledger),
):
    return BookingOut.from_entity(svc.update(booking_id, payload))


@router.delete("/{booking_id}", summary="Supprimer une réservation", response_model=MessageOut)
def delete_booking(booking_id: int = Path(..., ge=1, le=MAX_ID), svc: BookingLedger = Depends(get_booking_ledger)):
    svc.delete(booking_id)
    return MessageOut(message="Booking deleted successfully")
