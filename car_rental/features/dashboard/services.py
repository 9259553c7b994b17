from car_rental.db.repositories.bookings import BookingRepository
from car_rental.db.repositories.cars import CarRepository
from car_rental.features.dashboard.schemas import StatsOut


class StatsAggregator:
    """
    Compteurs du tableau de bord, lus indépendamment
    (pas d'isolation snapshot entre les quatre requêtes).
    """

    def __init__(self, *, car_repo: CarRepository, booking_repo: BookingRepository):
        self.car_repo = car_repo
        self.booking_repo = booking_repo

    def stats(self) -> StatsOut:
        return StatsOut(
            total_cars=self.car_repo.count(),
            available_cars=self.car_repo.count_available(),
            total_bookings=self.booking_repo.count(),
            active_bookings=self.booking_repo.count_active(),
        )
