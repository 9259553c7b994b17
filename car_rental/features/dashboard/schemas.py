from car_rental.core.schemas import CamelModel


class StatsOut(CamelModel):
    total_cars: int
    available_cars: int
    total_bookings: int
    active_bookings: int
