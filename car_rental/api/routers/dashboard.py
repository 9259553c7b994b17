from fastapi import APIRouter, Depends

from car_rental.api.dependencies import get_current_identity, get_stats_aggregator
from car_rental.features.dashboard.schemas import StatsOut
from car_rental.features.dashboard.services import StatsAggregator

router = APIRouter(
    prefix="/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(get_current_identity)],
)


@router.get("/stats", summary="Compteurs du tableau de bord", response_model=StatsOut)
def stats(svc: StatsAggregator = Depends(get_stats_aggregator)):
    return svc.stats()
