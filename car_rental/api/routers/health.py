from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from car_rental.api.dependencies import get_health_service
from car_rental.features.health.services import HealthService

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("", summary="Health check", response_model=dict)
def health(svc: HealthService = Depends(get_health_service)):
    return svc.basic()


@router.get("/detailed", summary="Health check détaillé (DB + système)", response_model=dict)
def health_detailed(svc: HealthService = Depends(get_health_service)):
    try:
        return svc.detailed()
    except Exception as e:
        # l'endpoint de monitoring répond toujours en JSON, même en panne
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=jsonable_encoder({
                "status": "DOWN",
                "timestamp": svc.ctx.now_fn(),
                "error": str(e),
            }),
        )
