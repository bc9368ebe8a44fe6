"""Public liveness endpoint reporting the environment and whether the vehicle store answers."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vehicle_api.core.config import settings
from vehicle_api.core.database import check_db_connected, get_db
from vehicle_api.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> HealthResponse:
    """Needs no token; 'database' is 'disconnected' when SELECT 1 fails instead of erroring."""
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
