"""Health check API endpoints"""
from fastapi import APIRouter, Depends

from app.deps.common import get_app_settings
from core.config import AppSettings
from service.health_service import get_health
from service.dto import HealthResponseDTO

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponseDTO)
def health_check(settings: AppSettings = Depends(get_app_settings)) -> HealthResponseDTO:
    """
    Basic health check endpoint.

    Returns:
        HealthResponseDTO: Health status with timestamp
    """
    return get_health(settings)
