"""Health service for basic health checks"""
import logging
from datetime import datetime, timezone

from core.config import AppSettings
from service.dto import HealthResponseDTO

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def get_health(settings: AppSettings) -> HealthResponseDTO:
    """
    Get basic health status.

    Reports whether the live YouTube source is configured; the service is
    healthy either way since static data is always available.

    Returns:
        HealthResponseDTO: Health check result
    """
    logger.info("Health check requested")

    return HealthResponseDTO(
        ok=True,
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=VERSION,
        live_source=settings.live_source_usable
    )
