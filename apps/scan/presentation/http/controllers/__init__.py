"""HTTP Controllers."""

from apps.scan.presentation.http.controllers.classify import router as classify_router
from apps.scan.presentation.http.controllers.health import router as health_router
from apps.scan.presentation.http.controllers.progress import router as progress_router

__all__ = ["classify_router", "health_router", "progress_router"]
