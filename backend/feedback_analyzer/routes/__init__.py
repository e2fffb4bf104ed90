from .analysis import router as analysis_router
from .dashboard import router as dashboard_router
from .override import router as override_router

__all__ = ["analysis_router", "dashboard_router", "override_router"]
