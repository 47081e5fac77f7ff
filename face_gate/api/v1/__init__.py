from .compare_controller import router as compare_router
from .health_controller import router as health_router


__all__ = ["compare_router", "health_router"]
