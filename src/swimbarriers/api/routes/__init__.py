"""API route modules."""

from swimbarriers.api.routes.barriers import router as barriers_router
from swimbarriers.api.routes.health import router as health_router
from swimbarriers.api.routes.races import router as races_router
from swimbarriers.api.routes.reference import router as reference_router
from swimbarriers.api.routes.swimmers import router as swimmers_router

__all__ = [
    "barriers_router",
    "health_router",
    "races_router",
    "reference_router",
    "swimmers_router",
]
