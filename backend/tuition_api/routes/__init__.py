from tuition_api.routes.payment import router as payment_router
from tuition_api.routes.admin import router as admin_router

__all__ = ["payment_router", "admin_router"]
