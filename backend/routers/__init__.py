# Routers package
from .properties import router as properties_router
from .favorites import router as favorites_router
from .dashboard import router as dashboard_router
