from sogrinha.web.routers.bridge import router as bridge_router
from sogrinha.web.routers.contracts import router as contracts_router
from sogrinha.web.routers.lessees import router as lessees_router
from sogrinha.web.routers.owners import router as owners_router
from sogrinha.web.routers.real_estates import router as real_estates_router
from sogrinha.web.routers.stats import router as stats_router

__all__ = [
    "bridge_router",
    "contracts_router",
    "lessees_router",
    "owners_router",
    "real_estates_router",
    "stats_router",
]
