from fastapi import APIRouter

from sogrinha.core.modules.stats.models import HomeStats
from sogrinha.web.deps import AppDep, ShellTokenDep

router = APIRouter(tags=["stats"], dependencies=[ShellTokenDep])


@router.get(
    "/stats/home",
    summary="Dashboard statistics",
    description=(
        "Property totals and occupancy rate, revenue of active contracts (with the last six months by start month), "
        "contract totals and distributions for the dashboard charts."
    ),
    operation_id="getHomeStats",
    responses={200: {"description": "Dashboard figures"}},
)
async def get_home_stats(app: AppDep) -> HomeStats:
    return await app.get_home_stats()
