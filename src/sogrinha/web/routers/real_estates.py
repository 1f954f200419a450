from uuid import UUID

from fastapi import APIRouter

from sogrinha.core.modules.filter.models import RealEstateQuery
from sogrinha.core.modules.real_estate.models import RealEstate, RealEstateData, RealEstateUpdate
from sogrinha.core.pagination import PaginationResult
from sogrinha.web.deps import AppDep, ShellTokenDep
from sogrinha.web.openapi import ErrorResponse

router = APIRouter(tags=["real-estates"], dependencies=[ShellTokenDep])


@router.post(
    "/real-estates/search",
    summary="Search properties",
    description=(
        "Get a page of properties ordered by municipal registration. "
        "Text filters (`municipal_registration`, `owner_name`, `lessee_name`) are prefix matches, "
        "`kind` and `status` are equality matches; all filters are combined with AND."
    ),
    operation_id="searchRealEstates",
    responses={
        200: {"description": "Paginated properties"},
        422: {"description": "Unknown filter field or value"},
    },
)
async def search_real_estates(query: RealEstateQuery, app: AppDep) -> PaginationResult[RealEstate]:
    return await app.get_real_estates(query)


@router.get(
    "/real-estates/{real_estate_id}",
    summary="Get property",
    operation_id="getRealEstate",
    responses={
        200: {"description": "Property"},
        404: {"model": ErrorResponse, "description": "Property not found"},
    },
)
async def get_real_estate(real_estate_id: UUID, app: AppDep) -> RealEstate:
    return await app.get_real_estate(real_estate_id)


@router.post(
    "/real-estates",
    summary="Create property",
    operation_id="createRealEstate",
    status_code=201,
    responses={
        201: {"description": "Property created"},
        404: {"model": ErrorResponse, "description": "Owner or lessee not found"},
    },
)
async def create_real_estate(data: RealEstateData, app: AppDep) -> RealEstate:
    return await app.create_real_estate(data)


@router.patch(
    "/real-estates/{real_estate_id}",
    summary="Update property",
    description="Partial update, only the fields present in the body change. Owner and lessee names are refreshed.",
    operation_id="updateRealEstate",
    responses={
        200: {"description": "Property updated"},
        400: {"model": ErrorResponse, "description": "Invalid update"},
        404: {"model": ErrorResponse, "description": "Property, owner or lessee not found"},
    },
)
async def update_real_estate(real_estate_id: UUID, update: RealEstateUpdate, app: AppDep) -> RealEstate:
    return await app.update_real_estate(real_estate_id, update)


@router.delete(
    "/real-estates/{real_estate_id}",
    summary="Delete property",
    operation_id="deleteRealEstate",
    status_code=204,
    responses={
        204: {"description": "Property deleted"},
        404: {"model": ErrorResponse, "description": "Property not found"},
    },
)
async def delete_real_estate(real_estate_id: UUID, app: AppDep) -> None:
    await app.delete_real_estate(real_estate_id)
