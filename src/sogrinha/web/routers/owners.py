from uuid import UUID

from fastapi import APIRouter, Response

from sogrinha.core.modules.export.spreadsheet import XLSX_MEDIA_TYPE, PartyKind
from sogrinha.core.modules.filter.models import PartyQuery
from sogrinha.core.modules.owner.models import Owner
from sogrinha.core.modules.party.models import PartyData, PartyUpdate
from sogrinha.core.pagination import PaginationResult
from sogrinha.web.deps import AppDep, ShellTokenDep
from sogrinha.web.openapi import ErrorResponse

router = APIRouter(tags=["owners"], dependencies=[ShellTokenDep])


@router.post(
    "/owners/search",
    summary="Search owners",
    description="Get a page of owners ordered by name. Filters are prefix matches on normalized fields, combined with AND.",
    operation_id="searchOwners",
    responses={
        200: {"description": "Paginated owners"},
        422: {"description": "Unknown filter field"},
    },
)
async def search_owners(query: PartyQuery, app: AppDep) -> PaginationResult[Owner]:
    return await app.get_owners(query)


@router.get(
    "/owners/export",
    summary="Export owners",
    description="Download every owner as an Excel workbook.",
    operation_id="exportOwners",
    response_class=Response,
    responses={200: {"content": {XLSX_MEDIA_TYPE: {}}, "description": "Excel workbook"}},
)
async def export_owners(app: AppDep) -> Response:
    content = await app.export_owners()
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{PartyKind.OWNERS.filename}"'},
    )


@router.get(
    "/owners/{owner_id}",
    summary="Get owner",
    operation_id="getOwner",
    responses={
        200: {"description": "Owner"},
        404: {"model": ErrorResponse, "description": "Owner not found"},
    },
)
async def get_owner(owner_id: UUID, app: AppDep) -> Owner:
    return await app.get_owner(owner_id)


@router.post(
    "/owners",
    summary="Create owner",
    operation_id="createOwner",
    status_code=201,
    responses={201: {"description": "Owner created"}},
)
async def create_owner(data: PartyData, app: AppDep) -> Owner:
    return await app.create_owner(data)


@router.patch(
    "/owners/{owner_id}",
    summary="Update owner",
    description="Partial update, only the fields present in the body change.",
    operation_id="updateOwner",
    responses={
        200: {"description": "Owner updated"},
        400: {"model": ErrorResponse, "description": "Invalid update"},
        404: {"model": ErrorResponse, "description": "Owner not found"},
    },
)
async def update_owner(owner_id: UUID, update: PartyUpdate, app: AppDep) -> Owner:
    return await app.update_owner(owner_id, update)


@router.delete(
    "/owners/{owner_id}",
    summary="Delete owner",
    description="Delete the owner record. Attachments stay on disk until deleted through the bridge.",
    operation_id="deleteOwner",
    status_code=204,
    responses={
        204: {"description": "Owner deleted"},
        404: {"model": ErrorResponse, "description": "Owner not found"},
    },
)
async def delete_owner(owner_id: UUID, app: AppDep) -> None:
    await app.delete_owner(owner_id)
