from uuid import UUID

from fastapi import APIRouter, Response

from sogrinha.core.modules.export.spreadsheet import XLSX_MEDIA_TYPE, PartyKind
from sogrinha.core.modules.filter.models import PartyQuery
from sogrinha.core.modules.lessee.models import Lessee
from sogrinha.core.modules.party.models import PartyData, PartyUpdate
from sogrinha.core.pagination import PaginationResult
from sogrinha.web.deps import AppDep, ShellTokenDep
from sogrinha.web.openapi import ErrorResponse

router = APIRouter(tags=["lessees"], dependencies=[ShellTokenDep])


@router.post(
    "/lessees/search",
    summary="Search lessees",
    description="Get a page of lessees ordered by name. Filters are prefix matches on normalized fields, combined with AND.",
    operation_id="searchLessees",
    responses={
        200: {"description": "Paginated lessees"},
        422: {"description": "Unknown filter field"},
    },
)
async def search_lessees(query: PartyQuery, app: AppDep) -> PaginationResult[Lessee]:
    return await app.get_lessees(query)


@router.get(
    "/lessees/export",
    summary="Export lessees",
    description="Download every lessee as an Excel workbook.",
    operation_id="exportLessees",
    response_class=Response,
    responses={200: {"content": {XLSX_MEDIA_TYPE: {}}, "description": "Excel workbook"}},
)
async def export_lessees(app: AppDep) -> Response:
    content = await app.export_lessees()
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{PartyKind.LESSEES.filename}"'},
    )


@router.get(
    "/lessees/{lessee_id}",
    summary="Get lessee",
    operation_id="getLessee",
    responses={
        200: {"description": "Lessee"},
        404: {"model": ErrorResponse, "description": "Lessee not found"},
    },
)
async def get_lessee(lessee_id: UUID, app: AppDep) -> Lessee:
    return await app.get_lessee(lessee_id)


@router.post(
    "/lessees",
    summary="Create lessee",
    operation_id="createLessee",
    status_code=201,
    responses={201: {"description": "Lessee created"}},
)
async def create_lessee(data: PartyData, app: AppDep) -> Lessee:
    return await app.create_lessee(data)


@router.patch(
    "/lessees/{lessee_id}",
    summary="Update lessee",
    description="Partial update, only the fields present in the body change.",
    operation_id="updateLessee",
    responses={
        200: {"description": "Lessee updated"},
        400: {"model": ErrorResponse, "description": "Invalid update"},
        404: {"model": ErrorResponse, "description": "Lessee not found"},
    },
)
async def update_lessee(lessee_id: UUID, update: PartyUpdate, app: AppDep) -> Lessee:
    return await app.update_lessee(lessee_id, update)


@router.delete(
    "/lessees/{lessee_id}",
    summary="Delete lessee",
    description="Delete the lessee record. Attachments stay on disk until deleted through the bridge.",
    operation_id="deleteLessee",
    status_code=204,
    responses={
        204: {"description": "Lessee deleted"},
        404: {"model": ErrorResponse, "description": "Lessee not found"},
    },
)
async def delete_lessee(lessee_id: UUID, app: AppDep) -> None:
    await app.delete_lessee(lessee_id)
