from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Response

from sogrinha.core.modules.contract.models import Contract, ContractData, ContractUpdate
from sogrinha.core.modules.document.models import DocumentFormat
from sogrinha.core.modules.filter.models import ContractQuery
from sogrinha.core.pagination import PaginationResult
from sogrinha.web.deps import AppDep, ShellTokenDep
from sogrinha.web.openapi import ErrorResponse

router = APIRouter(tags=["contracts"], dependencies=[ShellTokenDep])


@router.post(
    "/contracts/search",
    summary="Search contracts",
    description=(
        "Get a page of contracts, newest start date first. Filters: `kind`, `status`, "
        "`owner_id`, `lessee_id`, `real_estate_id` (equality) and `end_date` (ending on or after); "
        "all filters are combined with AND."
    ),
    operation_id="searchContracts",
    responses={
        200: {"description": "Paginated contracts"},
        422: {"description": "Unknown filter field or value"},
    },
)
async def search_contracts(query: ContractQuery, app: AppDep) -> PaginationResult[Contract]:
    return await app.get_contracts(query)


@router.get(
    "/contracts/{contract_id}",
    summary="Get contract",
    operation_id="getContract",
    responses={
        200: {"description": "Contract"},
        404: {"model": ErrorResponse, "description": "Contract not found"},
    },
)
async def get_contract(contract_id: UUID, app: AppDep) -> Contract:
    return await app.get_contract(contract_id)


@router.post(
    "/contracts",
    summary="Create contract",
    description="Create a contract; its identifier (e.g. `#ALG19102026042`) is generated from the kind and today's date.",
    operation_id="createContract",
    status_code=201,
    responses={
        201: {"description": "Contract created"},
        404: {"model": ErrorResponse, "description": "Owner, lessee or property not found"},
    },
)
async def create_contract(data: ContractData, app: AppDep) -> Contract:
    return await app.create_contract(data)


@router.patch(
    "/contracts/{contract_id}",
    summary="Update contract",
    description="Partial update, only the fields present in the body change.",
    operation_id="updateContract",
    responses={
        200: {"description": "Contract updated"},
        400: {"model": ErrorResponse, "description": "Invalid update"},
        404: {"model": ErrorResponse, "description": "Contract or referenced record not found"},
    },
)
async def update_contract(contract_id: UUID, update: ContractUpdate, app: AppDep) -> Contract:
    return await app.update_contract(contract_id, update)


@router.delete(
    "/contracts/{contract_id}",
    summary="Delete contract",
    operation_id="deleteContract",
    status_code=204,
    responses={
        204: {"description": "Contract deleted"},
        404: {"model": ErrorResponse, "description": "Contract not found"},
    },
)
async def delete_contract(contract_id: UUID, app: AppDep) -> None:
    await app.delete_contract(contract_id)


@router.get(
    "/contracts/{contract_id}/document",
    summary="Generate contract document",
    description="Render the contract as PDF or Word, filled with its owner, lessee and property.",
    operation_id="generateContractDocument",
    response_class=Response,
    responses={
        200: {
            "content": {DocumentFormat.PDF.media_type: {}, DocumentFormat.DOCX.media_type: {}},
            "description": "Contract document",
        },
        400: {"model": ErrorResponse, "description": "Contract kind has no template"},
        404: {"model": ErrorResponse, "description": "Contract not found"},
        422: {"model": ErrorResponse, "description": "Contract has no owner record"},
    },
)
async def generate_contract_document(
    contract_id: UUID,
    app: AppDep,
    document_format: Annotated[DocumentFormat, Query(alias="format", description="Output format")] = DocumentFormat.PDF,
) -> Response:
    document = await app.generate_contract_document(contract_id, document_format)
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )
