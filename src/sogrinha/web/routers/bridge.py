from typing import Annotated, Any

from fastapi import APIRouter, Body

from sogrinha.web.deps import BridgeDep, ShellTokenDep
from sogrinha.web.openapi import ErrorResponse

router = APIRouter(tags=["bridge"], dependencies=[ShellTokenDep])


@router.post(
    "/bridge/{operation}",
    summary="Call privileged operation",
    description=(
        "Run one named operation of the privileged bridge: `attachments.list`, `attachments.upload`, "
        "`attachments.delete`, `attachments.download`, `file.save` or `app.version`. "
        "Binary content is base64-encoded. Always answers 200 with a result object; "
        "failures have `success: false` and an `error` message, a dismissed save picker adds `cancelled: true`."
    ),
    operation_id="callBridge",
    responses={
        200: {"description": "Operation result"},
        401: {"model": ErrorResponse, "description": "Missing or wrong shell token"},
    },
)
async def call_bridge(
    operation: str,
    bridge: BridgeDep,
    params: Annotated[Any, Body(description="Parameter object of the operation")] = None,
) -> dict[str, Any]:
    return await bridge.call(operation, params)
