"""RPC routes for management procedures.

Each procedure is exposed as ``POST /trpc/<procedure name>``. Bodies are
passed to the procedure unvalidated so that validation failures surface
through the procedure error taxonomy rather than FastAPI's own 422.
"""

from __future__ import annotations

from typing import Annotated, Any, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from management.application.procedures import ManagementProcedures
from management.dependencies import get_management_procedures, get_procedure_context
from management.presentation.models import ProcedureErrorResponse, ToggleWebhookResponse
from shared_kernel.procedures import (
    MutationProcedure,
    ProcedureContext,
    ProcedureError,
    ProcedureValidationError,
    ValidationIssue,
)

ResultT = TypeVar("ResultT")

router = APIRouter(
    prefix="/trpc",
    tags=["procedures"],
)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"description": "Invalid input", "model": ProcedureErrorResponse},
    401: {"description": "Authentication required"},
    404: {
        "description": "Resource not found or owned by another tenant",
        "model": ProcedureErrorResponse,
    },
    500: {"description": "The data layer failed", "model": ProcedureErrorResponse},
}


async def _json_body(request: Request) -> Any:
    """Decode the request body without checking its shape."""
    try:
        return await request.json()
    except ValueError as e:
        error = ProcedureValidationError(
            [ValidationIssue(path=(), message="Request body must be valid JSON")]
        )
        raise HTTPException(status_code=error.http_status, detail=error.to_dict()) from e


Payload = Annotated[Any, Depends(_json_body)]
Procedures = Annotated[ManagementProcedures, Depends(get_management_procedures)]
Context = Annotated[ProcedureContext, Depends(get_procedure_context)]


async def _invoke(
    procedure: MutationProcedure[Any, Any, ResultT],
    ctx: ProcedureContext,
    payload: Any,
) -> ResultT:
    try:
        return await procedure(ctx, payload)
    except ProcedureError as e:
        raise HTTPException(status_code=e.http_status, detail=e.to_dict()) from e


@router.post(
    "/api.updateIpWhitelist",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update the IP whitelist of an API",
    responses=_ERROR_RESPONSES,
)
async def update_ip_whitelist(
    payload: Payload, procedures: Procedures, ctx: Context
) -> Response:
    """Replace an API's IP whitelist. An empty string removes the whitelist."""
    await _invoke(procedures.update_ip_whitelist, ctx, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/key.updateName",
    response_model=bool,
    summary="Rename a key",
    responses=_ERROR_RESPONSES,
)
async def update_key_name(payload: Payload, procedures: Procedures, ctx: Context) -> bool:
    """Rename a key. A null name clears it."""
    return await _invoke(procedures.update_key_name, ctx, payload)


@router.post(
    "/rbac.disconnectPermissionFromRole",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Disconnect a permission from a role",
    responses=_ERROR_RESPONSES,
)
async def disconnect_permission_from_role(
    payload: Payload, procedures: Procedures, ctx: Context
) -> Response:
    """Remove a role-permission link in the caller's workspace."""
    await _invoke(procedures.disconnect_permission_from_role, ctx, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/rbac.updateRole",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a role's name and description",
    responses=_ERROR_RESPONSES,
)
async def update_role(payload: Payload, procedures: Procedures, ctx: Context) -> Response:
    await _invoke(procedures.update_role, ctx, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/webhook.toggle",
    response_model=ToggleWebhookResponse,
    summary="Enable or disable a webhook",
    responses=_ERROR_RESPONSES,
)
async def toggle_webhook(
    payload: Payload, procedures: Procedures, ctx: Context
) -> ToggleWebhookResponse:
    result = await _invoke(procedures.toggle_webhook, ctx, payload)
    return ToggleWebhookResponse(enabled=result.enabled)
