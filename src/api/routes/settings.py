"""
Settings API.

GET returns the current settings (defaults when none were saved).
PUT validates a partial update; on failure nothing is saved and the
response is 400 with one entry per offending field.
"""

from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.api.deps import get_context, get_current_user
from src.app_shell.context import ServiceContext
from src.components.settings import ValidationError
from src.domain.entities import AppSettings, SessionUser

router = APIRouter()


# --- Request/Response Models ---


class SettingsUpdateRequest(BaseModel):
    app_name: str | None = None
    currency_symbol: str | None = None
    tax_rate: Decimal | None = None
    service_charge: Decimal | None = None
    receipt_footer: str | None = None


class ValidationErrorResponse(BaseModel):
    field: str
    code: str
    message: str


class ErrorResponse(BaseModel):
    detail: str
    errors: list[ValidationErrorResponse]


def validation_errors_to_response(errors: list[ValidationError]) -> list[ValidationErrorResponse]:
    return [ValidationErrorResponse(field=e.field, code=e.code, message=e.message) for e in errors]


# --- Endpoints ---


@router.get("", response_model=AppSettings)
def get_settings(
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> AppSettings:
    return ctx.settings_service.get()


@router.put(
    "",
    response_model=AppSettings,
    responses={400: {"model": ErrorResponse, "description": "Validation errors"}},
)
def update_settings(
    request: SettingsUpdateRequest,
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> Any:
    result = ctx.settings_service.update(request.model_dump(exclude_none=True))
    if not result.success:
        body = ErrorResponse(
            detail="Validation failed",
            errors=validation_errors_to_response(result.errors),
        )
        return JSONResponse(status_code=400, content=body.model_dump())
    return result.settings
