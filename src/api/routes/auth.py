from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from src.api.deps import get_context, get_current_user
from src.app_shell.context import ServiceContext
from src.components.auth import AuthenticationFailed
from src.domain.entities import SessionUser

router = APIRouter()


class LoginRequest(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    id: str
    name: str
    role: str
    username: str
    assigned_branch_ids: list[str]
    wallet_balance: Decimal
    permissions: list[str]


def user_to_response(user: SessionUser) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        role=user.role,
        username=user.username,
        assigned_branch_ids=user.assigned_branch_ids,
        wallet_balance=user.wallet_balance,
        permissions=user.permissions,
    )


@router.post("/login", response_model=UserResponse)
def login(
    request: LoginRequest,
    ctx: ServiceContext = Depends(get_context),
) -> UserResponse:
    """
    Check credentials and make the staff member the current user.

    The current user is process-wide, not per client (see get_current_user).
    """
    try:
        user = ctx.auth_service.login(request.username, request.password)
    except AuthenticationFailed as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
    return user_to_response(user)


@router.post("/logout")
def logout(ctx: ServiceContext = Depends(get_context)) -> dict[str, str]:
    """Clear the current user and drop any pending insight."""
    ctx.auth_service.logout()
    ctx.insight_panel.reset()
    return {"status": "success"}


@router.get("/me", response_model=UserResponse)
def read_me(current_user: SessionUser = Depends(get_current_user)) -> UserResponse:
    """Get current user info, including wallet balance."""
    return user_to_response(current_user)
