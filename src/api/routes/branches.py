from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from src.api.deps import get_context, get_current_user
from src.app_shell.context import ServiceContext
from src.components.branches import BranchNotFound, CreateBranchInput
from src.domain.entities import Branch, BranchType, SessionUser

router = APIRouter()


class BranchCreateRequest(BaseModel):
    name: str
    type: BranchType = "RESTAURANT"
    address: str = ""


@router.get("", response_model=list[Branch])
def list_branches(
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> list[Branch]:
    return ctx.branch_service.list()


@router.post("", response_model=Branch, status_code=status.HTTP_201_CREATED)
def create_branch(
    request: BranchCreateRequest,
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> Branch:
    try:
        return ctx.branch_service.create(
            CreateBranchInput(name=request.name, type=request.type, address=request.address)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.delete("/{branch_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_branch(
    branch_id: str,
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> None:
    """Remove a branch. Its past orders stay in the log."""
    try:
        ctx.branch_service.delete(branch_id)
    except BranchNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
