from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from src.api.deps import get_context, get_current_user, get_filter_criteria
from src.api.schemas import StorageStatus, drain_storage_status
from src.app_shell.context import ServiceContext
from src.components.branches import BranchNotFound
from src.components.order_filter import FilterCriteria
from src.components.orders import RecordOrderInput
from src.domain.entities import Order, OrderItem, OrderStatus, PaymentMethod, SessionUser

router = APIRouter()


class OrderCreateRequest(BaseModel):
    branch_id: str
    items: list[OrderItem] = Field(default_factory=list)
    total: Decimal | None = Field(default=None, ge=0)
    status: OrderStatus = "COMPLETED"
    payment_method: PaymentMethod = "CASH"
    customer_name: str | None = None


class RecordOrderResponse(BaseModel):
    order: Order
    storage: StorageStatus


@router.get("", response_model=list[Order])
def list_orders(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> list[Order]:
    """Orders matching the same branch/window selection as the dashboard."""
    return ctx.dashboard.filtered_orders(criteria)


@router.post("", response_model=RecordOrderResponse, status_code=status.HTTP_201_CREATED)
def record_order(
    request: OrderCreateRequest,
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> RecordOrderResponse:
    """
    Record a sale. A failed write still returns 201 (the order is kept in
    memory) with storage.durable=False and the failure in storage.warnings.
    """
    try:
        order = ctx.order_service.record(
            RecordOrderInput(
                branch_id=request.branch_id,
                items=request.items,
                total=request.total,
                status=request.status,
                payment_method=request.payment_method,
                customer_name=request.customer_name,
                created_by=current_user.id,
            )
        )
    except BranchNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return RecordOrderResponse(order=order, storage=drain_storage_status(ctx))


@router.get("/{order_id}", response_model=Order)
def get_order(
    order_id: str,
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> Order:
    order = ctx.order_service.get(order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return order
