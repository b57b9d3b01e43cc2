"""
Dashboard API.

Totals, chart series and per-branch breakdown for a branch/window
selection, plus the advisory insight for the same selection.
"""

from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.api.deps import get_context, get_current_user, get_filter_criteria
from src.api.schemas import StorageStatus, drain_storage_status
from src.app_shell.context import ServiceContext
from src.components.dashboard import DashboardView
from src.components.order_filter import FilterCriteria
from src.domain.entities import SessionUser

router = APIRouter()


# --- Request/Response Models ---


class SeriesPointResponse(BaseModel):
    label: str
    sales: Decimal
    orders: int
    start: date | None


class BranchTotalResponse(BaseModel):
    branch_id: str
    name: str
    revenue: Decimal
    orders: int


class DashboardResponse(BaseModel):
    branch: str
    window: str
    currency_symbol: str
    total_revenue: Decimal
    total_orders: int
    average_order_value: Decimal
    bucket_type: str
    series: list[SeriesPointResponse]
    by_branch: list[BranchTotalResponse]
    storage: StorageStatus


class InsightRequest(BaseModel):
    branch: str = "ALL"
    window: str = "DAILY"
    start: str = ""
    end: str = ""


class InsightResponse(BaseModel):
    text: str
    ok: bool
    applied: bool


# --- Helper Functions ---


def view_to_response(view: DashboardView, storage: StorageStatus) -> DashboardResponse:
    snapshot = view.snapshot
    return DashboardResponse(
        branch=view.criteria.branch,
        window=view.criteria.window.value,
        currency_symbol=view.currency_symbol,
        total_revenue=snapshot.total_revenue,
        total_orders=snapshot.total_orders,
        average_order_value=snapshot.average_order_value,
        bucket_type=snapshot.bucket_type.value,
        series=[
            SeriesPointResponse(label=p.label, sales=p.sales, orders=p.orders, start=p.start)
            for p in snapshot.series
        ],
        by_branch=[
            BranchTotalResponse(
                branch_id=b.branch_id, name=b.name, revenue=b.revenue, orders=b.orders
            )
            for b in snapshot.by_branch
        ],
        storage=storage,
    )


# --- Endpoints ---


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> DashboardResponse:
    return view_to_response(ctx.dashboard.view(criteria), drain_storage_status(ctx))


@router.post("/insight", response_model=InsightResponse)
async def generate_insight(
    request: InsightRequest,
    current_user: SessionUser = Depends(get_current_user),
    ctx: ServiceContext = Depends(get_context),
) -> InsightResponse:
    """
    Ask the advisory service about the selected window.

    Always answers 200: service failures come back as the fallback text
    with ok=False.
    """
    criteria = get_filter_criteria(request.branch, request.window, request.start, request.end)
    result = await ctx.dashboard.generate_insight(ctx.insight_panel, criteria)
    return InsightResponse(text=result.text, ok=result.ok, applied=result.applied)
