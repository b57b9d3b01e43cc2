from fastapi import Depends, HTTPException, Query, Request, status

from src.app_shell.context import ServiceContext
from src.components.order_filter import FilterCriteria
from src.domain.entities import SessionUser


# --- Context ---
def get_context(request: Request) -> ServiceContext:
    ctx: ServiceContext | None = getattr(request.app.state, "ctx", None)
    if ctx is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialised",
        )
    return ctx


# --- Auth ---
def get_current_user(ctx: ServiceContext = Depends(get_context)) -> SessionUser:
    """
    The signed-in staff member, or 401.

    There is one session per server: the persisted current-user slot. After
    a login every client of this process is treated as that user until
    logout. Run one server per terminal.
    """
    user = ctx.auth_service.current()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


# --- Filters ---
def get_filter_criteria(
    branch: str = Query("ALL", description="Branch id or ALL"),
    window: str = Query("DAILY", description="DAILY, WEEKLY, MONTHLY, YEARLY or CUSTOM"),
    start: str = Query("", description="CUSTOM start (ISO-8601 date or datetime)"),
    end: str = Query("", description="CUSTOM end (ISO-8601 date or datetime)"),
) -> FilterCriteria:
    try:
        return FilterCriteria(branch=branch, window=window, start=start, end=end)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid filter: {e}",
        ) from e
