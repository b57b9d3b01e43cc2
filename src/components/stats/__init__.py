"""
Stats component - aggregate filtered orders into a dashboard snapshot.
"""

from .component import (
    BUCKET_BY_WINDOW,
    TODAY_LABEL,
    aggregate,
    branch_breakdown,
    build_series,
    calculate_bucket_start,
    total_revenue,
)
from .models import UNKNOWN_BRANCH, BranchTotal, BucketType, SeriesPoint, StatsSnapshot

__all__ = [
    # Entry points
    "aggregate",
    "total_revenue",
    "build_series",
    "branch_breakdown",
    "calculate_bucket_start",
    # Models
    "StatsSnapshot",
    "SeriesPoint",
    "BranchTotal",
    "BucketType",
    # Constants
    "BUCKET_BY_WINDOW",
    "TODAY_LABEL",
    "UNKNOWN_BRANCH",
]
