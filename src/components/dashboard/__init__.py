"""
Dashboard component - what the user sees for a branch over a window.
"""

from .component import DashboardController
from .models import DashboardView

__all__ = ["DashboardController", "DashboardView"]
