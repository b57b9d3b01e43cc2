"""
Branches component - branch management.
"""

from .component import BranchService
from .models import BranchNotFound, CreateBranchInput

__all__ = ["BranchService", "BranchNotFound", "CreateBranchInput"]
