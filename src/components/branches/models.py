from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import BranchType


class BranchNotFound(Exception):
    def __init__(self, branch_id: str) -> None:
        self.branch_id = branch_id
        super().__init__(f"Branch not found: {branch_id}")


@dataclass(frozen=True)
class CreateBranchInput:
    name: str
    type: BranchType = "RESTAURANT"
    address: str = ""
