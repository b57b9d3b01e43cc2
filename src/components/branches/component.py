"""
Branches component - branch list maintenance.

Removing a branch never touches the order log: orders that referenced it
keep their branch id and are reported under "Unknown branch".
"""

from __future__ import annotations

from src.components.durable_store import SlotPort
from src.domain.entities import Branch

from .models import BranchNotFound, CreateBranchInput


class BranchService:
    def __init__(self, branches: SlotPort[list[Branch]]) -> None:
        self._branches = branches

    def list(self) -> list[Branch]:
        return list(self._branches.value)

    def get(self, branch_id: str) -> Branch:
        for branch in self._branches.value:
            if branch.id == branch_id:
                return branch
        raise BranchNotFound(branch_id)

    def ids(self) -> set[str]:
        return {b.id for b in self._branches.value}

    def create(self, inp: CreateBranchInput) -> Branch:
        name = inp.name.strip()
        if not name:
            raise ValueError("Branch name is required")
        branch = Branch(name=name, type=inp.type, address=inp.address)
        self._branches.set([*self._branches.value, branch])
        return branch

    def delete(self, branch_id: str) -> None:
        remaining = [b for b in self._branches.value if b.id != branch_id]
        if len(remaining) == len(self._branches.value):
            raise BranchNotFound(branch_id)
        self._branches.set(remaining)
