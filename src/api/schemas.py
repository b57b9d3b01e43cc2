"""
Response models shared by several routers.
"""

from pydantic import BaseModel

from src.app_shell.context import ServiceContext


class StorageStatus(BaseModel):
    """Non-blocking durability notice attached to responses."""

    durable: bool
    warnings: list[str]


def drain_storage_status(ctx: ServiceContext) -> StorageStatus:
    """Report (and clear) write failures since the last report."""
    return StorageStatus(
        durable=ctx.store.durable,
        warnings=[str(failure) for failure in ctx.store.clear_warnings()],
    )
