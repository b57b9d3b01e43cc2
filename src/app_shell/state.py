"""
Persisted application state: one slot per top-level record.

All slots share the store's backend namespace; keys are disjoint.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.components.durable_store import DurableStore, PersistedSlot
from src.domain.entities import (
    AppSettings,
    Branch,
    Order,
    SessionUser,
    StaffMember,
    get_default_branches,
    get_default_settings,
)

SETTINGS_KEY = "app-settings"
BRANCHES_KEY = "app-branches"
ORDERS_KEY = "orders-list"
CURRENT_USER_KEY = "current-user"
STAFF_KEY = "staff-list"


@dataclass
class AppState:
    settings: PersistedSlot[AppSettings]
    branches: PersistedSlot[list[Branch]]
    orders: PersistedSlot[list[Order]]
    current_user: PersistedSlot[SessionUser | None]
    staff: PersistedSlot[list[StaffMember]]

    @classmethod
    def open(cls, store: DurableStore) -> AppState:
        return cls(
            settings=store.slot(SETTINGS_KEY, get_default_settings(), model=AppSettings),
            branches=store.slot(BRANCHES_KEY, get_default_branches(), model=list[Branch]),
            orders=store.slot(ORDERS_KEY, [], model=list[Order]),
            current_user=store.slot(CURRENT_USER_KEY, None, model=SessionUser | None),
            staff=store.slot(STAFF_KEY, [], model=list[StaffMember]),
        )

    def logout(self) -> None:
        self.current_user.set(None)
