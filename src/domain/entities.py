from datetime import datetime
from decimal import Decimal
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
RoleType = Literal["SUPER_ADMIN", "ADMIN", "MANAGER", "CASHIER", "WAITER", "CHEF"]
BranchType = Literal["RESTAURANT", "CAFE", "CLOUD_KITCHEN", "WAREHOUSE"]
OrderStatus = Literal["PENDING", "PREPARING", "READY", "SERVED", "COMPLETED", "CANCELLED"]
PaymentMethod = Literal["CASH", "CARD", "UPI", "WALLET", "SPLIT"]

# Sections a staff member may open from the navigation
NAV_PERMISSIONS = [
    "dashboard",
    "pos",
    "orders",
    "inventory",
    "accounting",
    "staff",
    "branches",
    "wallet",
    "settings",
]


class Record(BaseModel):
    """
    Base for every persisted record.

    Stored payloads use camelCase keys; both spellings are accepted on read
    and unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# --- Settings ---

class AppSettings(Record):
    app_name: str = "RR Restro POS"
    currency_symbol: str = "$"
    tax_rate: Decimal = Decimal("5")
    service_charge: Decimal = Decimal("0")
    receipt_footer: str = "Thank you for dining with us!"


# --- Branches ---

class Branch(Record):
    id: str = Field(default_factory=lambda: f"b-{uuid4().hex[:8]}")
    name: str
    type: BranchType = "RESTAURANT"
    address: str = ""


# --- Orders ---

class OrderItem(Record):
    model_config = ConfigDict(frozen=True)

    menu_item_id: str
    name: str
    quantity: int = 1
    unit_price: Decimal
    variant: str | None = None
    addons: list[str] = Field(default_factory=list)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Order(Record):
    """A completed or in-flight sale. Read-only once recorded."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: f"ord-{uuid4().hex[:12]}")
    branch_id: str
    items: list[OrderItem] = Field(default_factory=list)
    total: Decimal
    created_at: datetime
    status: OrderStatus = "COMPLETED"
    payment_method: PaymentMethod = "CASH"
    customer_name: str | None = None
    created_by: str | None = None


# --- Staff & Auth ---

class SessionUser(Record):
    """The signed-in staff member as kept in the current-user slot."""

    id: str
    name: str
    role: RoleType
    username: str
    assigned_branch_ids: list[str] = Field(default_factory=list)
    wallet_balance: Decimal = Decimal("0")
    permissions: list[str] = Field(default_factory=list)


class StaffMember(Record):
    id: str = Field(default_factory=lambda: f"staff-{uuid4().hex[:8]}")
    name: str
    role: RoleType = "CASHIER"
    username: str
    password_hash: str
    assigned_branch_ids: list[str] = Field(default_factory=list)
    wallet_balance: Decimal = Decimal("0")
    permissions: list[str] = Field(default_factory=list)

    def to_session_user(self) -> SessionUser:
        return SessionUser(
            id=self.id,
            name=self.name,
            role=self.role,
            username=self.username,
            assigned_branch_ids=list(self.assigned_branch_ids),
            wallet_balance=self.wallet_balance,
            permissions=list(self.permissions),
        )


# --- Defaults ---

def get_default_settings() -> AppSettings:
    return AppSettings()


def get_default_branches() -> list[Branch]:
    return [
        Branch(id="b1", name="Main Branch", type="RESTAURANT", address="Downtown"),
        Branch(id="b2", name="City Center Cafe", type="CAFE", address="City Center"),
    ]
