from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    email: str
    password: str


class DashboardLoginRequest(BaseModel):
    email: str


class SessionUser(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    role: str
    email: str | None = None


class LoginResponse(BaseModel):
    token: str
    user: SessionUser


class LabUser(BaseModel):
    name: str
    role: str


class InventoryItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | str
    name: str
    category_name: str | None = None
    current_stock: int | float
    critical_level: int | float
    unit: str | None = None


class InventoryListResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    items: list[InventoryItem] = Field(default_factory=list)


class DashboardSummary(BaseModel):
    total_items: int
    connection_status: str = "Connected"
    low_stock_count: int


class InventoryRow(BaseModel):
    id: int | str
    name: str
    category: str
    current_stock: int | float
    critical_level: int | float
    unit: str
    status: str
    status_badge: str
