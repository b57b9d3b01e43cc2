from typing import Literal

from pydantic import BaseModel, Field


class AppRules(BaseModel):
    name: str = "RR Restro POS"
    timezone: str | None = None  # IANA name; host local time when unset


class StorageRules(BaseModel):
    backend: Literal["file", "memory"] = "file"
    data_dir: str = "./data"
    namespace: str = "restro-pos"


class AdvisoryRules(BaseModel):
    enabled: bool = True
    model: str = "gemini-3-flash-preview"
    endpoint: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout_seconds: float = Field(default=30.0, gt=0)
    api_key_env: str = "API_KEY"
    system_instruction: str | None = None


class BootstrapRules(BaseModel):
    enabled_if_no_staff: bool = True
    admin_username: str = "admin"
    admin_name: str = "Super Admin"
    password_env: str = "POS_ADMIN_PASSWORD"


class PosConfig(BaseModel):
    app: AppRules = Field(default_factory=AppRules)
    storage: StorageRules = Field(default_factory=StorageRules)
    advisory: AdvisoryRules = Field(default_factory=AdvisoryRules)
    bootstrap: BootstrapRules = Field(default_factory=BootstrapRules)
