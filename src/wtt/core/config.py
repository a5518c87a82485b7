from functools import lru_cache

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewayConfig(BaseModel):
    """Immutable connection parameters for the CRM repository gateway."""

    model_config = ConfigDict(frozen=True)

    provider_name: str = "CRX"
    segment_name: str = "Standard"
    principal: str = "admin-Standard"

    @property
    def segment_path(self) -> str:
        """Owning-segment path used to scope every gateway query."""
        return f"provider/{self.provider_name}/segment/{self.segment_name}"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Work Time Tracking Service"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # CRM segment
    crm_provider_name: str = "CRX"
    crm_segment_name: str = "Standard"
    crm_principal: str = "admin-Standard"

    # Resource assignment policies
    validate_resource_on_assign: bool = False  # Reject refs to missing/disabled resources
    enforce_unique_assignment: bool = False  # One active assignment per (project, resource)

    # Project tree
    max_tree_depth: int = 64

    @field_validator("crm_provider_name", "crm_segment_name")
    @classmethod
    def validate_path_segment(cls, v: str) -> str:
        if not v or "/" in v:
            raise ValueError("CRM provider and segment names must be non-empty and contain no '/'")
        return v

    @field_validator("max_tree_depth")
    @classmethod
    def validate_max_tree_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_TREE_DEPTH must be at least 1")
        return v

    def gateway_config(self) -> GatewayConfig:
        return GatewayConfig(
            provider_name=self.crm_provider_name,
            segment_name=self.crm_segment_name,
            principal=self.crm_principal,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
