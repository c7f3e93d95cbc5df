"""
Application configuration using pydantic-settings.

All settings are loaded from environment variables or .env file.

Complex values are given as JSON. Site names are case-sensitive, so give
the whole table at once rather than through ``SITES__...`` variables
(nested variable names are lowercased)::

    SITES='{"T4": {"vlan": 100, "subnet_prefix": "10.51.100."}}'
    APPROVED_FIRMWARE='["10.12.221", "9.80.5"]'
"""
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fleet_sim.simulation._probabilities import (
    DEFAULT_APPROVED_FIRMWARE,
    DEFAULT_SITE_POLICIES,
)


class SitePolicyConfig(BaseModel):
    """Network contract of one site."""

    vlan: int
    subnet_prefix: str

    @field_validator("subnet_prefix")
    @classmethod
    def _ends_with_dot(cls, v: str) -> str:
        if not v.endswith("."):
            raise ValueError("subnet_prefix must end with '.'")
        return v


def _default_sites() -> dict[str, SitePolicyConfig]:
    return {
        name: SitePolicyConfig(vlan=vlan, subnet_prefix=prefix)
        for name, (vlan, prefix) in DEFAULT_SITE_POLICIES.items()
    }


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Application
    app_name: str = Field(
        default="Camera Fleet Simulator",
        description="Application name",
    )
    app_debug: bool = Field(default=False, description="Debug mode")
    api_prefix: str = Field(default="/api", description="API prefix")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=3000, description="Listen port")

    # Fleet
    fleet_size: int = Field(
        default=300,
        ge=0,
        description="Number of cameras generated at startup and on reset.",
    )
    max_fleet_size: int = Field(
        default=10000,
        ge=0,
        description="Upper bound accepted by POST /sim/reset?count=...",
    )
    approved_firmware: list[str] = Field(
        default_factory=lambda: list(DEFAULT_APPROVED_FIRMWARE),
        min_length=1,
        description="Firmware versions considered current.",
    )
    sites: dict[str, SitePolicyConfig] = Field(
        default_factory=_default_sites,
        description="Site name -> network policy.",
    )
    fleet_config_path: str = Field(
        default="config/fleet.yaml",
        description="Optional YAML file overriding sites / approved_firmware.",
    )

    # Simulation
    tick_interval_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Interval of the background simulation tick in seconds.",
    )
    scheduler_enabled: bool = Field(
        default=True,
        description="Run the background simulation tick.",
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the simulation RNG (unset = nondeterministic).",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance (Singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
