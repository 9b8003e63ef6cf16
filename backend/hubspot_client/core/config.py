"""Client configuration using Pydantic Settings."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HUBSPOT_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Wire conventions
    flat_route_marker: str = Field(
        default="/v2",
        description="Route fragment marking resources that use the flat (v2) wire convention",
    )
    identity_key: str = Field(
        default="vid", description="Root document key holding the entity identity"
    )
    properties_key: str = Field(
        default="properties", description="Document key holding the entity properties"
    )

    def uses_flat_wire_convention(self, route: str) -> bool:
        """Check whether a resource route uses the flat (v2) wire convention."""
        return self.flat_route_marker in route


# Global settings instance
settings = Settings()
