"""Dashboard configuration loaded from the environment."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DashboardSettings(BaseSettings):
    """Settings for building a linked-chart dashboard."""

    model_config = SettingsConfigDict(
        env_prefix="CHARTLINK_",
        env_file=".env",
        extra="ignore",
    )

    year: int = Field(2000, description="Year the dataset is filtered to")
    full_opacity: float = Field(1.0, ge=0.0, le=1.0, description="Opacity of emphasized marks")
    dimmed_opacity: float = Field(0.3, ge=0.0, le=1.0, description="Opacity of dimmed marks")

    @model_validator(mode="after")
    def check_opacity_order(self) -> "DashboardSettings":
        """Dimmed marks must not be more opaque than emphasized ones."""
        if self.dimmed_opacity > self.full_opacity:
            raise ValueError("dimmed_opacity must not exceed full_opacity")
        return self
