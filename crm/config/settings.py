"""
Settings Management with Pydantic

Provides type-safe configuration management with:
- Environment variable support
- Validation
- Defaults matching the standard weighting and loyalty rules
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Interaction-time weighting per customer kind."""
    model_config = SettingsConfigDict(
        env_prefix="CRM_SCORING_",
        extra="ignore"
    )

    vip_multiplier: float = Field(default=1.2, ge=0)

    # Corporate thresholds are exclusive lower bounds on employee count
    corporate_large_threshold: int = 1000
    corporate_large_multiplier: float = Field(default=1.5, ge=0)
    corporate_medium_threshold: int = 100
    corporate_medium_multiplier: float = Field(default=1.3, ge=0)


class LoyaltyConfig(BaseSettings):
    """Loyalty points accrued by VIP customers per recorded interaction."""
    model_config = SettingsConfigDict(
        env_prefix="CRM_LOYALTY_",
        extra="ignore"
    )

    call_points_per_minute: float = Field(default=0.5, ge=0)
    email_flat_points: float = Field(default=10, ge=0)
    meeting_points_per_minute: float = Field(default=2.0, ge=0)


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Application
    app_name: str = "Portfolio CRM"
    debug: bool = False
    log_level: str = "INFO"

    # Sub-configurations
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    loyalty: LoyaltyConfig = Field(default_factory=LoyaltyConfig)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(
            scoring=ScoringConfig(),
            loyalty=LoyaltyConfig()
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
