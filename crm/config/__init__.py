"""
Configuration Management

Centralized configuration for:
- Interaction-time weighting (VIP and corporate multipliers)
- Loyalty point accrual rates
- Application logging
"""

from .settings import (
    Settings,
    ScoringConfig,
    LoyaltyConfig,
    get_settings
)

__all__ = [
    "Settings",
    "ScoringConfig",
    "LoyaltyConfig",
    "get_settings"
]
