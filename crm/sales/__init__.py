"""Sales representatives and their customer portfolios."""

from .representative import (
    SalesRepresentative,
    loyalty_points_for
)

__all__ = [
    "SalesRepresentative",
    "loyalty_points_for"
]
