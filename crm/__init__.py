"""
Portfolio CRM

An in-memory customer relationship model: customers of several kinds,
their interaction history, sales representatives owning portfolios,
and aggregate interaction-time reporting.
"""

__version__ = "0.1.0"

from .registry import CRMRegistry

__all__ = ["CRMRegistry"]
