"""Errors raised by the domain model."""


class PreconditionError(ValueError):
    """An input violates a domain precondition (e.g. a negative duration)."""
