"""
Interactions - Recorded Customer Touchpoints

Each interaction is an immutable record of one contact event.
The kind is fixed by the variant that was constructed:
- Call: content and duration in minutes
- Email: content and subject
- Meeting: content, location and duration in minutes

Only calls and meetings contribute to interaction time.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar

from .errors import PreconditionError


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class InteractionKind(Enum):
    """Interaction channel tags."""
    CALL = "Call"
    EMAIL = "Email"
    MEETING = "Meeting"


def _check_duration(duration: int) -> None:
    if duration < 0:
        raise PreconditionError(f"Duration cannot be negative: {duration}")


@dataclass(frozen=True)
class Interaction(ABC):
    """
    Base record shared by every interaction variant.

    The timestamp is stamped at creation and never changes.
    """
    kind: ClassVar[InteractionKind]

    content: str
    timestamp: datetime = field(default_factory=datetime.now, kw_only=True)

    @property
    def billable_minutes(self) -> int:
        """Minutes this interaction adds to the base interaction time."""
        return 0

    @property
    def formatted_timestamp(self) -> str:
        return self.timestamp.strftime(TIMESTAMP_FORMAT)

    @abstractmethod
    def describe(self) -> str:
        """One-line text rendering of the interaction."""


@dataclass(frozen=True)
class Call(Interaction):
    """A phone call."""
    kind: ClassVar[InteractionKind] = InteractionKind.CALL

    duration: int

    def __post_init__(self):
        _check_duration(self.duration)

    @property
    def billable_minutes(self) -> int:
        return self.duration

    def describe(self) -> str:
        return (
            f"Call on {self.formatted_timestamp} "
            f"(Duration: {self.duration} minutes): {self.content}"
        )


@dataclass(frozen=True)
class Email(Interaction):
    """An email; contributes no interaction time."""
    kind: ClassVar[InteractionKind] = InteractionKind.EMAIL

    subject: str

    def describe(self) -> str:
        return (
            f"Email on {self.formatted_timestamp} "
            f"(Subject: {self.subject}): {self.content}"
        )


@dataclass(frozen=True)
class Meeting(Interaction):
    """An in-person or scheduled meeting."""
    kind: ClassVar[InteractionKind] = InteractionKind.MEETING

    location: str
    duration: int

    def __post_init__(self):
        _check_duration(self.duration)

    @property
    def billable_minutes(self) -> int:
        return self.duration

    def describe(self) -> str:
        return (
            f"Meeting on {self.formatted_timestamp} at {self.location} "
            f"(Duration: {self.duration} minutes): {self.content}"
        )
