"""
Buffer Policy

Mandatory gap kept around every existing booking on a resource.
"""

from dataclasses import dataclass
from datetime import timedelta

from shared.domain.value_objects import TimeRange

DEFAULT_BUFFER = timedelta(minutes=10)


@dataclass(frozen=True)
class BufferPolicy:
    """
    Expands a range symmetrically by a fixed buffer

    buffered = [start - buffer, end + buffer)

    One instance is shared by validation-time detection and the store's
    commit-time re-check so both compare against the same window.
    """
    buffer: timedelta = DEFAULT_BUFFER

    def __post_init__(self):
        if self.buffer < timedelta(0):
            raise ValueError("Buffer cannot be negative")

    @classmethod
    def from_minutes(cls, minutes: float) -> 'BufferPolicy':
        return cls(timedelta(minutes=minutes))

    @property
    def minutes(self) -> float:
        return self.buffer.total_seconds() / 60

    def apply(self, time_range: TimeRange) -> TimeRange:
        return time_range.expanded(self.buffer)
