"""
Resolved calendar event models.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ResolvedInterval:
    """Absolute time interval of a reservation."""
    start: datetime
    end: datetime
    unit_name: str

@dataclass(frozen=True)
class ResolvedEvent:
    """A reservation ready to be written as a calendar event."""
    uid: str
    start: datetime
    end: datetime
    summary: str

    @staticmethod
    def build_uid(endpoint: str, booking_id: int, week_number: int, period_id: int) -> str:
        """Stable identity used to deduplicate events across runs."""
        return f"{endpoint}/{booking_id}/{week_number}/{period_id}"

    def to_dict(self) -> dict[str, Any]:
        return {
            'uid': self.uid,
            'start': self.start.isoformat(),
            'end': self.end.isoformat(),
            'summary': self.summary,
        }
