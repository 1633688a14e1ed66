"""Flight records and the timestamp format they use."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")


def _parse_date(text: str) -> datetime:
    """Parse a YYYY-MM-DDTHH:MM:SS timestamp, raising ValueError on anything else."""
    if not _DATE_PATTERN.fullmatch(text):
        raise ValueError(f"invalid timestamp: {text!r}")
    return datetime.strptime(text, _DATE_FORMAT)


def _format_date(moment: datetime) -> str:
    """Render a timestamp as YYYY-MM-DDTHH:MM:SS."""
    return moment.isoformat(timespec="seconds")


@dataclass
class Flight:
    """One scheduled flight."""

    code: str
    airline: str
    origin: str
    destination: str
    tail_number: str
    priority: int
    date: datetime
    departure_delay: int
    flight_time: int
    cancelled: bool

    def cancelled_as_int(self) -> int:
        """Return 1 if the flight is cancelled, 0 otherwise."""
        return 1 if self.cancelled else 0

    def format(self) -> str:
        """Return the flight as one space-separated line."""
        return " ".join(
            (
                self.code,
                self.airline,
                self.origin,
                self.destination,
                self.tail_number,
                str(self.priority),
                _format_date(self.date),
                str(self.departure_delay),
                str(self.flight_time),
                str(self.cancelled_as_int()),
            )
        )