"""Period — the immutable half-open interval tagged with a unit.

INVARIANT: ``start <= date < end``. A Period is a plain value: frozen,
hashable, compared field by field. Navigation and division always produce
new Periods; nothing mutates one in place.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, model_validator

from periodkit.domain.errors import MalformedPeriod
from periodkit.domain.units import Unit


class Period(BaseModel):
    """A ``[start, end)`` interval aligned to the boundaries of ``type``.

    Attributes:
        start: First instant of the period (inclusive).
        end: First instant after the period (exclusive).
        type: Unit id the period was built for (e.g. ``"month"``).
        date: Reference instant the period was created from.
    """

    model_config = {"frozen": True}

    start: datetime
    end: datetime
    type: str
    date: datetime

    @model_validator(mode="after")
    def _check_bounds(self) -> Period:
        if not self.start <= self.date < self.end:
            msg = (
                f"Period violates start <= date < end: "
                f"start={self.start.isoformat()}, date={self.date.isoformat()}, "
                f"end={self.end.isoformat()}"
            )
            raise MalformedPeriod(msg)
        return self

    @property
    def duration(self) -> timedelta:
        """Length of the period (``end - start``)."""
        return self.end - self.start

    @property
    def is_custom(self) -> bool:
        return self.type == Unit.CUSTOM

    def __str__(self) -> str:
        return f"{self.type}[{self.start.isoformat()}, {self.end.isoformat()})"


def midpoint(start: datetime, end: datetime) -> datetime:
    """Instant halfway between *start* and *end*."""
    return start + (end - start) / 2
