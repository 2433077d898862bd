"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Reading:
    """A single temperature sample: epoch milliseconds and degrees Celsius."""

    timestamp: float
    value: float


@dataclass(frozen=True, slots=True)
class AveragedPoint:
    """One downsampled point, with time relative to the first reading."""

    relative_time: float
    value: float
