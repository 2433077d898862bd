"""Ordering and window averaging of temperature readings."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from errors import ErrorKind, TempLogError
from models.records import AveragedPoint, Reading


def sort_readings(readings: Iterable[Reading]) -> List[Reading]:
    """Return readings ordered by timestamp, then value.

    The sort is stable. NaN has no place in that ordering and is rejected.
    """
    materialized = list(readings)
    for reading in materialized:
        if math.isnan(reading.timestamp) or math.isnan(reading.value):
            raise TempLogError(
                f"Can not order reading containing NaN: {reading}", ErrorKind.domain
            )
    return sorted(materialized, key=lambda reading: (reading.timestamp, reading.value))


class Averager:
    """Downsamples sorted readings into non-overlapping fixed-size windows."""

    def __init__(self, window: int = 1) -> None:
        self.window = window

    def average(self, readings: Sequence[Reading]) -> List[AveragedPoint]:
        window = self.window
        if window < 1:
            raise TempLogError(
                f"Averaging window must be at least 1, got {window}", ErrorKind.domain
            )
        if not readings:
            raise TempLogError("No data to average.", ErrorKind.domain)

        first = readings[0].timestamp
        points: List[AveragedPoint] = []
        # Trailing readings that do not fill a whole window are dropped.
        for start in range(0, len(readings) // window * window, window):
            cumulative_x = 0.0
            cumulative_y = 0.0
            for reading in readings[start:start + window]:
                cumulative_x += reading.timestamp - first
                cumulative_y += reading.value
            points.append(AveragedPoint(cumulative_x / window, cumulative_y / window))
        return points
