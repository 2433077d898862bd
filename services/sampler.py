"""Logging mode: poll the temperature file and hand readings to a writer."""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Callable, Optional

from models.records import Reading
from sensors.hwmon import read_temperature
from storage.log_writer import LogWriter

logger = logging.getLogger(__name__)


def current_millis() -> int:
    return time.time_ns() // 1_000_000


class Sampler:
    """Samples ``temp_path`` every ``interval_ms`` until asked to stop."""

    def __init__(
        self,
        temp_path: Path | str,
        writer: LogWriter,
        interval_ms: int = 500,
        clock: Callable[[], int] = current_millis,
    ) -> None:
        if interval_ms < 0:
            raise ValueError("interval_ms must not be negative")
        self.temp_path = Path(temp_path)
        self.writer = writer
        self.interval_ms = interval_ms
        self.clock = clock
        self.sample_count = 0

    def sample_once(self) -> Reading:
        value = read_temperature(self.temp_path)
        reading = Reading(timestamp=self.clock(), value=value)
        self.writer.write(reading)
        self.sample_count += 1
        return reading

    def run(self, stop: Optional[threading.Event] = None) -> int:
        """Sample until ``stop`` is set and return the number of readings taken.

        Without an event the loop only ends through an exception.
        """
        stop = stop or threading.Event()
        interval = self.interval_ms / 1000
        logger.info(
            "Sampling started",
            extra={"path": str(self.temp_path), "interval_ms": self.interval_ms},
        )
        while not stop.is_set():
            self.sample_once()
            if stop.wait(interval):
                break
        logger.info("Sampling stopped", extra={"reading_count": self.sample_count})
        return self.sample_count
