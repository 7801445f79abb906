"""CPU timer and current-date helper."""

from __future__ import annotations

import time


class Timer:
    """Measures processor time between start() and stop(); usable as a context manager."""

    def __init__(self) -> None:
        self._start_time = 0.0
        self._end_time = 0.0

    def start(self) -> None:
        self._start_time = time.process_time()

    def stop(self) -> None:
        self._end_time = time.process_time()

    def duration(self) -> float:
        """Seconds of processor time between the last start and stop."""
        return self._end_time - self._start_time

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


def current_date() -> str:
    """The current local date and time in ctime format, newline-terminated."""
    return time.ctime() + "\n"