"""Fake Time implementation that records sleeps instead of blocking."""

from mdb_publish.gateway.time.abc import Time


class FakeTime(Time):
    def __init__(self) -> None:
        self._sleep_calls: list[float] = []

    def sleep(self, seconds: float) -> None:
        self._sleep_calls.append(seconds)

    @property
    def sleep_calls(self) -> list[float]:
        """Durations passed to sleep(). For test assertions only."""
        return self._sleep_calls.copy()
