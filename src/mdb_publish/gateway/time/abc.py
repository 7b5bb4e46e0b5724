from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract clock for dependency injection."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Block for the given number of seconds."""
        ...
