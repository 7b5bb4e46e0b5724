"""Abstract interface for locating external programs."""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract interface for tool lookup on the execution path."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the absolute path of a tool on PATH.

        Args:
            tool_name: Executable name (e.g., 'mls')

        Returns:
            Path to the executable, or None if it cannot be found
        """
        ...
