"""Abstract interface for yes/no prompts."""

from abc import ABC, abstractmethod


class Console(ABC):
    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Ask the operator a yes/no question.

        Reads exactly one character of input. Only 'y' or 'Y' count as yes;
        anything else (including Enter) is no.

        Args:
            prompt: Question to display

        Returns:
            True if the operator answered yes
        """
        ...
