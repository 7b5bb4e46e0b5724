"""Fake Console with scripted answers."""

from mdb_publish.gateway.console.abc import Console


class FakeConsole(Console):
    """Answers prompts from a pre-configured list and records what was asked.

    Constructor Injection:
    ---------------------
    - answers: Characters returned in order, one per prompt. Running out of
      answers is a test bug and raises AssertionError.
    """

    def __init__(self, *, answers: list[str] | None = None) -> None:
        self._answers = list(answers) if answers is not None else []
        self._prompts: list[str] = []

    def confirm(self, prompt: str) -> bool:
        self._prompts.append(prompt)
        if not self._answers:
            raise AssertionError(f"FakeConsole has no scripted answer for prompt: {prompt!r}")
        return self._answers.pop(0) in ("y", "Y")

    @property
    def prompts(self) -> list[str]:
        """Prompts shown during the test. For test assertions only."""
        return self._prompts.copy()
