"""Fake Shell implementation for testing."""

from mdb_publish.gateway.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake that reports a fixed set of installed tools.

    Constructor Injection:
    ---------------------
    - installed_tools: Mapping of tool name to the path it is "installed" at
    """

    def __init__(self, *, installed_tools: dict[str, str] | None = None) -> None:
        self._installed_tools = installed_tools if installed_tools is not None else {}
        self._lookups: list[str] = []

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        self._lookups.append(tool_name)
        return self._installed_tools.get(tool_name)

    @property
    def lookups(self) -> list[str]:
        """Tool names that were looked up. For test assertions only."""
        return self._lookups.copy()
