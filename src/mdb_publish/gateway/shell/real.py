"""Production tool lookup using shutil.which."""

import shutil

from mdb_publish.gateway.shell.abc import Shell


class RealShell(Shell):
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
