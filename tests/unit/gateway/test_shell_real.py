from unittest.mock import patch

from mdb_publish.gateway.shell.real import RealShell


def test_get_installed_tool_path_uses_which() -> None:
    with patch("mdb_publish.gateway.shell.real.shutil.which", return_value="/usr/bin/mls") as which:
        assert RealShell().get_installed_tool_path("mls") == "/usr/bin/mls"

    which.assert_called_once_with("mls")


def test_missing_tool_returns_none() -> None:
    with patch("mdb_publish.gateway.shell.real.shutil.which", return_value=None):
        assert RealShell().get_installed_tool_path("mls") is None
