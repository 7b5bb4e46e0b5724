"""Tests for version file loading."""

from pathlib import Path

import pytest

from mdb_publish.core.errors import VersionFileInvalidError
from mdb_publish.core.version import load_version


def test_skips_comments_and_blank_lines(tmp_path: Path) -> None:
    version_file = tmp_path / "version"
    version_file.write_text("# comment\n\n1.4.0\n", encoding="utf-8")

    assert load_version(version_file) == "1.4.0"


def test_returns_first_version_line_only(tmp_path: Path) -> None:
    version_file = tmp_path / "version"
    version_file.write_text("# header\n1.4.0\n1.5.0\n", encoding="utf-8")

    assert load_version(version_file) == "1.4.0"


def test_strips_surrounding_whitespace(tmp_path: Path) -> None:
    version_file = tmp_path / "version"
    version_file.write_text("   \n  2.0.1  \r\n", encoding="utf-8")

    assert load_version(version_file) == "2.0.1"


def test_skips_indented_comment_lines(tmp_path: Path) -> None:
    version_file = tmp_path / "version"
    version_file.write_text("  # note\n\t# another\n1.4.0\n", encoding="utf-8")

    assert load_version(version_file) == "1.4.0"


@pytest.mark.parametrize(
    "content",
    [
        "",
        "\n\n",
        "# only a comment\n",
        "# one\n\n# two\n   \n",
        "  # indented comment\n",
    ],
)
def test_fails_without_version_line(tmp_path: Path, content: str) -> None:
    version_file = tmp_path / "version"
    version_file.write_text(content, encoding="utf-8")

    with pytest.raises(VersionFileInvalidError):
        load_version(version_file)


def test_fails_when_file_missing(tmp_path: Path) -> None:
    with pytest.raises(VersionFileInvalidError) as exc_info:
        load_version(tmp_path / "version")

    assert "not found" in str(exc_info.value)
