"""Version file loading."""

from pathlib import Path

from mdb_publish.core.errors import VersionFileInvalidError


def load_version(path: Path) -> str:
    """Return the first line of the version file that is not a comment or blank.

    Lines whose first non-blank character is '#' are comments.

    Raises:
        VersionFileInvalidError: If the file cannot be read or has no version line
    """
    if not path.is_file():
        raise VersionFileInvalidError(f"Version file not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            for line in f:
                stripped = line.strip()
                if not stripped or stripped.startswith("#"):
                    continue
                return stripped
    except (OSError, UnicodeDecodeError) as e:
        raise VersionFileInvalidError(f"Could not read version file {path}: {e}") from e

    raise VersionFileInvalidError(f"No version found in {path}")
