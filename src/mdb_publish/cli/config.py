import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = ".mdb-publish.toml"

DEFAULT_REMOTE_ROOT = "/Joyent_Dev/public/mdb_v8"
DEFAULT_VERSION_FILE = "version"
DEFAULT_REQUIRED_TOOL = "mls"
DEFAULT_DEBUGGER = "mdb"
DEFAULT_TAG_SYMBOL = "mdbv8_vers_tag"
RELEASE_TAG = "release"


@dataclass(frozen=True)
class ArtifactSpec:
    """A built module for one target architecture and its published name."""

    arch: str
    local_path: Path
    remote_name: str


DEFAULT_ARTIFACTS = (
    ArtifactSpec(
        arch="ia32", local_path=Path("build/ia32/mdb_v8.so"), remote_name="mdb_v8_ia32.so"
    ),
    ArtifactSpec(
        arch="amd64", local_path=Path("build/amd64/mdb_v8.so"), remote_name="mdb_v8_amd64.so"
    ),
)


@dataclass(frozen=True)
class PublishConfig:
    """In-memory representation of the publisher's settings.

    Relative paths are resolved against the directory the tool runs from.

    Example .mdb-publish.toml:
      remote_root = "/Joyent_Dev/public/mdb_v8"
      version_file = "version"
      debugger = "mdb"

      [[artifacts]]
      arch = "amd64"
      local_path = "build/amd64/mdb_v8.so"
      remote_name = "mdb_v8_amd64.so"
    """

    version_file: Path
    artifacts: tuple[ArtifactSpec, ...]
    remote_root: str
    required_tool: str
    debugger: str
    tag_symbol: str
    release_tag: str
    poll_interval_seconds: float
    poll_attempts: int

    @staticmethod
    def defaults() -> "PublishConfig":
        return PublishConfig(
            version_file=Path(DEFAULT_VERSION_FILE),
            artifacts=DEFAULT_ARTIFACTS,
            remote_root=DEFAULT_REMOTE_ROOT,
            required_tool=DEFAULT_REQUIRED_TOOL,
            debugger=DEFAULT_DEBUGGER,
            tag_symbol=DEFAULT_TAG_SYMBOL,
            release_tag=RELEASE_TAG,
            poll_interval_seconds=1.0,
            poll_attempts=30,
        )


def _parse_artifacts(raw: list[dict[str, object]]) -> tuple[ArtifactSpec, ...]:
    artifacts: list[ArtifactSpec] = []
    for entry in raw:
        missing = [key for key in ("arch", "local_path", "remote_name") if key not in entry]
        if missing:
            raise ValueError(f"artifact entry is missing {', '.join(missing)}: {entry}")
        artifacts.append(
            ArtifactSpec(
                arch=str(entry["arch"]),
                local_path=Path(str(entry["local_path"])),
                remote_name=str(entry["remote_name"]),
            )
        )
    return tuple(artifacts)


def load_config(config_dir: Path) -> PublishConfig:
    """Load .mdb-publish.toml from the given directory if present; otherwise return defaults.

    Raises:
        ValueError: If the file exists but is not valid TOML or has malformed entries
    """
    defaults = PublishConfig.defaults()
    cfg_path = config_dir / CONFIG_FILE_NAME
    if not cfg_path.exists():
        return defaults

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid {CONFIG_FILE_NAME}: {e}") from e

    artifacts = defaults.artifacts
    if "artifacts" in data:
        artifacts = _parse_artifacts(list(data["artifacts"]))
        if not artifacts:
            raise ValueError(f"{CONFIG_FILE_NAME} declares an empty artifacts list")

    return PublishConfig(
        version_file=Path(str(data.get("version_file", defaults.version_file))),
        artifacts=artifacts,
        remote_root=str(data.get("remote_root", defaults.remote_root)).rstrip("/"),
        required_tool=str(data.get("required_tool", defaults.required_tool)),
        debugger=str(data.get("debugger", defaults.debugger)),
        tag_symbol=defaults.tag_symbol,
        release_tag=defaults.release_tag,
        poll_interval_seconds=defaults.poll_interval_seconds,
        poll_attempts=defaults.poll_attempts,
    )
