from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ArtifactInspection:
    """Build tag read out of a loaded artifact."""

    path: Path
    tag: str


class InspectionTimeoutError(RuntimeError):
    """The debugger never signalled that it finished loading the artifact."""

    def __init__(self, path: Path, waited_seconds: float) -> None:
        super().__init__(f"debugger did not load {path} within {waited_seconds:g}s")
        self.path = path
        self.waited_seconds = waited_seconds
