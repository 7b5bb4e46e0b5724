"""Fake artifact inspector returning pre-configured tags."""

from pathlib import Path

from mdb_publish.gateway.inspector.abc import ArtifactInspector
from mdb_publish.gateway.inspector.types import ArtifactInspection, InspectionTimeoutError


class FakeArtifactInspector(ArtifactInspector):
    """In-memory inspector.

    Constructor Injection:
    ---------------------
    - tags: Mapping of artifact path to the tag it reports. Paths not in the
      mapping report default_tag.
    - default_tag: Tag reported for unmapped paths
    - timeout_paths: Paths whose inspection times out
    """

    def __init__(
        self,
        *,
        tags: dict[Path, str] | None = None,
        default_tag: str = "release",
        timeout_paths: set[Path] | None = None,
    ) -> None:
        self._tags = tags if tags is not None else {}
        self._default_tag = default_tag
        self._timeout_paths = timeout_paths if timeout_paths is not None else set()
        self._inspected: list[Path] = []

    def inspect(self, artifact_path: Path) -> ArtifactInspection:
        self._inspected.append(artifact_path)
        if artifact_path in self._timeout_paths:
            raise InspectionTimeoutError(artifact_path, 30.0)
        return ArtifactInspection(
            path=artifact_path, tag=self._tags.get(artifact_path, self._default_tag)
        )

    @property
    def inspected(self) -> list[Path]:
        """Paths passed to inspect(), in order. For test assertions only."""
        return self._inspected.copy()
