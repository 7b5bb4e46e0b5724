"""Abstract interface for reading the build tag out of an artifact."""

from abc import ABC, abstractmethod
from pathlib import Path

from mdb_publish.gateway.inspector.types import ArtifactInspection


class ArtifactInspector(ABC):
    @abstractmethod
    def inspect(self, artifact_path: Path) -> ArtifactInspection:
        """Load an artifact into a debugger and read its build tag.

        Implementations wait a bounded amount of time for the artifact to load
        and release any debugger process they start before returning.

        Args:
            artifact_path: Path to an existing built module

        Returns:
            ArtifactInspection holding the tag value

        Raises:
            InspectionTimeoutError: If the artifact never finished loading
            RuntimeError: If the debugger could not be started or queried
        """
        ...
