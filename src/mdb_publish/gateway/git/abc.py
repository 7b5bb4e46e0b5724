"""Abstract base class for git tag operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from mdb_publish.gateway.git.types import TagCreated, TagCreateFailed


class GitTagOps(ABC):
    """Abstract interface for git tag operations."""

    @abstractmethod
    def create_tag(
        self, repo_root: Path, tag_name: str, message: str
    ) -> TagCreated | TagCreateFailed:
        """Create an annotated git tag.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to create (e.g., 'v1.0.0')
            message: Tag message

        Returns:
            TagCreated on success, TagCreateFailed carrying git's diagnostic
            otherwise. Failures are never raised.
        """
        ...
