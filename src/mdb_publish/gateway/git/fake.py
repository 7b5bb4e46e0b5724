"""Fake implementation of git tag operations for testing."""

from __future__ import annotations

from pathlib import Path

from mdb_publish.gateway.git.abc import GitTagOps
from mdb_publish.gateway.git.types import TagCreated, TagCreateFailed


class FakeGitTagOps(GitTagOps):
    """In-memory fake implementation of git tag operations.

    Constructor Injection:
    ---------------------
    - existing_tags: Set of tag names that already exist. Creating one of
      these fails the way `git tag -a` does.

    Mutation Tracking:
    -----------------
    - created_tags: List of (tag_name, message) tuples from create_tag()
    """

    def __init__(self, *, existing_tags: set[str] | None = None) -> None:
        self._existing_tags: set[str] = existing_tags if existing_tags is not None else set()
        self._created_tags: list[tuple[str, str]] = []

    def create_tag(
        self, repo_root: Path, tag_name: str, message: str
    ) -> TagCreated | TagCreateFailed:
        if tag_name in self._existing_tags:
            return TagCreateFailed(
                tag_name=tag_name,
                message=f"fatal: tag '{tag_name}' already exists",
            )
        self._existing_tags.add(tag_name)
        self._created_tags.append((tag_name, message))
        return TagCreated(tag_name=tag_name)

    @property
    def created_tags(self) -> list[tuple[str, str]]:
        """Tags created during the test, as (tag_name, message) tuples."""
        return self._created_tags.copy()
