"""Production git tag operations using subprocess."""

from pathlib import Path

from mdb_publish.gateway.git.abc import GitTagOps
from mdb_publish.gateway.git.types import TagCreated, TagCreateFailed
from mdb_publish.subprocess_utils import run_subprocess_with_context


class RealGitTagOps(GitTagOps):
    def create_tag(
        self, repo_root: Path, tag_name: str, message: str
    ) -> TagCreated | TagCreateFailed:
        try:
            run_subprocess_with_context(
                cmd=["git", "tag", "-a", tag_name, "-m", message],
                operation_context=f"create tag '{tag_name}'",
                cwd=repo_root,
            )
        except RuntimeError as e:
            return TagCreateFailed(tag_name=tag_name, message=str(e))
        return TagCreated(tag_name=tag_name)
