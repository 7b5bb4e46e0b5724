"""Release pipeline: validate the build, tag it, and publish it.

Steps run strictly in order and each assumes the previous ones succeeded:

1. check the object-store CLI is installed
2. load the version
3. verify every artifact is a release build
4. tag the release (failure asks whether to continue)
5. check for an existing remote release (presence asks whether to overwrite)
6. upload the artifacts
7. optionally repoint 'latest'

Fatal conditions raise PublishError subclasses; the CLI turns them into exit
status 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from mdb_publish.cli.config import ArtifactSpec
from mdb_publish.cli.output import failure_mark, success_mark, user_output
from mdb_publish.core.confirm import confirm_or_abort
from mdb_publish.core.context import PublishContext
from mdb_publish.core.errors import (
    ArtifactCheckFailedError,
    ArtifactCheckTimedOutError,
    ArtifactMissingError,
    NotReleaseBuildError,
    PointerUpdateFailedError,
    RemoteListFailedError,
    ToolMissingError,
    UploadFailedError,
)
from mdb_publish.core.next_steps import ReleaseNextSteps, format_next_steps
from mdb_publish.core.version import load_version
from mdb_publish.gateway.git.abc import GitTagOps
from mdb_publish.gateway.git.types import TagCreated, TagCreateFailed
from mdb_publish.gateway.inspector.abc import ArtifactInspector
from mdb_publish.gateway.inspector.types import ArtifactInspection, InspectionTimeoutError
from mdb_publish.gateway.shell.abc import Shell
from mdb_publish.gateway.store.abc import ObjectStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReleasePlan:
    """Names derived from the version once it is loaded."""

    version: str
    tag_name: str
    remote_root: str
    dest_path: str
    latest_path: str

    @staticmethod
    def for_version(remote_root: str, version: str) -> ReleasePlan:
        tag_name = f"v{version}"
        return ReleasePlan(
            version=version,
            tag_name=tag_name,
            remote_root=remote_root,
            dest_path=f"{remote_root}/{tag_name}",
            latest_path=f"{remote_root}/latest",
        )


@dataclass(frozen=True)
class PublishResult:
    plan: ReleasePlan
    uploaded: tuple[str, ...]
    tag_created: bool
    latest_updated: bool


def check_tool_available(shell: Shell, tool_name: str) -> str:
    """Return the path of a required tool.

    Raises:
        ToolMissingError: If the tool is not on PATH
    """
    tool_path = shell.get_installed_tool_path(tool_name)
    if tool_path is None:
        raise ToolMissingError(tool_name)
    return tool_path


def check_artifact_is_release(
    inspector: ArtifactInspector, artifact_path: Path, release_tag: str
) -> ArtifactInspection:
    """Verify an artifact exists and was built in release mode.

    Raises:
        ArtifactMissingError: If the file does not exist (the debugger is not started)
        ArtifactCheckTimedOutError: If the debugger never finished loading it
        ArtifactCheckFailedError: If the debugger could not be run or queried
        NotReleaseBuildError: If the embedded tag is not exactly release_tag
    """
    if not artifact_path.is_file():
        raise ArtifactMissingError(artifact_path)

    try:
        inspection = inspector.inspect(artifact_path)
    except InspectionTimeoutError as e:
        raise ArtifactCheckTimedOutError(artifact_path, e.waited_seconds) from e
    except RuntimeError as e:
        raise ArtifactCheckFailedError(f"Could not inspect {artifact_path}: {e}") from e

    if inspection.tag != release_tag:
        raise NotReleaseBuildError(artifact_path, inspection.tag)
    return inspection


def create_version_tag(
    git: GitTagOps, repo_root: Path, version: str
) -> TagCreated | TagCreateFailed:
    """Create the annotated tag v<version>, whose message is the tag name."""
    tag_name = f"v{version}"
    return git.create_tag(repo_root, tag_name, tag_name)


def remote_version_exists(store: ObjectStore, remote_root: str, version: str) -> bool:
    """Check whether v<version> is already listed under the remote root.

    Only an entry named exactly v<version> counts.

    Raises:
        RemoteListFailedError: If the listing cannot be retrieved
    """
    try:
        entries = store.list_entries(remote_root)
    except RuntimeError as e:
        raise RemoteListFailedError(f"Could not list {remote_root}: {e}") from e

    wanted = f"v{version}"
    return any(entry.name == wanted for entry in entries)


def publish_artifacts(
    store: ObjectStore, dest_path: str, artifacts: tuple[ArtifactSpec, ...], base_dir: Path
) -> list[str]:
    """Create the release directory and upload each artifact into it.

    Stops at the first failure; anything already uploaded stays in place.

    Returns:
        Remote paths written, in upload order

    Raises:
        UploadFailedError: If the directory cannot be created or an upload fails
    """
    try:
        store.mkdirp(dest_path)
    except RuntimeError as e:
        raise UploadFailedError(f"Could not create {dest_path}: {e}") from e

    uploaded: list[str] = []
    for artifact in artifacts:
        remote_path = f"{dest_path}/{artifact.remote_name}"
        try:
            store.put_file(base_dir / artifact.local_path, remote_path)
        except RuntimeError as e:
            raise UploadFailedError(f"Could not upload {artifact.arch} artifact: {e}") from e
        user_output(f"  {success_mark()} {artifact.arch}: {remote_path}")
        uploaded.append(remote_path)
    return uploaded


def update_latest_pointer(store: ObjectStore, latest_path: str, dest_path: str) -> None:
    """Point the 'latest' object at the release directory.

    Raises:
        PointerUpdateFailedError: If the object cannot be written
    """
    try:
        store.put_text(latest_path, dest_path)
    except RuntimeError as e:
        raise PointerUpdateFailedError(f"Could not update {latest_path}: {e}") from e


def run_release(ctx: PublishContext, *, update_latest: bool) -> PublishResult:
    """Execute the release pipeline against the context's collaborators."""
    config = ctx.config

    tool_path = check_tool_available(ctx.shell, config.required_tool)
    logger.debug("Using %s at %s", config.required_tool, tool_path)

    version = load_version(ctx.cwd / config.version_file)
    plan = ReleasePlan.for_version(config.remote_root, version)
    user_output(f"Releasing version {version} to {plan.dest_path}")

    user_output("\nChecking artifacts...")
    for artifact in config.artifacts:
        check_artifact_is_release(ctx.inspector, ctx.cwd / artifact.local_path, config.release_tag)
        user_output(f"  {success_mark()} {artifact.arch}: {artifact.local_path} is a release build")

    user_output(f"\nCreating tag {plan.tag_name}...")
    tag_result = create_version_tag(ctx.git, ctx.cwd, version)
    if isinstance(tag_result, TagCreateFailed):
        user_output(f"  {failure_mark()} {tag_result.message}")
        confirm_or_abort(
            ctx.console,
            f"Failed to create tag {plan.tag_name}. Continue anyway?",
            consequence=f"tag {plan.tag_name} could not be created",
        )
    else:
        user_output(f"  {success_mark()} Created tag {plan.tag_name}")

    if remote_version_exists(ctx.store, plan.remote_root, version):
        confirm_or_abort(
            ctx.console,
            f"{plan.dest_path} already exists. Overwrite?",
            consequence=f"not overwriting existing release {plan.dest_path}",
        )

    user_output(f"\nUploading to {plan.dest_path}...")
    uploaded = publish_artifacts(ctx.store, plan.dest_path, config.artifacts, ctx.cwd)

    if update_latest:
        update_latest_pointer(ctx.store, plan.latest_path, plan.dest_path)
        user_output(f"  {success_mark()} {plan.latest_path} -> {plan.dest_path}")

    return PublishResult(
        plan=plan,
        uploaded=tuple(uploaded),
        tag_created=isinstance(tag_result, TagCreated),
        latest_updated=update_latest,
    )


def report_success(result: PublishResult, version_file: Path) -> None:
    """Print the release summary and the manual follow-up checklist."""
    plan = result.plan
    user_output(f"\n✅ Published {plan.version} to {plan.dest_path}")
    if not result.latest_updated:
        user_output(
            f"NOTE: {plan.latest_path} was NOT updated. "
            "Re-run with --update-latest to point it at this release."
        )
    user_output("")
    user_output(
        format_next_steps(
            ReleaseNextSteps(tag_name=plan.tag_name, version_file=str(version_file))
        )
    )
