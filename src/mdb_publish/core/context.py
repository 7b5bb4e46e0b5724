"""Application context with dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mdb_publish.cli.config import PublishConfig, load_config
from mdb_publish.gateway.console.abc import Console
from mdb_publish.gateway.console.fake import FakeConsole
from mdb_publish.gateway.console.real import InteractiveConsole
from mdb_publish.gateway.git.abc import GitTagOps
from mdb_publish.gateway.git.fake import FakeGitTagOps
from mdb_publish.gateway.git.real import RealGitTagOps
from mdb_publish.gateway.inspector.abc import ArtifactInspector
from mdb_publish.gateway.inspector.fake import FakeArtifactInspector
from mdb_publish.gateway.inspector.real import MdbArtifactInspector
from mdb_publish.gateway.shell.abc import Shell
from mdb_publish.gateway.shell.fake import FakeShell
from mdb_publish.gateway.shell.real import RealShell
from mdb_publish.gateway.store.abc import ObjectStore
from mdb_publish.gateway.store.fake import FakeObjectStore
from mdb_publish.gateway.store.real import MantaObjectStore
from mdb_publish.gateway.time.abc import Time
from mdb_publish.gateway.time.fake import FakeTime
from mdb_publish.gateway.time.real import RealTime


@dataclass(frozen=True)
class PublishContext:
    """Immutable context holding all dependencies for a release run.

    Created at the CLI entry point and threaded through the pipeline.
    """

    cwd: Path
    config: PublishConfig
    shell: Shell
    git: GitTagOps
    store: ObjectStore
    inspector: ArtifactInspector
    console: Console
    time: Time

    @staticmethod
    def for_test(
        *,
        cwd: Path,
        config: PublishConfig | None = None,
        shell: Shell | None = None,
        git: GitTagOps | None = None,
        store: ObjectStore | None = None,
        inspector: ArtifactInspector | None = None,
        console: Console | None = None,
        time: Time | None = None,
    ) -> PublishContext:
        """Create a context backed by fakes.

        Unspecified collaborators get empty fakes, except shell, which reports
        the configured required tool as installed.
        """
        resolved_config = config if config is not None else PublishConfig.defaults()
        if shell is None:
            tool = resolved_config.required_tool
            shell = FakeShell(installed_tools={tool: f"/usr/bin/{tool}"})
        return PublishContext(
            cwd=cwd,
            config=resolved_config,
            shell=shell,
            git=git if git is not None else FakeGitTagOps(),
            store=store if store is not None else FakeObjectStore(),
            inspector=inspector if inspector is not None else FakeArtifactInspector(),
            console=console if console is not None else FakeConsole(),
            time=time if time is not None else FakeTime(),
        )


def create_context(cwd: Path) -> PublishContext:
    """Create production context with real implementations.

    Args:
        cwd: Directory the release runs from. Relative paths in the config
            and the optional .mdb-publish.toml are resolved against it.

    Raises:
        ValueError: If .mdb-publish.toml exists but is malformed
    """
    config = load_config(cwd)
    time: Time = RealTime()
    return PublishContext(
        cwd=cwd,
        config=config,
        shell=RealShell(),
        git=RealGitTagOps(),
        store=MantaObjectStore(),
        inspector=MdbArtifactInspector(
            debugger=config.debugger,
            tag_symbol=config.tag_symbol,
            time=time,
            poll_interval_seconds=config.poll_interval_seconds,
            poll_attempts=config.poll_attempts,
        ),
        console=InteractiveConsole(),
        time=time,
    )
