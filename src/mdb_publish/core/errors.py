"""Errors raised by the release pipeline.

Every fatal condition is a PublishError subclass. The CLI reports the message
and exits with status 1.
"""

from pathlib import Path


class PublishError(RuntimeError):
    """Base class for fatal release pipeline failures."""


class ToolMissingError(PublishError):
    """A required external program is not on PATH."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"Required tool '{tool}' was not found on PATH")
        self.tool = tool


class VersionFileInvalidError(PublishError):
    """The version file is missing or holds no version line."""


class ArtifactMissingError(PublishError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Artifact not found: {path}")
        self.path = path


class NotReleaseBuildError(PublishError):
    """The artifact was built without the release marker."""

    def __init__(self, path: Path, tag: str) -> None:
        super().__init__(f"{path} is not a release build (tag is '{tag}', expected 'release')")
        self.path = path
        self.tag = tag


class ArtifactCheckTimedOutError(PublishError):
    """The debugger never signalled that the artifact was loaded."""

    def __init__(self, path: Path, waited_seconds: float) -> None:
        super().__init__(f"Timed out after {waited_seconds:g}s waiting for debugger to load {path}")
        self.path = path


class ArtifactCheckFailedError(PublishError):
    """The debugger could not be started or queried."""


class RemoteListFailedError(PublishError):
    pass


class UploadFailedError(PublishError):
    pass


class PointerUpdateFailedError(PublishError):
    pass


class ConfirmationDeclined(PublishError):
    """The operator answered no to a confirmation prompt."""

    def __init__(self, consequence: str) -> None:
        super().__init__(f"Aborted: {consequence}")
        self.consequence = consequence
