"""Artifact inspection through a live mdb process.

A helper debugger loads the module, touches a marker file once the load has
finished, then idles in a shell escape. While it idles, a second debugger
attaches to it by pid and prints the tag symbol from the loaded module. The
helper runs in its own session so that it and the shell it spawns are
killed together afterwards.
"""

from __future__ import annotations

import itertools
import logging
import os
import signal
import subprocess
import tempfile
from pathlib import Path

from mdb_publish.gateway.inspector.abc import ArtifactInspector
from mdb_publish.gateway.inspector.parsing import parse_tag_reply
from mdb_publish.gateway.inspector.types import ArtifactInspection, InspectionTimeoutError
from mdb_publish.gateway.time.abc import Time
from mdb_publish.subprocess_utils import run_subprocess_with_context

# How long the helper idles after loading; it is killed long before this.
HELPER_IDLE_SECONDS = 3600
KILL_WAIT_SECONDS = 5.0

logger = logging.getLogger(__name__)


def build_helper_script(artifact_path: Path, marker_path: Path) -> str:
    """mdb commands that load the module, signal readiness, then idle."""
    return f"::load {artifact_path}; !touch {marker_path}; sleep {HELPER_IDLE_SECONDS}"


class MdbArtifactInspector(ArtifactInspector):
    def __init__(
        self,
        *,
        debugger: str,
        tag_symbol: str,
        time: Time,
        poll_interval_seconds: float,
        poll_attempts: int,
        marker_dir: Path | None = None,
    ) -> None:
        self._debugger = debugger
        self._tag_symbol = tag_symbol
        self._time = time
        self._poll_interval_seconds = poll_interval_seconds
        self._poll_attempts = poll_attempts
        self._marker_dir = marker_dir if marker_dir is not None else Path(tempfile.gettempdir())
        self._check_numbers = itertools.count(1)

    def _next_marker_path(self) -> Path:
        return self._marker_dir / f"mdb-publish.{os.getpid()}.{next(self._check_numbers)}.ready"

    def inspect(self, artifact_path: Path) -> ArtifactInspection:
        marker = self._next_marker_path()
        marker.unlink(missing_ok=True)

        script = build_helper_script(artifact_path.resolve(), marker)
        logger.debug("Starting %s to load %s (marker %s)", self._debugger, artifact_path, marker)
        try:
            helper = subprocess.Popen(
                [self._debugger, "-e", script],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise RuntimeError(f"Failed to start {self._debugger}: {e}") from e

        try:
            self._wait_for_marker(helper, artifact_path, marker)
            result = run_subprocess_with_context(
                cmd=[self._debugger, "-p", str(helper.pid), "-e", f"{self._tag_symbol}/s"],
                operation_context=f"read {self._tag_symbol} from {artifact_path}",
            )
            tag = parse_tag_reply(result.stdout, self._tag_symbol)
            logger.debug("%s reports %s=%r", artifact_path, self._tag_symbol, tag)
            return ArtifactInspection(path=artifact_path, tag=tag)
        finally:
            self._terminate(helper)
            marker.unlink(missing_ok=True)

    def _wait_for_marker(self, helper: subprocess.Popen, artifact_path: Path, marker: Path) -> None:
        for attempt in range(1, self._poll_attempts + 1):
            if marker.exists():
                return
            exit_status = helper.poll()
            if exit_status is not None:
                raise RuntimeError(
                    f"{self._debugger} exited with status {exit_status} "
                    f"before loading {artifact_path}"
                )
            logger.debug("Waiting for %s (attempt %d/%d)", marker, attempt, self._poll_attempts)
            self._time.sleep(self._poll_interval_seconds)

        if marker.exists():
            return
        raise InspectionTimeoutError(
            artifact_path, self._poll_interval_seconds * self._poll_attempts
        )

    def _terminate(self, helper: subprocess.Popen) -> None:
        # Best effort: the helper may already be gone. Its process group also
        # holds the shell running the idle sleep.
        try:
            os.killpg(helper.pid, signal.SIGKILL)
            helper.wait(timeout=KILL_WAIT_SECONDS)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("Could not terminate %s (pid %d): %s", self._debugger, helper.pid, e)
