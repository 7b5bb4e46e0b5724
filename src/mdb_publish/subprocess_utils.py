"""Subprocess helpers that attach operation context to failures."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    *,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    input: str | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a subprocess, capturing text output, and explain failures.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of what the command does
            (e.g., "create tag 'v1.2.3'"), used in error messages
        cwd: Working directory for the command
        input: Text passed to the command's stdin
        check: If True, a nonzero exit status raises RuntimeError

    Returns:
        The completed process with stdout/stderr captured as text

    Raises:
        RuntimeError: If the command cannot be started, or exits nonzero and
            check is True. The message names the operation and includes stderr.
    """
    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            input=input,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise RuntimeError(f"Failed to {operation_context}: {e}") from e

    if check and result.returncode != 0:
        message = f"Failed to {operation_context} (exit status {result.returncode})"
        stderr = result.stderr.strip() if result.stderr else ""
        if stderr:
            message = f"{message}\n{stderr}"
        raise RuntimeError(message)

    return result
