"""Object store backed by the Manta command-line tools (mmkdir, mls, mput)."""

import json
import logging
from pathlib import Path

from mdb_publish.gateway.store.abc import ObjectStore
from mdb_publish.gateway.store.types import StoreEntry
from mdb_publish.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


def parse_listing(output: str) -> list[StoreEntry]:
    """Parse `mls -j` output: one JSON object per line, each with a 'name' field.

    Raises:
        ValueError: If a line is not a JSON object with a 'name'
    """
    entries: list[StoreEntry] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        record = json.loads(line)
        if not isinstance(record, dict) or "name" not in record:
            raise ValueError(f"listing record has no name: {line}")
        entries.append(StoreEntry(name=str(record["name"]), type=str(record.get("type", ""))))
    return entries


class MantaObjectStore(ObjectStore):
    def mkdirp(self, remote_dir: str) -> None:
        run_subprocess_with_context(
            cmd=["mmkdir", "-p", remote_dir],
            operation_context=f"create remote directory '{remote_dir}'",
        )

    def list_entries(self, remote_dir: str) -> list[StoreEntry]:
        result = run_subprocess_with_context(
            cmd=["mls", "-j", remote_dir],
            operation_context=f"list remote directory '{remote_dir}'",
        )
        try:
            entries = parse_listing(result.stdout)
        except ValueError as e:
            raise RuntimeError(f"Failed to parse listing of '{remote_dir}': {e}") from e
        logger.debug("Listed %d entries under %s", len(entries), remote_dir)
        return entries

    def put_file(self, local_path: Path, remote_path: str) -> None:
        run_subprocess_with_context(
            cmd=["mput", "-f", str(local_path), remote_path],
            operation_context=f"upload '{local_path}' to '{remote_path}'",
        )

    def put_text(self, remote_path: str, content: str) -> None:
        run_subprocess_with_context(
            cmd=["mput", remote_path],
            operation_context=f"write '{remote_path}'",
            input=content,
        )
