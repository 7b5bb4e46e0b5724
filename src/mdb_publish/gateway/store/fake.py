"""In-memory fake of the remote object store."""

from pathlib import Path, PurePosixPath

from mdb_publish.gateway.store.abc import ObjectStore
from mdb_publish.gateway.store.types import StoreEntry


class FakeObjectStore(ObjectStore):
    """Object store held in dictionaries.

    Constructor Injection:
    ---------------------
    - directories: Mapping of directory path to the entries listed under it
    - list_fails: If True, list_entries() raises like an unreachable store
    - failing_uploads: Remote paths whose put_file() raises
    - pointer_write_fails: If True, put_text() raises

    Mutation Tracking:
    -----------------
    - created_dirs: Paths passed to mkdirp()
    - uploads: (local_path, remote_path) tuples from put_file(), in order
    - objects: remote_path -> text written with put_text()
    """

    def __init__(
        self,
        *,
        directories: dict[str, list[StoreEntry]] | None = None,
        list_fails: bool = False,
        failing_uploads: set[str] | None = None,
        pointer_write_fails: bool = False,
    ) -> None:
        self._directories = directories if directories is not None else {}
        self._list_fails = list_fails
        self._failing_uploads = failing_uploads if failing_uploads is not None else set()
        self._pointer_write_fails = pointer_write_fails
        self._created_dirs: list[str] = []
        self._uploads: list[tuple[Path, str]] = []
        self._objects: dict[str, str] = {}
        self._list_calls: list[str] = []

    def mkdirp(self, remote_dir: str) -> None:
        self._created_dirs.append(remote_dir)
        self._directories.setdefault(remote_dir, [])

    def list_entries(self, remote_dir: str) -> list[StoreEntry]:
        self._list_calls.append(remote_dir)
        if self._list_fails:
            raise RuntimeError(f"Failed to list remote directory '{remote_dir}'")
        return list(self._directories.get(remote_dir, []))

    def put_file(self, local_path: Path, remote_path: str) -> None:
        if remote_path in self._failing_uploads:
            raise RuntimeError(f"Failed to upload '{local_path}' to '{remote_path}'")
        self._uploads.append((local_path, remote_path))
        parent = str(PurePosixPath(remote_path).parent)
        name = PurePosixPath(remote_path).name
        self._directories.setdefault(parent, []).append(StoreEntry(name=name, type="object"))

    def put_text(self, remote_path: str, content: str) -> None:
        if self._pointer_write_fails:
            raise RuntimeError(f"Failed to write '{remote_path}'")
        self._objects[remote_path] = content

    @property
    def created_dirs(self) -> list[str]:
        return self._created_dirs.copy()

    @property
    def uploads(self) -> list[tuple[Path, str]]:
        return self._uploads.copy()

    @property
    def objects(self) -> dict[str, str]:
        return dict(self._objects)

    @property
    def list_calls(self) -> list[str]:
        return self._list_calls.copy()
