"""Abstract interface for the remote object store.

Paths are absolute store paths such as '/Joyent_Dev/public/mdb_v8/v1.2.3'.
All operations raise RuntimeError on failure.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from mdb_publish.gateway.store.types import StoreEntry


class ObjectStore(ABC):
    @abstractmethod
    def mkdirp(self, remote_dir: str) -> None:
        """Create a directory and any missing parents. Existing directories are fine."""
        ...

    @abstractmethod
    def list_entries(self, remote_dir: str) -> list[StoreEntry]:
        """List the entries directly under a directory."""
        ...

    @abstractmethod
    def put_file(self, local_path: Path, remote_path: str) -> None:
        """Upload a local file, replacing any existing object."""
        ...

    @abstractmethod
    def put_text(self, remote_path: str, content: str) -> None:
        """Write literal text as the content of an object."""
        ...
