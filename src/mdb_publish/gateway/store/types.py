from dataclasses import dataclass


@dataclass(frozen=True)
class StoreEntry:
    """One record from a remote directory listing."""

    name: str
    type: str
