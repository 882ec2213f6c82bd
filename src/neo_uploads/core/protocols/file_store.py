"""File store protocol for placing uploads on disk."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileStore(Protocol):
    """Filesystem primitives used by the per-file processor."""

    def ensure_directory(self, path: Path) -> Path:
        """Create the directory if missing. Idempotent and synchronous."""
        ...

    async def size_of(self, path: Path) -> int:
        """Size in bytes of an existing file."""
        ...

    async def move(self, source: Path, destination: Path) -> None:
        """Move source to destination, failing if destination exists."""
        ...

    async def write(self, destination: Path, content: bytes) -> None:
        """Write content to a new file, failing if destination exists."""
        ...

    async def discard(self, path: Path) -> None:
        """Remove a leftover temporary file, ignoring missing files."""
        ...
