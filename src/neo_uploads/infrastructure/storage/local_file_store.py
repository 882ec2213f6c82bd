"""Local filesystem store for accepted uploads.

Async stat, move and write through aiofiles; directory bootstrap is a plain
synchronous mkdir. Existing destinations are never overwritten.
"""

import logging
import shutil
from pathlib import Path

import aiofiles
import aiofiles.os

from ...core.exceptions import FileCollisionError

logger = logging.getLogger(__name__)

# Temp dir may be on another filesystem
_move = aiofiles.os.wrap(shutil.move)


class LocalFileStore:
    """FileStore implementation backed by the local filesystem."""

    def ensure_directory(self, path: Path) -> Path:
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    async def size_of(self, path: Path) -> int:
        stat = await aiofiles.os.stat(path)
        return stat.st_size

    async def move(self, source: Path, destination: Path) -> None:
        await self._ensure_free(destination)
        await _move(str(source), str(destination))
        logger.debug(f"Moved {source} -> {destination}")

    async def write(self, destination: Path, content: bytes) -> None:
        await self._ensure_free(destination)
        # "xb" fails if the file appeared after the existence check
        try:
            async with aiofiles.open(destination, "xb") as f:
                await f.write(content)
        except FileExistsError as exc:
            raise FileCollisionError(str(destination)) from exc
        logger.debug(f"Wrote {len(content)} bytes to {destination}")

    async def discard(self, path: Path) -> None:
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.warning(f"Could not remove temporary file {path}: {exc}")

    async def _ensure_free(self, destination: Path) -> None:
        if await aiofiles.os.path.exists(destination):
            raise FileCollisionError(str(destination))
