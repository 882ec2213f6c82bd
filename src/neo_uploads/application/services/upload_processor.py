"""Per-file upload processor.

ONLY per-file handling - size check and placement of a single part into
the upload directory. Parts are handled one at a time in list order.
"""

import logging
import uuid
from pathlib import Path
from typing import Callable, List, Tuple

from ...core.entities import AcceptedFile, FileError, UploadedPart, BYTES_PER_MEGABYTE
from ...core.exceptions import FileRejectedError
from ...core.protocols import FileStore
from ...core.value_objects import FileName, UploadOptions
from ..validators import validate_file_name, validate_file_size

logger = logging.getLogger(__name__)


class UploadProcessor:
    """Turns filtered parts into accepted files or per-file errors.

    Args:
        options: Merged upload options
        upload_dir: Absolute directory accepted files are moved into
        upload_path: Public path prefix used to build file URLs
        store: Filesystem primitives
        id_factory: Source of the random prefix for stored names
    """

    def __init__(
        self,
        options: UploadOptions,
        upload_dir: Path,
        upload_path: str,
        store: FileStore,
        id_factory: Callable[[], object] = uuid.uuid4,
    ):
        self.options = options
        self.upload_dir = upload_dir
        self.upload_path = upload_path
        self.store = store
        self.id_factory = id_factory

    async def size_of(self, part: UploadedPart) -> int:
        if part.temp_path is not None:
            return await self.store.size_of(part.temp_path)
        return len(part.content)

    def stored_name(self, original_name: str) -> FileName:
        file_name = FileName.parse(original_name)
        if self.options.random_name:
            file_name = file_name.with_prefix(str(self.id_factory()))
        return file_name

    def build_url(self, file_name: str) -> str:
        if not self.upload_path:
            return file_name
        return f"{self.upload_path}/{file_name}"

    async def process(self, part: UploadedPart) -> AcceptedFile:
        """Validate and place one part.

        Raises:
            InvalidFileNameError: If the client filename does not name a file
            FileTooLargeError: If the part exceeds max_file_size
            FileCollisionError: If the destination already exists
            OSError: If the temporary file cannot be read or moved
        """
        validate_file_name(part.original_name)
        size = await self.size_of(part)
        validate_file_size(part.original_name, size, self.options)

        stored = self.stored_name(part.original_name)
        file_name = str(stored)
        accepted = AcceptedFile(
            original_name=part.original_name,
            name=stored.name,
            ext=stored.ext,
            file_name=file_name,
            size=size / BYTES_PER_MEGABYTE,
            size_bytes=size,
            tmp_path=part.temp_path,
            path=self.upload_dir / file_name,
            url=self.build_url(file_name),
            field_name=part.field_name,
        )

        if part.temp_path is not None:
            await self.store.move(part.temp_path, accepted.path)
        else:
            await self.store.write(accepted.path, part.content)

        logger.info(
            f"Accepted upload '{part.original_name}' as {file_name}",
            extra={"field": part.field_name, "size_bytes": size, "path": str(accepted.path)},
        )
        return accepted

    async def process_all(self, parts: List[UploadedPart]) -> Tuple[List[AcceptedFile], List[FileError]]:
        """Process parts sequentially, collecting per-file rejections as errors."""
        files: List[AcceptedFile] = []
        errors: List[FileError] = []

        for part in parts:
            try:
                files.append(await self.process(part))
            except FileRejectedError as exc:
                logger.warning(
                    f"Rejected upload '{part.original_name}': {exc.message}",
                    extra={"field": part.field_name, "error_code": exc.error_code},
                )
                errors.append(FileError(file=part.original_name, msg=exc.message, code=exc.error_code))
                if part.temp_path is not None:
                    await self.store.discard(part.temp_path)

        return files, errors
