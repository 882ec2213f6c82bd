"""Upload pipeline.

Runs the full acceptance chain for one request: header guard, body
materialization, directory bootstrap, selection filters, per-file
processing and result aggregation.
"""

import logging
import uuid
from pathlib import Path
from typing import Callable, List, Optional, Union

from starlette.requests import Request

from ...core.entities import UploadedPart, UploadResult
from ...core.exceptions import NoFilesUploadedError, UploadStorageError
from ...core.protocols import FileStore, MultipartParser
from ...core.value_objects import UploadOptions, merge_options
from ...core.value_objects.upload_options import OptionsInput
from ...config.settings import UploadSettings, get_upload_settings
from ...infrastructure import LocalFileStore, StarletteMultipartParser
from ..filters import apply_filters
from ..validators import validate_content_type
from .upload_processor import UploadProcessor

logger = logging.getLogger(__name__)


class UploadPipeline:
    """File acceptance pipeline bound to one upload directory and policy.

    The pipeline holds no per-request state, so a single instance serves
    concurrent requests.

    Args:
        path: Upload path, relative to base_dir, also used as URL prefix
        options: Upload options, merged over the defaults
        base_dir: Directory path is resolved against. Defaults to the working
            directory at construction time.
        parser: Multipart decoder, StarletteMultipartParser by default
        store: Filesystem primitives, LocalFileStore by default
        id_factory: Random prefix source for stored names
    """

    def __init__(
        self,
        path: str = "uploads",
        options: OptionsInput = None,
        *,
        base_dir: Optional[Union[str, Path]] = None,
        parser: Optional[MultipartParser] = None,
        store: Optional[FileStore] = None,
        id_factory: Callable[[], object] = uuid.uuid4,
    ):
        self.options: UploadOptions = merge_options(options)
        self.upload_path = Path(path).as_posix().rstrip("/") if path else ""
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.upload_dir = (self.base_dir / (path or "")).resolve()
        self.parser = parser or StarletteMultipartParser()
        self.store = store or LocalFileStore()
        self.processor = UploadProcessor(
            options=self.options,
            upload_dir=self.upload_dir,
            upload_path=self.upload_path,
            store=self.store,
            id_factory=id_factory,
        )

    @classmethod
    def from_settings(cls, settings: Optional[UploadSettings] = None, **kwargs) -> "UploadPipeline":
        """Build a pipeline from UPLOAD_* environment settings."""
        settings = settings or get_upload_settings()
        kwargs.setdefault("parser", StarletteMultipartParser(temp_dir=settings.temp_dir))
        return cls(settings.dir, settings.to_options(), base_dir=settings.base_dir, **kwargs)

    async def materialize(self, request: Request) -> List[UploadedPart]:
        """Validate the content-type and decode the file parts.

        Raises:
            InvalidContentTypeError: Content-type is not multipart with a boundary
            MalformedMultipartError: Body cannot be decoded
            NoFilesUploadedError: Body carries no file parts
        """
        validate_content_type(request.headers.get("content-type"))
        parts = await self.parser.parse(request)
        if not parts:
            raise NoFilesUploadedError()
        return parts

    async def run(self, request: Request) -> UploadResult:
        """Process every file of the request.

        Returns:
            Accepted files, per-file errors and filtered parts
        """
        parts = await self.materialize(request)
        try:
            self.store.ensure_directory(self.upload_dir)

            selected, skipped = apply_filters(self.options, parts)
            await self._discard_unselected(parts, selected)

            files, errors = await self.processor.process_all(selected)
        except Exception as exc:
            if isinstance(exc, (OSError, UploadStorageError)):
                logger.error(
                    f"Upload aborted while storing files for {request.url.path}",
                    extra={"upload_dir": str(self.upload_dir)},
                    exc_info=True,
                )
            # Parts already moved are gone from their temp path
            await self._discard_all(parts)
            raise

        result = UploadResult.build(files, errors, skipped)
        logger.info(
            f"Upload complete: {len(result.files)} accepted, "
            f"{len(errors)} rejected, {len(result.skipped)} skipped",
            extra={"path": request.url.path, "upload_dir": str(self.upload_dir)},
        )
        return result

    async def _discard_all(self, parts: List[UploadedPart]) -> None:
        for part in parts:
            if part.temp_path is not None:
                await self.store.discard(part.temp_path)

    async def _discard_unselected(self, parts: List[UploadedPart], selected: List[UploadedPart]) -> None:
        for part in parts:
            if part.temp_path is None or any(part is kept for kept in selected):
                continue
            await self.store.discard(part.temp_path)
