"""Starlette multipart parser.

Decodes the body with Starlette's form parser (python-multipart underneath)
and spools every file part to a named temporary file so the pipeline can
stat and move it.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import aiofiles.os
import aiofiles.tempfile
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request

from ...core.entities import UploadedPart
from ...core.exceptions import MalformedMultipartError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1 MiB


class StarletteMultipartParser:
    """MultipartParser backed by Request.form().

    Args:
        temp_dir: Directory for spooled part files. Defaults to the system
            temp directory.
        max_files: Upper bound on file parts Starlette will accept
        max_fields: Upper bound on plain form fields Starlette will accept
    """

    def __init__(
        self,
        temp_dir: Optional[Union[str, Path]] = None,
        max_files: int = 1000,
        max_fields: int = 1000,
    ):
        self.temp_dir = Path(temp_dir) if temp_dir else None
        self.max_files = max_files
        self.max_fields = max_fields

    async def parse(self, request: Request) -> List[UploadedPart]:
        try:
            form = await request.form(max_files=self.max_files, max_fields=self.max_fields)
        except MultiPartException as exc:
            raise MalformedMultipartError(exc.message) from exc
        except HTTPException as exc:
            # Starlette reports parser errors as 400 once an app is in scope
            if exc.status_code != 400:
                raise
            raise MalformedMultipartError(str(exc.detail)) from exc
        except ValueError as exc:
            # python-multipart parse errors
            raise MalformedMultipartError(str(exc)) from exc

        parts: List[UploadedPart] = []
        try:
            for field_name, value in form.multi_items():
                # Plain text fields are not files
                if not isinstance(value, UploadFile):
                    continue
                # Browsers send an empty filename for an unused file input
                if not value.filename:
                    continue
                try:
                    temp_path = await self._spool(value)
                except Exception:
                    for spooled in parts:
                        await _remove_quietly(spooled.temp_path)
                    raise
                parts.append(
                    UploadedPart(
                        field_name=field_name,
                        original_name=value.filename,
                        temp_path=temp_path,
                        content_type=value.content_type,
                    )
                )
        finally:
            await form.close()

        logger.debug(f"Parsed {len(parts)} file part(s) from {request.url.path}")
        return parts

    async def _spool(self, upload: UploadFile) -> Path:
        if self.temp_dir is not None:
            self.temp_dir.mkdir(parents=True, exist_ok=True)
        async with aiofiles.tempfile.NamedTemporaryFile(
            "wb", delete=False, prefix="upload-", dir=self.temp_dir
        ) as tmp:
            try:
                await upload.seek(0)
                while chunk := await upload.read(CHUNK_SIZE):
                    await tmp.write(chunk)
            except Exception:
                await tmp.close()
                await _remove_quietly(Path(tmp.name))
                raise
            return Path(tmp.name)


async def _remove_quietly(path: Path) -> None:
    try:
        await aiofiles.os.remove(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        logger.warning(f"Could not remove spooled file {path}: {exc}")
