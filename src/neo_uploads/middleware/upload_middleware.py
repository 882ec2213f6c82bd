"""Starlette middleware running the upload pipeline ahead of route handlers.

The result is stored on request.state.uploads for the next handler; see
get_upload_result(). Requests outside the configured paths and methods pass
through untouched.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from ..application.services import UploadPipeline
from ..core.exceptions import UploadConfigurationError, UploadRejectedError, get_http_status_code
from ..core.protocols import MultipartParser
from ..core.value_objects.upload_options import OptionsInput
from .state import UPLOADS_STATE_KEY

logger = logging.getLogger(__name__)


class UploadMiddleware(BaseHTTPMiddleware):
    """Accept multipart uploads for matching requests.

    Args:
        app: ASGI application
        path: Upload directory relative to base_dir, also the URL prefix
        options: UploadOptions or mapping of option names
        include_paths: Request path prefixes the middleware handles. Required;
            every non-multipart request under these prefixes gets a 422.
        methods: HTTP methods the middleware handles
        base_dir: Root directory, defaults to the current working directory
        parser: Alternative multipart decoder
    """

    def __init__(
        self,
        app,
        path: str = "uploads",
        options: OptionsInput = None,
        *,
        include_paths: Sequence[str],
        methods: Sequence[str] = ("POST", "PUT", "PATCH"),
        base_dir: Optional[Union[str, Path]] = None,
        parser: Optional[MultipartParser] = None,
    ):
        super().__init__(app)
        self.pipeline = UploadPipeline(path, options, base_dir=base_dir, parser=parser)
        if isinstance(include_paths, str):
            include_paths = (include_paths,)
        self.include_paths = tuple(include_paths)
        if not self.include_paths:
            raise UploadConfigurationError(
                "UploadMiddleware needs at least one include path", option="include_paths"
            )
        self.methods = {method.upper() for method in methods}

    def _should_handle(self, request: Request) -> bool:
        if request.method.upper() not in self.methods:
            return False
        return any(request.url.path.startswith(prefix) for prefix in self.include_paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not self._should_handle(request):
            return await call_next(request)

        try:
            result = await self.pipeline.run(request)
        except UploadRejectedError as exc:
            logger.warning(
                f"Upload rejected: {exc.message}",
                extra={"error_code": exc.error_code, "request_path": request.url.path},
            )
            return PlainTextResponse(exc.message, status_code=get_http_status_code(exc))

        setattr(request.state, UPLOADS_STATE_KEY, result)
        return await call_next(request)
