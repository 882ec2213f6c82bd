"""Multipart parser protocol.

Decodes a request body into file parts. The pipeline depends on this
protocol only, never on a concrete decoder.
"""

from typing import List, Protocol, runtime_checkable

from starlette.requests import Request

from ..entities import UploadedPart


@runtime_checkable
class MultipartParser(Protocol):
    """Produces the uploaded file parts of a multipart request."""

    async def parse(self, request: Request) -> List[UploadedPart]:
        """Decode the request body.

        Args:
            request: Incoming multipart/form-data request

        Returns:
            File parts in submission order, possibly empty

        Raises:
            MalformedMultipartError: If the body cannot be decoded
        """
        ...
