"""Upload result envelope handed to the next request handler."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .accepted_file import AcceptedFile
from .file_error import FileError, SkippedFile


@dataclass
class UploadResult:
    """Accepted files plus per-file errors for one request.

    errors is None when no file failed validation. Parts dropped by the
    selection filters are listed in skipped, never in errors.
    """

    files: List[AcceptedFile] = field(default_factory=list)
    errors: Optional[List[FileError]] = None
    skipped: List[SkippedFile] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        files: List[AcceptedFile],
        errors: List[FileError],
        skipped: Optional[List[SkippedFile]] = None,
    ) -> "UploadResult":
        return cls(
            files=list(files),
            errors=list(errors) if errors else None,
            skipped=list(skipped or []),
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files": [accepted.to_dict() for accepted in self.files],
            "errors": [error.to_dict() for error in self.errors] if self.errors else None,
        }
