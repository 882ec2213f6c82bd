"""Per-file error and skip records."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FileError:
    """A file that was submitted but failed validation."""

    file: str
    msg: str
    code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"file": self.file, "msg": self.msg}


class SkipReason(str, Enum):
    """Why a selection filter dropped a part."""
    FIELD_NOT_ALLOWED = "field_not_allowed"
    EXTENSION_NOT_ALLOWED = "extension_not_allowed"
    MAX_FILES_EXCEEDED = "max_files_exceeded"


@dataclass(frozen=True)
class SkippedFile:
    """A part dropped by a selection filter. Not an error."""

    file: str
    field_name: str
    reason: SkipReason

    def to_dict(self) -> Dict[str, Any]:
        return {"file": self.file, "field": self.field_name, "reason": self.reason.value}
