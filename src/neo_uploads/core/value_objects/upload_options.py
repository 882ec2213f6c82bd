"""Upload options value object.

Immutable per-middleware configuration: size limit, random naming and the
three selection filters. Built once at construction time by overlaying the
caller's options onto the defaults.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from ..exceptions import UploadConfigurationError


DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024  # 5 MiB

# Mapping keys, snake_case or camelCase
_OPTION_ALIASES = {
    "max_file_size": "max_file_size",
    "maxFileSize": "max_file_size",
    "random_name": "random_name",
    "randomName": "random_name",
    "max_file": "max_file",
    "maxFile": "max_file",
    "files": "files",
    "exts": "exts",
}


def _as_tuple(values: Optional[Iterable[str]], option: str) -> Optional[Tuple[str, ...]]:
    if values is None:
        return None
    if isinstance(values, str):
        raise UploadConfigurationError(
            f"Option '{option}' must be a list of strings, not a string",
            option=option,
        )
    try:
        items = tuple(values)
    except TypeError as exc:
        raise UploadConfigurationError(
            f"Option '{option}' must be a list of strings, got {type(values).__name__}",
            option=option,
        ) from exc
    if not all(isinstance(item, str) for item in items):
        raise UploadConfigurationError(f"Option '{option}' must only contain strings", option=option)
    return items


@dataclass(frozen=True)
class UploadOptions:
    """Filtering and naming policy for one upload middleware instance.

    Attributes:
        max_file_size: Maximum bytes per file. None or 0 disables the check.
        random_name: Prefix stored names with a random UUID.
        max_file: Maximum number of files accepted. None or 0 means unlimited.
        files: Allowed form field names, in priority order.
        exts: Allowed extensions without the leading dot, in priority order.
    """

    max_file_size: Optional[int] = DEFAULT_MAX_FILE_SIZE
    random_name: bool = True
    max_file: Optional[int] = None
    files: Optional[Tuple[str, ...]] = None
    exts: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        # Lists become tuples
        object.__setattr__(self, "files", _as_tuple(self.files, "files"))
        exts = _as_tuple(self.exts, "exts")
        if exts is not None:
            exts = tuple(ext.lstrip(".").lower() for ext in exts)
        object.__setattr__(self, "exts", exts)

        for option in ("max_file_size", "max_file"):
            value = getattr(self, option)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise UploadConfigurationError(
                    f"Option '{option}' must be an integer or None, got {type(value).__name__}",
                    option=option,
                )
        if not isinstance(self.random_name, bool):
            raise UploadConfigurationError(
                f"Option 'random_name' must be a boolean, got {type(self.random_name).__name__}",
                option="random_name",
            )

        if self.max_file_size is not None and self.max_file_size < 0:
            raise UploadConfigurationError(
                f"max_file_size cannot be negative: {self.max_file_size}",
                option="max_file_size",
            )
        if self.max_file is not None and self.max_file < 0:
            raise UploadConfigurationError(
                f"max_file cannot be negative: {self.max_file}",
                option="max_file",
            )

    @property
    def size_limited(self) -> bool:
        """Whether a per-file size limit is in effect."""
        return bool(self.max_file_size)

    @property
    def count_limited(self) -> bool:
        """Whether a file count cap is in effect."""
        return bool(self.max_file and self.max_file > 0)

    def to_dict(self) -> dict:
        return {
            "max_file_size": self.max_file_size,
            "random_name": self.random_name,
            "max_file": self.max_file,
            "files": list(self.files) if self.files is not None else None,
            "exts": list(self.exts) if self.exts is not None else None,
        }


OptionsInput = Union[UploadOptions, Mapping[str, Any], None]


def merge_options(options: OptionsInput = None, **overrides: Any) -> UploadOptions:
    """Overlay supplied options onto the defaults.

    Args:
        options: An UploadOptions, a mapping of option names (snake_case or
            camelCase) or None for the defaults
        **overrides: Individual options applied last

    Returns:
        A new UploadOptions; the inputs are not modified

    Raises:
        UploadConfigurationError: On unknown option names or invalid values
    """
    if isinstance(options, UploadOptions):
        base = options
        supplied: dict = {}
    elif options is None:
        base = UploadOptions()
        supplied = {}
    elif isinstance(options, Mapping):
        base = UploadOptions()
        supplied = dict(options)
    else:
        raise UploadConfigurationError(
            f"Unsupported options type: {type(options).__name__}"
        )

    supplied.update(overrides)

    known = {f.name for f in fields(UploadOptions)}
    normalized = {}
    for key, value in supplied.items():
        name = _OPTION_ALIASES.get(key)
        if name is None or name not in known:
            raise UploadConfigurationError(f"Unknown upload option: {key}", option=key)
        normalized[name] = value

    if not normalized:
        return base
    return replace(base, **normalized)
