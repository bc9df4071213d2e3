"""Request file loading with readable error reporting.

Reads a JSON wall request, validates it against
:class:`WallRequestConfiguration`, and turns file system, JSON and schema
failures into a single :class:`ConfigError` type.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from videowall.application.config.schema import WallRequestConfiguration


class ConfigError(Exception):
    """A request file could not be loaded or validated.

    Attributes:
        message: Human-readable description.
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation.
        path: The request file, when loading from disk.
        details: Per-error records (JSON path and message, or line/column).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Join a pydantic error location into a dotted path.

    Examples:
        >>> _format_json_path(("llm", "timeout_seconds"))
        'llm.timeout_seconds'
        >>> _format_json_path(("parameters", "depth", "[key]"))
        'parameters.depth.[key]'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int) and parts:
            parts[-1] = f"{parts[-1]}[{segment}]"
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Request validation failed:"]
    for detail in details:
        path = detail["path"] or "(root)"
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> WallRequestConfiguration:
    """Validate request data that is already parsed.

    Raises:
        ConfigError: With ``error_type="validation"`` if the data does not
            match the schema.
    """
    try:
        return WallRequestConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> WallRequestConfiguration:
    """Load and validate a wall request from a JSON file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            JSON, or fails schema validation.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Request file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading request file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading request file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in request file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Request file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )

    return load_config_from_dict(data, path=path)
