"""Manifest validation against the assetlinks JSON Schema."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import jsonschema

from ..config import DEFAULT_ENCODING
from ..errors import (
    ByteOrderMarkError,
    ManifestParseError,
    NoDataError,
    SchemaValidationError,
)
from .schema import build_validator

BOM_MESSAGE = "File must be UTF-8 encoded _without_ a byte order mark (BOM)"
NO_DATA_MESSAGE = "No data in file."
SCHEMA_ERRORS_MESSAGE = "Errors validating schema"

# What json.loads reports for text that starts with U+FEFF
_BOM_SIGNATURE = "Unexpected UTF-8 BOM"


@dataclass(frozen=True)
class ValidationIssue:
    """A single schema violation, located by property path."""

    path: str
    message: str
    causes: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


def format_path(path: Iterable[Any]) -> str:
    """Render a jsonschema path as ``instance[1].target``."""
    parts = ["instance"]
    for element in path:
        if isinstance(element, int):
            parts.append(f"[{element}]")
        else:
            parts.append(f".{element}")
    return "".join(parts)


def _path_sort_key(error: jsonschema.ValidationError) -> list[tuple[int, Any]]:
    # Indexes and keys never share a position, but keep them apart anyway
    return [(0, p) if isinstance(p, int) else (1, str(p)) for p in error.absolute_path]


def _to_issue(error: jsonschema.ValidationError) -> ValidationIssue:
    causes = tuple(
        f"{format_path(sub.absolute_path)}: {sub.message}" for sub in error.context or ()
    )
    return ValidationIssue(
        path=format_path(error.absolute_path),
        message=error.message,
        causes=causes,
    )


def validate_manifest(manifest: Any) -> tuple[bool, list[ValidationIssue]]:
    """
    Validate a parsed manifest against the assetlinks schema.

    Every violation is reported, not only the first one.

    Args:
        manifest: The decoded JSON document.

    Returns:
        A tuple of (is_valid, list_of_issues), issues ordered by path.
        If valid, the issues list is empty.
    """
    validator = build_validator()
    errors = sorted(validator.iter_errors(manifest), key=_path_sort_key)
    issues = [_to_issue(e) for e in errors]
    return (len(issues) == 0, issues)


def decode_manifest(raw: bytes | str, encoding: str = DEFAULT_ENCODING) -> Any:
    """Decode and parse manifest bytes, without any schema checks."""
    if isinstance(raw, bytes):
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise ManifestParseError(f"Unable to parse json: {e}") from e
    else:
        text = raw

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        # JSON does not allow a byte order mark
        if e.pos == 0 and e.msg.startswith(_BOM_SIGNATURE):
            raise ByteOrderMarkError(BOM_MESSAGE) from e
        raise ManifestParseError(f"Unable to parse json: {e}") from e


def _is_empty(document: Any) -> bool:
    if document is None:
        return True
    return isinstance(document, (list, dict)) and len(document) < 1


def parse_manifest(raw: bytes | str, encoding: str = DEFAULT_ENCODING) -> list[dict]:
    """Turn raw manifest bytes into a schema-valid list of entries.

    Args:
        raw: The manifest contents, as read from disk or the network.
        encoding: Text encoding of ``raw`` when it is bytes.

    Returns:
        The parsed manifest, still in its JSON shape.

    Raises:
        ByteOrderMarkError: The text starts with a byte order mark.
        ManifestParseError: The text is not valid JSON.
        NoDataError: The document has no top-level entries.
        SchemaValidationError: The document breaks the schema; ``errors``
            lists every violation.
    """
    document = decode_manifest(raw, encoding)

    if _is_empty(document):
        raise NoDataError(NO_DATA_MESSAGE)

    is_valid, issues = validate_manifest(document)
    if not is_valid:
        raise SchemaValidationError(SCHEMA_ERRORS_MESSAGE, issues)

    return document
