"""Exception hierarchy for assetcheck.

Transport, decoding and schema errors end a run. Entry errors only skip the
entry that raised them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .validators.manifest import ValidationIssue


class AssetCheckError(Exception):
    """Base class for every error raised while checking a manifest."""


class AssetFileError(AssetCheckError):
    """The manifest could not be retrieved (local read or HTTP request)."""

    def __init__(self, message: str, detail: Any = None) -> None:
        super().__init__(message)
        self.detail = detail


class ManifestParseError(AssetCheckError):
    """The manifest bytes are not a usable JSON document."""


class ByteOrderMarkError(ManifestParseError):
    """The manifest starts with a byte order mark."""


class NoDataError(ManifestParseError):
    """The manifest parsed but holds no entries."""


class SchemaValidationError(AssetCheckError):
    """The manifest does not match the assetlinks schema."""

    def __init__(self, message: str, errors: list[ValidationIssue]) -> None:
        super().__init__(message)
        self.errors = errors


class EntryError(AssetCheckError):
    """A single manifest entry cannot be interpreted."""
