"""assetcheck: validate Digital Asset Links manifests.

Checks an assetlinks.json file against its schema and reports the Smart Lock
and App Links associations it declares.
"""

__version__ = "0.1.0"

from .asset_file import AssetFile, normalize_reference
from .associations import Associations, Finding, collect_associations, summarize
from .checker import AssetCheck
from .config import LOG_DEBUG, LOG_INFO, LOG_SILENT
from .validators.manifest import ValidationIssue, parse_manifest, validate_manifest

__all__ = [
    "AssetCheck",
    "AssetFile",
    "Associations",
    "Finding",
    "LOG_DEBUG",
    "LOG_INFO",
    "LOG_SILENT",
    "ValidationIssue",
    "collect_associations",
    "normalize_reference",
    "parse_manifest",
    "summarize",
    "validate_manifest",
]
