"""Check an assetlinks.json file and report the associations it declares."""

from __future__ import annotations

import json
import logging
from typing import Any

from .asset_file import AssetFile
from .associations import Finding, collect_associations, summarize
from .config import DEFAULT_ENCODING, DEFAULT_USER_AGENT, LOG_DEBUG, LOG_INFO, LOG_SILENT
from .errors import AssetCheckError, AssetFileError, SchemaValidationError
from .validators.manifest import parse_manifest

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class AssetCheck:
    """Fetch, validate and summarize one assetlinks.json file.

    Output goes through the ``assetcheck.checker`` logger. ``log_level``
    gates it further: LOG_SILENT drops everything, LOG_INFO shows the
    summary, LOG_DEBUG adds the linked websites and apps.
    """

    def __init__(
        self,
        filename: str,
        log_level: int = LOG_INFO,
        user_agent: str | None = None,
        *,
        hostname: str | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Initialize the checker.

        Args:
            filename: Local path, URL or bare hostname of the manifest.
            log_level: One of LOG_SILENT, LOG_INFO, LOG_DEBUG.
            user_agent: User-Agent header for remote requests.
            hostname: Website the manifest belongs to, listed when the
                manifest names apps but no websites.
            encoding: Text encoding of the manifest.
        """
        self.filename = filename
        self.asset_file = AssetFile(filename)
        self.hostname = hostname
        self.has_errors = False
        self.log_level = log_level
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.encoding = encoding

    def run(self) -> int:
        """Check the manifest and log the report.

        Returns:
            EXIT_OK on success (even with nothing to report), EXIT_FAILURE if
            the file could not be fetched, parsed or validated.
        """
        local = self.asset_file.is_local()
        try:
            if local:
                raw = self.asset_file.read_local()
            else:
                self.log_debug(f"User agent: {self.user_agent}")
                self.log_info(f"URL: {self.asset_file.filename}")
                raw = self.asset_file.fetch_remote(self.user_agent)
        except AssetFileError as e:
            self.err(str(e), e.detail)
            return EXIT_FAILURE

        try:
            data = self.handle_parse_json(raw)
        except AssetCheckError as e:
            prefix = "Errors with file contents: " if local else ""
            self.err(f"{prefix}{e}")
            return EXIT_FAILURE

        self.display_associations(data)
        return EXIT_OK

    def handle_parse_json(self, raw: bytes | str) -> list[dict]:
        """Parse and validate the manifest, logging every schema violation.

        Raises:
            ManifestParseError: The contents are not usable JSON.
            SchemaValidationError: The manifest breaks the schema.
        """
        try:
            return parse_manifest(raw, self.encoding)
        except SchemaValidationError as e:
            for issue in e.errors:
                self.err(str(issue))
                for cause in issue.causes:
                    self.log_debug(f"  - {cause}")
            raise

    def display_associations(self, data: list[Any]) -> list[Finding]:
        """Log the Smart Lock and App Links associations found in ``data``."""
        associations, skipped = collect_associations(data)
        for message in skipped:
            self.err(f"[entry] {message}")

        findings = summarize(associations, self.hostname)
        for finding in findings:
            self.log_info(f"# ✓ {finding.kind}")
            if finding.current_website:
                self.log_debug("## Current website")
            else:
                self.log_debug("## Websites linked:\n- " + "\n- ".join(finding.websites))
            self.log_debug("## To apps:\n- " + "\n- ".join(finding.apps))

        if not findings:
            self.log_info("# No relations to display")
        return findings

    def err(self, msg: str, additional: Any = None) -> None:
        """Log an error, with optional extra context rendered as JSON."""
        self.has_errors = True
        if self.log_level <= LOG_SILENT:
            return
        logger.error(msg)
        if additional is not None:
            logger.error(json.dumps(additional, default=str))

    def log_info(self, msg: str) -> None:
        if self.log_level <= LOG_SILENT:
            return
        logger.info(msg)

    def log_debug(self, msg: str) -> None:
        if self.log_level < LOG_DEBUG:
            return
        logger.debug(msg)
