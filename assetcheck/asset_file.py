"""Locate and read an assetlinks.json file, on disk or over HTTPS."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

import requests

from .config import DEFAULT_USER_AGENT, LOCAL_FILE_SUFFIXES, WELL_KNOWN_PATH
from .errors import AssetFileError

logger = logging.getLogger(__name__)


def _is_bare_hostname(reference: str) -> bool:
    if "/" in reference or "\\" in reference or "." not in reference:
        return False
    if Path(reference).suffix.lower() in LOCAL_FILE_SUFFIXES:
        return False
    return not Path(reference).exists()


def normalize_reference(reference: str) -> str:
    """Return the canonical form of a manifest reference.

    - ``http`` is upgraded to ``https``
    - remote references without a path get ``/.well-known/assetlinks.json``
    - a bare hostname becomes ``https://<host>/.well-known/assetlinks.json``
    - explicit paths and local files are returned unchanged

    Normalizing an already normalized reference is a no-op.
    """
    parts = urlsplit(reference)
    scheme = parts.scheme.lower()

    if scheme in ("http", "https"):
        path = parts.path if parts.path not in ("", "/") else WELL_KNOWN_PATH
        return urlunsplit(("https", parts.netloc, path, parts.query, parts.fragment))

    if not scheme and _is_bare_hostname(reference):
        return f"https://{reference}{WELL_KNOWN_PATH}"

    return reference


class AssetFile:
    """A manifest reference, either a local path or an HTTPS URL."""

    def __init__(self, filename: str) -> None:
        if len(filename) < 1:
            raise ValueError("Empty filename")
        self.filename = normalize_reference(filename)
        self.uri = urlsplit(self.filename)

    @property
    def hostname(self) -> str | None:
        """Host serving the manifest, or None for local files.

        ``AssetCheck`` does not read this. Callers that want android-only App
        Links listed under their site pass it on as ``AssetCheck(hostname=...)``.
        """
        if self.is_local():
            return None
        return self.uri.hostname

    def is_local(self) -> bool:
        return self.uri.scheme != "https" or not self.uri.hostname

    def read_local(self) -> bytes:
        """Read the whole file from disk.

        Raises:
            AssetFileError: The file cannot be read or is empty.
        """
        try:
            contents = Path(self.filename).read_bytes()
        except OSError as e:
            raise AssetFileError("Unable to get contents of file", str(e)) from e
        if len(contents) < 1:
            raise AssetFileError("No file contents")
        return contents

    def fetch_remote(self, user_agent: str = DEFAULT_USER_AGENT) -> bytes:
        """Download the manifest with a single GET request.

        Redirects are reported, not followed: the ``Location`` header is
        included in the error message.

        Raises:
            AssetFileError: The request failed, the status is not 200, or the
                response is not JSON.
        """
        logger.debug("GET %s", self.filename)
        try:
            response = requests.get(
                self.filename,
                headers={"User-Agent": user_agent},
                allow_redirects=False,
            )
        except requests.RequestException as e:
            raise AssetFileError(f"Unable to fetch {self.filename}", str(e)) from e

        if response.status_code != 200:
            additional = ""
            location = response.headers.get("location")
            if location:
                additional = f" [ {location} ]"
            raise AssetFileError(f"Bad response code: {response.status_code}{additional}")

        content_type = response.headers.get("content-type", "")
        if not content_type.startswith("application/json"):
            raise AssetFileError(f"Bad response Content-Type: {content_type}")

        return response.content
