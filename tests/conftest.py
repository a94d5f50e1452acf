"""Pytest fixtures for assetcheck tests."""

import json
from pathlib import Path

import pytest

from assetcheck.config import HANDLE_ALL_URLS, LOGIN_CREDS

FINGERPRINT = (
    "14:6D:E9:83:C5:73:06:50:D8:EE:B9:95:2F:34:FC:64:"
    "16:A0:83:42:E6:1D:BE:A8:8A:04:96:B2:3F:CF:44:E5"
)


@pytest.fixture
def android_entry() -> dict:
    """An app that handles all URLs of the website."""
    return {
        "relation": [HANDLE_ALL_URLS],
        "target": {
            "namespace": "android_app",
            "package_name": "com.example.app",
            "sha256_cert_fingerprints": [FINGERPRINT],
        },
    }


@pytest.fixture
def web_entry() -> dict:
    """A website sharing login credentials."""
    return {
        "relation": [LOGIN_CREDS],
        "target": {"namespace": "web", "site": "https://www.example.com"},
    }


@pytest.fixture
def smart_lock_manifest() -> list[dict]:
    """Website and app sharing login credentials, without URL handling."""
    return [
        {
            "relation": [LOGIN_CREDS],
            "target": {"namespace": "web", "site": "https://www.example.com"},
        },
        {
            "relation": [LOGIN_CREDS],
            "target": {
                "namespace": "android_app",
                "package_name": "com.example.app",
                "sha256_cert_fingerprints": [FINGERPRINT],
            },
        },
    ]


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Return a helper that writes a manifest to a temp assetlinks.json."""

    def _write(content, name: str = "assetlinks.json") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        elif isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content, indent=2))
        return path

    return _write
