"""Read-only views over a single assetlinks.json entry.

These classes check for the fields they need on their own, even though the
schema already requires them, so a malformed entry fails alone with an
``EntryError`` instead of taking down the whole run.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ..config import HANDLE_ALL_URLS, LOGIN_CREDS
from ..errors import EntryError
from .target import AndroidApp, WebSite


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in error.errors()
    )


class AssetRelation:
    """The ``relation`` list of an entry."""

    def __init__(self, data: Any) -> None:
        if not data:
            raise EntryError("No relation data")
        if not isinstance(data, list):
            raise EntryError("Relation is not a list")
        self.data = data

    @property
    def capabilities(self) -> list[str]:
        """All relation tokens, including ones this tool does not interpret."""
        return list(self.data)

    def has_login_creds(self) -> bool:
        """True if the entry delegates login credential sharing."""
        return LOGIN_CREDS in self.data

    def has_handle_all_urls(self) -> bool:
        """True if the entry delegates handling of all URLs."""
        return HANDLE_ALL_URLS in self.data


class AssetTarget:
    """The ``target`` object of an entry, either a website or an Android app."""

    def __init__(self, data: Any) -> None:
        if not isinstance(data, dict) or "namespace" not in data:
            raise EntryError("Missing namespace in target")
        self.data = data

    @property
    def namespace(self) -> str:
        return self.data["namespace"]

    def is_web(self) -> bool:
        return self.namespace == "web" and bool(self.get_site())

    def is_android(self) -> bool:
        return self.namespace == "android_app" and self.get_android_data() is not None

    def get_site(self) -> str:
        """Return the site origin of a web target.

        Raises:
            EntryError: The site is missing, empty or not a string.
        """
        if "site" not in self.data:
            raise EntryError("Missing site from target")
        try:
            return WebSite(site=self.data["site"]).site
        except ValidationError as e:
            raise EntryError(f"Invalid site in target: {_describe(e)}") from e

    def get_android_data(self) -> AndroidApp:
        """Return the package name and certificate fingerprints of the app.

        Raises:
            EntryError: A field is missing or has the wrong type.
        """
        if "sha256_cert_fingerprints" not in self.data:
            raise EntryError("Missing android fingerprint from target")
        if "package_name" not in self.data:
            raise EntryError("Missing android package name from target")
        try:
            return AndroidApp(
                package_name=self.data["package_name"],
                sha256_cert_fingerprints=self.data["sha256_cert_fingerprints"],
            )
        except ValidationError as e:
            raise EntryError(f"Invalid android data in target: {_describe(e)}") from e


class AssetEntry:
    """One top-level entry: a relation paired with a target."""

    def __init__(self, data: Any) -> None:
        if not isinstance(data, dict):
            raise EntryError("Entry is not an object")
        self.data = data

        if "relation" not in data:
            raise EntryError("No relation defined")
        self.relation = AssetRelation(data["relation"])

        if "target" not in data:
            raise EntryError("No target defined")
        self.target = AssetTarget(data["target"])
