"""Group manifest entries into Smart Lock and App Links associations.

Collecting and summarizing are kept apart: ``collect_associations`` walks the
entries, ``summarize`` decides what to report from the collected lists alone.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Literal

from .errors import EntryError
from .models.entry import AssetEntry

SMART_LOCK = "Smart Lock"
APP_LINKS = "App Links"


@dataclass
class PlatformTargets:
    """Sites and package names that carry one capability."""

    web: list[str] = field(default_factory=list)
    android: list[str] = field(default_factory=list)


@dataclass
class Associations:
    """Every capability-bearing target in a manifest, split by platform."""

    credentials: PlatformTargets = field(default_factory=PlatformTargets)
    links: PlatformTargets = field(default_factory=PlatformTargets)


@dataclass(frozen=True)
class Finding:
    """One association to report.

    ``current_website`` is set when the manifest names apps only and the
    website is the one the manifest was fetched from.
    """

    kind: Literal["Smart Lock", "App Links"]
    websites: tuple[str, ...]
    apps: tuple[str, ...]
    current_website: bool = False


def collect_associations(entries: Iterable[Any]) -> tuple[Associations, list[str]]:
    """Bucket each entry by capability and platform.

    Args:
        entries: The parsed manifest entries.

    Returns:
        A tuple of (associations, skipped) where ``skipped`` holds the message
        of every entry that could not be interpreted.
    """
    result = Associations()
    skipped: list[str] = []

    for item in entries:
        try:
            entry = AssetEntry(item)
            relation = entry.relation
            target = entry.target
            if target.is_web():
                name = target.get_site()
                platform = "web"
            else:
                name = target.get_android_data().package_name
                platform = "android"
        except EntryError as e:
            skipped.append(str(e))
            continue

        if relation.has_login_creds():
            getattr(result.credentials, platform).append(name)
        if relation.has_handle_all_urls():
            getattr(result.links, platform).append(name)

    return result, skipped


def summarize(associations: Associations, hostname: str | None = None) -> list[Finding]:
    """Decide which associations a manifest establishes.

    Smart Lock and App Links are checked independently, so both may be
    reported. An empty list means there is nothing to display.

    Args:
        associations: Output of ``collect_associations``.
        hostname: Host the manifest was checked for, if known. Used when the
            manifest declares apps for URL handling but no websites.
    """
    findings: list[Finding] = []
    creds = associations.credentials
    links = associations.links

    if creds.web and creds.android:
        findings.append(Finding(SMART_LOCK, tuple(creds.web), tuple(creds.android)))

    if links.web and links.android:
        findings.append(Finding(APP_LINKS, tuple(links.web), tuple(links.android)))
    elif links.android:
        websites = (hostname,) if hostname else ()
        findings.append(
            Finding(APP_LINKS, websites, tuple(links.android), current_website=not hostname)
        )

    return findings
