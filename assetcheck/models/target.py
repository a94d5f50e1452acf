"""Typed payloads for manifest targets."""

from pydantic import BaseModel, ConfigDict, Field


class WebSite(BaseModel):
    """The site half of a ``web`` target."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    site: str = Field(..., min_length=1)


class AndroidApp(BaseModel):
    """The app half of an ``android_app`` target."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    package_name: str
    sha256_cert_fingerprints: list[str] = Field(..., min_length=1)
