"""Upstream API configuration model."""

from pydantic import BaseModel, Field

DEFAULT_UPSTREAM_URL = "https://catfact.ninja/fact"


class UpstreamConfig(BaseModel, frozen=True):
    """Where facts come from and which JSON fields carry them."""

    url: str = Field(default=DEFAULT_UPSTREAM_URL, min_length=1)
    text_field: str = Field(default="fact", min_length=1)
    length_field: str = Field(default="length", min_length=1)
