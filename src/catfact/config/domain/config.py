"""Top-level AppConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from catfact.config.domain.server import ServerConfig
from catfact.config.domain.upstream import UpstreamConfig


class AppConfig(BaseModel, frozen=True):
    """Root configuration aggregate. Every section has working defaults."""

    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
