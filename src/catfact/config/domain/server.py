"""HTTP listener configuration model."""

from pydantic import BaseModel, Field


class ServerConfig(BaseModel, frozen=True):
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
