"""Fact value object — one cat fact as relayed to clients."""

from pydantic import BaseModel, Field


class Fact(BaseModel, frozen=True):
    """Immutable value object built fresh from each upstream response.

    `length` is whatever the upstream reported; it is not checked against
    the actual length of `text`.
    """

    text: str = Field(min_length=1)
    length: int | None = None
