"""Error types raised by fact infrastructure."""

from catfact.core.errors import CatFactError


class FactFetchError(CatFactError):
    """Common base for every failure to produce a Fact."""


class UpstreamError(FactFetchError):
    """Raised on a transport failure or a non-2xx status from the upstream API."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(f"Failed to fetch cat fact: {reason}")


class DecodeError(FactFetchError):
    """Raised when the upstream body is not valid JSON or lacks required fields."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to decode cat fact: {reason}")
