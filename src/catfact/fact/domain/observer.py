"""FactObserver port — domain events emitted around a fact fetch."""

from typing import Protocol


class FactObserver(Protocol):
    """Observer port for fact domain events.

    Implementations may log to structlog or record for tests.
    """

    def fact_fetch_completed(
        self, stage: str, duration_ms: float, text_length: int
    ) -> None: ...

    def fact_fetch_failed(self, stage: str, duration_ms: float, reason: str) -> None: ...
