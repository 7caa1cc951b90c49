"""Structlog implementation of the FactObserver port."""

import structlog


class StructlogFactObserver:
    """Delegates fact domain events to structlog.

    Satisfies the FactObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def fact_fetch_completed(
        self, stage: str, duration_ms: float, text_length: int
    ) -> None:
        self._log.info(
            "fact.fetch_completed",
            stage=stage,
            duration_ms=duration_ms,
            text_length=text_length,
        )

    def fact_fetch_failed(self, stage: str, duration_ms: float, reason: str) -> None:
        self._log.error(
            "fact.fetch_failed",
            stage=stage,
            duration_ms=duration_ms,
            reason=reason,
        )
