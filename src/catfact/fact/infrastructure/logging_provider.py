"""LoggingFactProvider — times a wrapped provider and reports each call."""

import time

from catfact.fact.domain.fact import Fact
from catfact.fact.domain.observer import FactObserver
from catfact.fact.domain.provider import FactProvider


class LoggingFactProvider:
    """Decorator around another FactProvider.

    Emits exactly one observer event per fetch and hands back the wrapped
    provider's Fact, or re-raises its exception object, untouched.
    Does NOT inherit from FactProvider (structural typing via Protocol).
    """

    def __init__(
        self,
        next: FactProvider | None,
        observer: FactObserver,
        stage: str = "fetch",
    ) -> None:
        if next is None:
            raise ValueError(
                "Failed to build logging provider: next provider is required"
            )
        self._next = next
        self._observer = observer
        self._stage = stage

    async def fetch(self) -> Fact:
        start = time.monotonic()
        try:
            fact = await self._next.fetch()
        except BaseException as exc:
            self._observer.fact_fetch_failed(
                stage=self._stage,
                duration_ms=_elapsed_ms(start=start),
                reason=str(exc),
            )
            raise

        self._observer.fact_fetch_completed(
            stage=self._stage,
            duration_ms=_elapsed_ms(start=start),
            text_length=len(fact.text),
        )
        return fact


def _elapsed_ms(start: float) -> float:
    return (time.monotonic() - start) * 1000
