"""FactProvider Protocol — structural interface for every provider in a chain."""

from typing import Protocol

from catfact.fact.domain.fact import Fact


class FactProvider(Protocol):
    """Structural interface satisfied by base providers and their decorators.

    Decorators hold a reference to the next FactProvider and expose the same
    `fetch` signature, so any number of them can be stacked.
    """

    async def fetch(self) -> Fact: ...
