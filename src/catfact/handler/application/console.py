"""ConsoleFactHandler — prints a single fact to a text stream."""

from typing import TextIO

from catfact.fact.domain.fact import Fact
from catfact.fact.domain.provider import FactProvider


class ConsoleFactHandler:
    """One-shot console variant of the request handler.

    Fetch errors are not handled here; the caller decides that a failure is
    fatal for the process.
    """

    def __init__(self, provider: FactProvider, out: TextIO) -> None:
        self._provider = provider
        self._out = out

    async def run(self) -> Fact:
        fact = await self._provider.fetch()
        self._out.write(f"{fact.text}\n")
        self._out.flush()
        return fact
