"""HttpFactProvider — fetches one cat fact from the upstream HTTP API."""

from typing import Any

import httpx
from pydantic import ValidationError

from catfact.config.domain.upstream import UpstreamConfig
from catfact.fact.domain.fact import Fact
from catfact.fact.infrastructure.errors import DecodeError, UpstreamError


class HttpFactProvider:
    """Base provider: one GET per fetch, decoded into a Fact.

    Satisfies the FactProvider protocol structurally. A fresh client is opened
    per call; there is no retry, caching, or timeout beyond httpx's default.
    The optional transport exists so tests can substitute httpx.MockTransport.
    """

    def __init__(
        self,
        config: UpstreamConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    async def fetch(self) -> Fact:
        """Fetch and decode a single fact.

        Raises:
            UpstreamError: on transport failure or a non-2xx status.
            DecodeError: if the body is not JSON or lacks a usable text field.
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self._config.url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise UpstreamError(reason=str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise UpstreamError(
                reason=f"upstream returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(reason=f"body is not valid JSON: {exc}") from exc

        return self._decode(payload=payload)

    def _decode(self, payload: Any) -> Fact:
        text_field = self._config.text_field
        length_field = self._config.length_field

        if not isinstance(payload, dict):
            raise DecodeError(reason="body is not a JSON object")

        text = payload.get(text_field)
        if not isinstance(text, str) or not text:
            raise DecodeError(reason=f"missing or empty '{text_field}' field")

        try:
            return Fact(text=text, length=payload.get(length_field))
        except ValidationError as exc:
            raise DecodeError(reason=f"invalid '{length_field}' field") from exc
