"""End-to-end: endpoint → logging decorator(s) → HTTP provider → mocked upstream."""

from typing import Any

import httpx
from fastapi.testclient import TestClient

from catfact.config.domain.upstream import UpstreamConfig
from catfact.fact.infrastructure.http_provider import HttpFactProvider
from catfact.fact.infrastructure.logging_provider import LoggingFactProvider
from catfact.handler.infrastructure.http_handler import create_app
from tests.fact.fake_observer import FakeFactObserver

UPSTREAM_URL = "https://facts.example.test/fact"


def _upstream(status_code: int, **response_kwargs: Any) -> HttpFactProvider:
    """Provider whose upstream answers every request with a fresh canned response."""
    return HttpFactProvider(
        config=UpstreamConfig(url=UPSTREAM_URL),
        transport=httpx.MockTransport(
            lambda request: httpx.Response(status_code, **response_kwargs)
        ),
    )


def _serve(provider: HttpFactProvider, observer: FakeFactObserver) -> TestClient:
    return TestClient(
        create_app(provider=LoggingFactProvider(next=provider, observer=observer))
    )


class TestEndToEnd:
    def test_upstream_fact_is_relayed_with_renamed_field(self) -> None:
        observer = FakeFactObserver()
        upstream = _upstream(
            200, json={"fact": "Cats sleep 70% of their lives.", "length": 32}
        )

        response = _serve(upstream, observer).get("/catfact")

        assert response.status_code == 200
        assert response.json() == {
            "text": "Cats sleep 70% of their lives.",
            "length": 32,
        }
        assert len(observer.completed) == 1

    def test_upstream_500_becomes_422(self) -> None:
        observer = FakeFactObserver()
        upstream = _upstream(500, text="internal error")

        response = _serve(upstream, observer).get("/catfact")

        assert response.status_code == 422
        error = response.json()["error"]
        assert error.startswith("Failed to fetch cat fact")
        assert "500" in error
        assert observer.failed[0].reason == error

    def test_upstream_non_json_becomes_422(self) -> None:
        observer = FakeFactObserver()
        upstream = _upstream(200, content=b"not json")

        response = _serve(upstream, observer).get("/catfact")

        assert response.status_code == 422
        assert response.json()["error"].startswith("Failed to decode cat fact")
        assert len(observer.failed) == 1

    async def test_two_chained_decorators_log_twice_and_return_undecorated_result(
        self,
    ) -> None:
        observer = FakeFactObserver()
        upstream = _upstream(200, json={"fact": "Cats purr at 25 Hz.", "length": 19})
        chain = LoggingFactProvider(
            next=LoggingFactProvider(next=upstream, observer=observer, stage="inner"),
            observer=observer,
            stage="outer",
        )

        decorated = await chain.fetch()
        undecorated = await upstream.fetch()

        assert decorated == undecorated
        assert len(observer.events) == 2
        inner_event, outer_event = observer.completed
        assert inner_event.duration_ms >= 0
        assert outer_event.duration_ms >= inner_event.duration_ms

    def test_unparseable_upstream_url_becomes_422(self) -> None:
        observer = FakeFactObserver()
        upstream = HttpFactProvider(
            config=UpstreamConfig(url="http://facts.example.test:99999/fact"),
            transport=httpx.MockTransport(lambda request: httpx.Response(200)),
        )

        response = _serve(upstream, observer).get("/catfact")

        assert response.status_code == 422
        assert response.json()["error"].startswith("Failed to fetch cat fact")
        assert len(observer.failed) == 1
