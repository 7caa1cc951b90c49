"""Builds the default provider chain: HTTP provider wrapped in a logging decorator."""

from catfact.config.domain.upstream import UpstreamConfig
from catfact.fact.domain.observer import FactObserver
from catfact.fact.domain.provider import FactProvider
from catfact.fact.infrastructure.http_provider import HttpFactProvider
from catfact.fact.infrastructure.logging_provider import LoggingFactProvider


def build_fact_provider(config: UpstreamConfig, observer: FactObserver) -> FactProvider:
    """Return an HttpFactProvider for *config* decorated with call timing."""
    return LoggingFactProvider(next=HttpFactProvider(config=config), observer=observer)
