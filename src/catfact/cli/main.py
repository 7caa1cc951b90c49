"""CLI entrypoint for catfact — typer app with `fact` and `serve` commands."""

import asyncio
import sys
from pathlib import Path

import structlog
import typer
import uvicorn

from catfact.config.domain.config import AppConfig
from catfact.config.infrastructure.observer import StructlogConfigObserver
from catfact.config.infrastructure.yaml_loader import YamlConfigLoader
from catfact.core.errors import CatFactError
from catfact.fact.infrastructure.factory import build_fact_provider
from catfact.fact.infrastructure.observer import StructlogFactObserver
from catfact.handler.application.console import ConsoleFactHandler
from catfact.handler.infrastructure.http_handler import create_app

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> AppConfig:
    if config_path is None:
        return AppConfig()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    try:
        return loader.load(path=config_path)
    except CatFactError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to a YAML config file"
)
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


@app.command()
def fact(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Fetch one cat fact and print it. Any failure ends the process."""
    _configure_structlog(log_format=log_format)
    config = _load_config(config_path=config_path)

    provider = build_fact_provider(
        config=config.upstream, observer=StructlogFactObserver()
    )
    handler = ConsoleFactHandler(provider=provider, out=sys.stdout)
    try:
        asyncio.run(handler.run())
    except CatFactError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def serve(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    host: str | None = typer.Option(None, "--host", help="Listen address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Listen port"),
) -> None:
    """Serve GET /catfact over HTTP until interrupted."""
    _configure_structlog(log_format=log_format)
    config = _load_config(config_path=config_path)

    provider = build_fact_provider(
        config=config.upstream, observer=StructlogFactObserver()
    )
    uvicorn.run(
        create_app(provider=provider),
        host=host if host is not None else config.server.host,
        port=port if port is not None else config.server.port,
    )


if __name__ == "__main__":
    app()
