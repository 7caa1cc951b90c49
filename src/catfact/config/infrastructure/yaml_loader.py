"""YAML config loader — parses, resolves env references, validates, and emits observer events."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from catfact.config.domain.config import AppConfig
from catfact.config.domain.observer import ConfigObserver
from catfact.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

# ${NAME} or ${NAME:-fallback}; the fallback may be empty.
_ENV_REF = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<fallback>[^}]*))?\}"
)


class YamlConfigLoader:
    """Loads, resolves, validates, and returns an AppConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> AppConfig:
        """
        Load, resolve env references, validate, and return an AppConfig.

        An empty file yields the default configuration. Only string values are
        scanned for ``${NAME}`` / ``${NAME:-fallback}`` references.

        Raises:
            ConfigLoadError: if the file does not exist or is not valid YAML.
            MissingEnvVarsError: listing every unset reference without a fallback.
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(resolved=_resolve_env_refs(raw=raw))
        self._observer.config_loaded(
            url=cfg.upstream.url, host=cfg.server.host, port=cfg.server.port
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path=path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc
    return {} if raw is None else raw


def _resolve_env_refs(raw: Any) -> Any:
    """Substitute env references in one walk, then fail once with every unset name."""
    missing: list[str] = []

    def substitute(match: re.Match[str]) -> str:
        name = match.group("name")
        value = os.environ.get(name, match.group("fallback"))
        if value is None:
            if name not in missing:
                missing.append(name)
            return match.group(0)
        return value

    def walk(node: Any) -> Any:
        if isinstance(node, str):
            return _ENV_REF.sub(substitute, node)
        if isinstance(node, list):
            return [walk(item) for item in node]
        if isinstance(node, dict):
            return {key: walk(value) for key, value in node.items()}
        return node

    resolved = walk(raw)
    if missing:
        raise MissingEnvVarsError(missing)
    return resolved


def _build_config(resolved: Any) -> AppConfig:
    try:
        return AppConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
