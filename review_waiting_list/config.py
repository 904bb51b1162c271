"""Configuration for the review waiting list."""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from .condition import Condition

logger = logging.getLogger(__name__)

# GitHub endpoint
GITHUB_API_URL = "https://api.github.com"
GITHUB_GRAPHQL_PATH = "/graphql"
USER_AGENT = "review-waiting-list"
REQUEST_TIMEOUT_S = 30

# One page of search results; no pagination beyond it.
DEFAULT_PAGE_SIZE = 100

# Fields the filter knows how to match
KNOWN_FIELDS = ("label", "reviewer", "author")

# Environment variables read by conditions_from_env, keyed by field
ENV_CONDITION_KEYS = {
    "label": "LABEL",
    "reviewer": "REVIEWER",
    "author": "AUTHOR",
}

EXCLUDE_PREFIX = "-"


class ConfigError(ValueError):
    pass


def _split_values(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _parse_entry(field_name: str, entry: Any) -> Condition:
    if isinstance(entry, Condition):
        return entry
    if isinstance(entry, str):
        return Condition(field_name, _split_values(entry), True)
    if isinstance(entry, (list, tuple, set, frozenset)):
        return Condition(field_name, entry, True)
    if not isinstance(entry, Mapping):
        raise ConfigError(f"Condition '{field_name}' must be a mapping, list or string, got {type(entry).__name__}.")

    values = entry.get("values", [])
    if isinstance(values, str):
        values = _split_values(values)
    elif not isinstance(values, (list, tuple, set, frozenset)):
        raise ConfigError(f"Condition '{field_name}' values must be a list of strings.")
    if not all(isinstance(v, str) for v in values):
        raise ConfigError(f"Condition '{field_name}' values must be a list of strings.")

    include = entry.get("include", True)
    if not isinstance(include, bool):
        raise ConfigError(f"Condition '{field_name}' include must be true or false.")
    return Condition.from_config(field_name, {"values": values, "include": include})


def conditions_from_mapping(mapping: Mapping[str, Any] | None) -> dict[str, Condition]:
    conditions: dict[str, Condition] = {}
    for field_name, entry in (mapping or {}).items():
        if field_name not in KNOWN_FIELDS:
            logger.debug("Condition for unknown field '%s' will not be consulted", field_name)
        try:
            conditions[field_name] = _parse_entry(field_name, entry)
        except ConfigError:
            raise
        except ValueError as e:
            raise ConfigError(str(e)) from e
    return conditions


def conditions_from_env(environ: Mapping[str, str] | None = None) -> dict[str, Condition]:
    """Read LABEL / REVIEWER / AUTHOR; a leading "-" makes the condition exclusive."""
    environ = os.environ if environ is None else environ
    conditions: dict[str, Condition] = {}
    for field_name, key in ENV_CONDITION_KEYS.items():
        raw = (environ.get(key) or "").strip()
        if not raw:
            continue
        include = not raw.startswith(EXCLUDE_PREFIX)
        if not include:
            raw = raw[len(EXCLUDE_PREFIX):]
        conditions[field_name] = Condition(field_name, _split_values(raw), include)
    return conditions
