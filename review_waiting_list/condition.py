"""Inclusion/exclusion rules over a single pull request field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .text_rules import normalize


@dataclass(frozen=True)
class Condition:
    field_name: str
    values: frozenset[str]
    include: bool = True

    def __init__(self, field_name: str, values: Iterable[str] = (), include: bool = True) -> None:
        if not isinstance(field_name, str) or not field_name.strip():
            raise ValueError("Condition field name must be a non-empty string.")
        if isinstance(values, str):
            raise ValueError(f"Condition '{field_name}' values must be a list of strings, not a string.")
        object.__setattr__(self, "field_name", field_name.strip())
        object.__setattr__(self, "values", frozenset(normalize(v) for v in values))
        object.__setattr__(self, "include", bool(include))

    @classmethod
    def from_config(cls, field_name: str, entry: Mapping[str, Any]) -> "Condition":
        return cls(field_name, entry.get("values") or (), entry.get("include", True))

    def matches(self, candidate: str) -> bool:
        return normalize(candidate) in self.values

    def evaluate(self, candidates: Iterable[str]) -> bool:
        """True when the candidates pass this rule.

        Inclusive rules need at least one match; exclusive rules reject on any match.
        """
        matched = any(self.matches(c) for c in candidates)
        return matched if self.include else not matched

    def with_values(self, values: Iterable[str]) -> "Condition":
        return Condition(self.field_name, values, self.include)
