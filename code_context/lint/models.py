"""Lint configuration data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

RuleValue = Union[str, int, list[Any]]
RuleConfig = dict[str, RuleValue]


@dataclass(frozen=True)
class LintResolution:
    rules: RuleConfig
    source: str


def extract_rules(config: Any) -> RuleConfig | None:
    """Return the non-empty ``rules`` mapping of a config object, if any."""
    if not isinstance(config, dict):
        return None
    rules = config.get("rules")
    if not isinstance(rules, dict) or not rules:
        return None
    return {str(name): value for name, value in rules.items()}
