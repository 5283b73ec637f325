"""Resolve the effective ESLint rules of a workspace.

Sources are tried in a fixed order and the first one that yields a non-empty
``rules`` mapping wins; results from different sources are never merged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Sequence

from code_context.constants import DEFAULT_PROBE_FILE, ESLINT_CONFIG_FILES
from code_context.errors import LintProbeError
from code_context.lint.models import LintResolution, RuleConfig, extract_rules
from code_context.lint.parser import parse_config_file
from code_context.lint.probes import EslintCliProbe, IEffectiveConfigProbe

logger = logging.getLogger(__name__)

PROBE_SOURCE = "probe"

ConfigLoader = Callable[[Path], Awaitable[Optional[dict[str, Any]]]]


@dataclass(frozen=True)
class ConfigSource:
    name: str
    load: ConfigLoader


class LintConfigResolver:
    def __init__(
        self,
        probe: Optional[IEffectiveConfigProbe] = None,
        *,
        probe_file: str = DEFAULT_PROBE_FILE,
        config_files: Sequence[str] = ESLINT_CONFIG_FILES,
        use_probe: bool = True,
    ) -> None:
        self._probe = probe if probe is not None else EslintCliProbe()
        self._probe_file = probe_file
        self._config_files = tuple(config_files)
        self._use_probe = use_probe

    def sources(self) -> list[ConfigSource]:
        sources: list[ConfigSource] = []
        if self._use_probe:
            sources.append(ConfigSource(name=PROBE_SOURCE, load=self._load_from_probe))
        for filename in self._config_files:
            sources.append(ConfigSource(name=filename, load=_file_loader(filename)))
        return sources

    async def resolve(self, workspace_path: Path) -> RuleConfig | None:
        resolution = await self.resolve_with_source(workspace_path)
        return resolution.rules if resolution is not None else None

    async def resolve_with_source(self, workspace_path: Path) -> LintResolution | None:
        for source in self.sources():
            rules = extract_rules(await source.load(workspace_path))
            if rules:
                logger.debug("Resolved %d lint rules from %s", len(rules), source.name)
                return LintResolution(rules=rules, source=source.name)
            logger.debug("No lint rules from %s", source.name)
        return None

    async def _load_from_probe(self, workspace_path: Path) -> Optional[dict[str, Any]]:
        try:
            return await self._probe.effective_config(workspace_path, self._probe_file)
        except LintProbeError as exc:
            logger.warning("Unable to compute ESLint configuration: %s", exc)
            return None


def _file_loader(filename: str) -> ConfigLoader:
    async def _load(workspace_path: Path) -> Optional[dict[str, Any]]:
        return parse_config_file(workspace_path / filename)

    return _load
