"""Parse conventional ESLint config files without running ESLint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from code_context.constants import PACKAGE_JSON_ESLINT_KEY, PACKAGE_JSON_FILENAME
from code_context.utils import read_json_safe, read_yaml_safe

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")
_SCRIPT_SUFFIXES = (".js", ".cjs", ".mjs")


def parse_config_file(path: Path) -> dict[str, Any] | None:
    try:
        payload = _load(path)
    except (OSError, ValueError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def _load(path: Path) -> Any:
    if path.name == PACKAGE_JSON_FILENAME:
        return _load_package_json(path)
    if path.suffix in _SCRIPT_SUFFIXES:
        # evaluating JS config needs ESLint itself
        logger.debug("Skipping script config %s", path)
        return None
    if path.suffix in _YAML_SUFFIXES:
        return _checked(path, *read_yaml_safe(path))
    if path.suffix == ".json":
        return _checked(path, *read_json_safe(path))

    # legacy extensionless .eslintrc: JSON or YAML
    payload, error = read_json_safe(path)
    if error is None:
        return payload
    return _checked(path, *read_yaml_safe(path))


def _load_package_json(path: Path) -> Any:
    payload = _checked(path, *read_json_safe(path))
    if not isinstance(payload, dict):
        return None
    return payload.get(PACKAGE_JSON_ESLINT_KEY)


def _checked(path: Path, payload: Any, error: str | None) -> Any:
    if error is not None:
        logger.debug("Cannot parse %s: %s", path, error)
        return None
    return payload
