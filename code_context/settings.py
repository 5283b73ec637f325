"""User settings for instruction assembly and lint resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft202012Validator

from code_context.constants import (
    APP_DIRNAME,
    DEFAULT_ESLINT_COMMAND,
    DEFAULT_PROBE_FILE,
    DEFAULT_PROBE_TIMEOUT,
    SETTINGS_FILENAME,
)
from code_context.errors import InvalidSettingsError
from code_context.utils import read_json_safe

SETTINGS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "language": {"type": "string", "minLength": 1},
        "globalInstructions": {"type": "string"},
        "modeInstructions": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "lint": {
            "type": "object",
            "properties": {
                "command": {
                    "type": "array",
                    "items": {"type": "string", "minLength": 1},
                    "minItems": 1,
                },
                "timeout": {"type": ["number", "null"], "exclusiveMinimum": 0},
                "probeFile": {"type": "string", "minLength": 1},
                "useProbe": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class LintSettings:
    command: tuple[str, ...] = DEFAULT_ESLINT_COMMAND
    timeout: Optional[float] = DEFAULT_PROBE_TIMEOUT
    probe_file: str = DEFAULT_PROBE_FILE
    use_probe: bool = True


@dataclass(frozen=True)
class Settings:
    language: Optional[str] = None
    global_instructions: str = ""
    mode_instructions: dict[str, str] = field(default_factory=dict)
    lint: LintSettings = field(default_factory=LintSettings)

    def instructions_for_mode(self, mode: str) -> str:
        return self.mode_instructions.get(mode, "")


def default_settings_root() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / APP_DIRNAME


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


class SettingsRepository:
    def __init__(self, root: Optional[Path] = None) -> None:
        self._root = root or default_settings_root()
        self._validator = Draft202012Validator(SETTINGS_SCHEMA)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def settings_path(self) -> Path:
        return self.root / SETTINGS_FILENAME

    def load(self) -> Settings:
        payload, error = read_json_safe(self.settings_path)
        if error is not None:
            raise InvalidSettingsError(self.settings_path, f"invalid JSON: {error}")
        if payload is None:
            return Settings()

        schema_error = next(iter(self._validator.iter_errors(payload)), None)
        if schema_error is not None:
            raise InvalidSettingsError(self.settings_path, format_schema_error(schema_error))
        return _settings_from_payload(payload)


def _settings_from_payload(payload: dict[str, Any]) -> Settings:
    lint_raw = payload.get("lint", {})
    lint = LintSettings(
        command=tuple(lint_raw.get("command", DEFAULT_ESLINT_COMMAND)),
        timeout=lint_raw.get("timeout", DEFAULT_PROBE_TIMEOUT),
        probe_file=lint_raw.get("probeFile", DEFAULT_PROBE_FILE),
        use_probe=lint_raw.get("useProbe", True),
    )
    return Settings(
        language=payload.get("language"),
        global_instructions=payload.get("globalInstructions", ""),
        mode_instructions=dict(payload.get("modeInstructions", {})),
        lint=lint,
    )
