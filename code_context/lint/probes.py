"""Effective-config probes backed by the linter's own resolution."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Sequence

from code_context.constants import (
    DEFAULT_ESLINT_COMMAND,
    DEFAULT_PROBE_TIMEOUT,
    PROBE_SUCCESS_EXIT_CODES,
)
from code_context.errors import LintProbeError
from code_context.utils import parse_json_text

logger = logging.getLogger(__name__)


class IEffectiveConfigProbe(ABC):
    @abstractmethod
    async def effective_config(self, workspace_path: Path, file_path: str) -> dict[str, Any]:
        """Return the fully computed config for ``file_path``.

        Raises LintProbeError when the configuration cannot be computed.
        """


class EslintCliProbe(IEffectiveConfigProbe):
    """Run ``eslint --print-config`` inside the workspace."""

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_ESLINT_COMMAND,
        timeout: Optional[float] = DEFAULT_PROBE_TIMEOUT,
    ) -> None:
        if not command:
            raise ValueError("Probe command must not be empty")
        self._command = tuple(command)
        self._timeout = timeout

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def build_args(self, file_path: str) -> list[str]:
        return [*self._command, "--print-config", file_path]

    async def effective_config(self, workspace_path: Path, file_path: str) -> dict[str, Any]:
        args = self.build_args(file_path)
        logger.debug("Running %s in %s", " ".join(args), workspace_path)
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(workspace_path),
            )
        except OSError as exc:
            raise LintProbeError(f"Failed to start {args[0]}: {exc}") from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            _terminate(process)
            await process.wait()
            raise LintProbeError(f"{args[0]} timed out after {self._timeout}s") from exc
        except asyncio.CancelledError:
            _terminate(process)
            await asyncio.shield(process.wait())
            raise

        if stderr:
            logger.debug("%s stderr: %s", args[0], stderr.decode("utf-8", errors="replace").strip())

        code = process.returncode
        logger.debug("%s exited with code %s", args[0], code)
        if code not in PROBE_SUCCESS_EXIT_CODES:
            raise LintProbeError(f"{args[0]} exited with code {code}")

        payload, error = parse_json_text(stdout.decode("utf-8", errors="replace"))
        if error is not None:
            raise LintProbeError(f"Invalid JSON from {args[0]} ({error})")
        if not isinstance(payload, dict):
            raise LintProbeError(f"Unexpected output from {args[0]}")
        return payload


class StaticConfigProbe(IEffectiveConfigProbe):
    """Probe returning a precomputed config; ``None`` behaves like a failed probe."""

    def __init__(self, config: Optional[dict[str, Any]] = None) -> None:
        self._config = config
        self.calls: list[tuple[Path, str]] = []

    async def effective_config(self, workspace_path: Path, file_path: str) -> dict[str, Any]:
        self.calls.append((workspace_path, file_path))
        if self._config is None:
            raise LintProbeError("No computed configuration available")
        return self._config


def _terminate(process: asyncio.subprocess.Process) -> None:
    if process.returncode is not None:
        return
    try:
        process.kill()
    except ProcessLookupError:
        pass
