"""Discover and read root-level rule files and rule directories."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Optional, Sequence

from code_context.constants import MODE_RULE_FILE_PREFIX, RULE_FILES
from code_context.errors import RuleFileReadError
from code_context.instructions.models import (
    InstructionOrigin,
    RuleFileInstruction,
    RuleSource,
    RuleSourceKind,
)

logger = logging.getLogger(__name__)

# absence-like errors; anything else is an environment problem
_MISSING_ERRORS = (FileNotFoundError, IsADirectoryError, NotADirectoryError)


def mode_rule_filename(mode: str) -> str:
    return f"{MODE_RULE_FILE_PREFIX}{mode}"


class RuleFileLoader:
    def __init__(self, cwd: Path, rule_files: Sequence[str] = RULE_FILES) -> None:
        self._cwd = Path(cwd)
        self._rule_files = tuple(rule_files)

    @property
    def cwd(self) -> Path:
        return self._cwd

    def resolve_source(self, name: str) -> Optional[RuleSource]:
        path = self._cwd / name
        try:
            mode = path.stat().st_mode
        except _MISSING_ERRORS:
            return None
        except OSError as exc:
            raise RuleFileReadError(path, str(exc)) from exc

        if stat.S_ISDIR(mode):
            return RuleSource(name=name, path=path, kind=RuleSourceKind.DIRECTORY_TREE)
        if stat.S_ISREG(mode):
            return RuleSource(name=name, path=path, kind=RuleSourceKind.SINGLE_FILE)
        return None

    def read(self, name: str) -> str:
        """Return the labelled block for ``name`` or an empty string."""
        source = self.resolve_source(name)
        if source is None:
            return ""
        if source.kind == RuleSourceKind.DIRECTORY_TREE:
            return self._read_directory(source)
        return self._read_single(source)

    def load_rule_files(self) -> list[RuleFileInstruction]:
        instructions: list[RuleFileInstruction] = []
        for name in self._rule_files:
            content = self.read(name)
            if content:
                instructions.append(
                    RuleFileInstruction(name=name, origin=InstructionOrigin.RULE_FILE, content=content)
                )
        return instructions

    def load_mode_rule_file(self, mode: str) -> Optional[RuleFileInstruction]:
        if not mode:
            return None
        name = mode_rule_filename(mode)
        content = self.read(name)
        if not content:
            return None
        return RuleFileInstruction(
            name=name,
            origin=InstructionOrigin.MODE_RULE_FILE,
            content=f"# Rules from {name}:\n{content}",
        )

    def _read_single(self, source: RuleSource) -> str:
        content = read_text_or_empty(source.path)
        if not content:
            return ""
        return (
            f"# {source.name}\n\n"
            f"The following is provided by a root-level {source.name} file where the user has "
            f"specified instructions for this working directory ({self._cwd.as_posix()})\n\n"
            f"{content}"
        )

    def _read_directory(self, source: RuleSource) -> str:
        blocks: list[str] = []
        for file_path in _walk_files(source.path):
            content = read_text_or_empty(file_path)
            if content:
                blocks.append(f"{file_path.resolve()}:\n{content}")
        if not blocks:
            logger.debug("No rule content under %s", source.path)
            return ""
        joined = "\n\n".join(blocks)
        return (
            f"# {source.name}/\n\n"
            f"The following is provided by a root-level {source.name}/ directory where the user has "
            f"specified instructions for this working directory ({self._cwd.as_posix()})\n\n"
            f"{joined}"
        )


def read_text_or_empty(path: Path) -> str:
    """Read and trim ``path``; missing files read as empty, other I/O errors raise."""
    try:
        return path.read_text(encoding="utf-8", errors="replace").strip()
    except _MISSING_ERRORS:
        return ""
    except OSError as exc:
        raise RuleFileReadError(path, str(exc)) from exc


def load_rule_files(cwd: Path) -> str:
    return "\n\n".join(item.content for item in RuleFileLoader(cwd).load_rule_files())


def _walk_files(root: Path) -> list[Path]:
    def _on_error(exc: OSError) -> None:
        if isinstance(exc, _MISSING_ERRORS):
            return
        raise RuleFileReadError(Path(exc.filename or root), str(exc)) from exc

    files: list[Path] = []
    for current, _, file_names in os.walk(str(root), onerror=_on_error):
        files.extend(Path(current) / name for name in file_names)
    return sorted(path for path in files if path.is_file())
