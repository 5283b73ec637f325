"""Instruction document data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from code_context.constants import INSTRUCTIONS_BANNER


class RuleSourceKind(str, Enum):
    SINGLE_FILE = "single_file"
    DIRECTORY_TREE = "directory_tree"


class InstructionOrigin(str, Enum):
    LANGUAGE = "language"
    GLOBAL = "global"
    MODE = "mode"
    MODE_RULE_FILE = "mode_rule_file"
    IGNORE = "ignore"
    RULE_FILE = "rule_file"


SECTION_ORDER: tuple[InstructionOrigin, ...] = (
    InstructionOrigin.LANGUAGE,
    InstructionOrigin.GLOBAL,
    InstructionOrigin.MODE,
)
RULES_ORDER: tuple[InstructionOrigin, ...] = (
    InstructionOrigin.MODE_RULE_FILE,
    InstructionOrigin.IGNORE,
    InstructionOrigin.RULE_FILE,
)


@dataclass(frozen=True)
class RuleSource:
    name: str
    path: Path
    kind: RuleSourceKind


@dataclass(frozen=True)
class RuleFileInstruction:
    name: str
    origin: InstructionOrigin
    content: str


@dataclass(frozen=True)
class InstructionOptions:
    language: Optional[str] = None
    ignore_instructions: Optional[str] = None


@dataclass
class InstructionDocument:
    """Blocks are rendered by origin, so insertion order does not matter."""

    blocks: list[RuleFileInstruction] = field(default_factory=list)

    def add(self, block: RuleFileInstruction) -> None:
        if block.content.strip():
            self.blocks.append(block)

    def blocks_for(self, origin: InstructionOrigin) -> list[RuleFileInstruction]:
        return [block for block in self.blocks if block.origin == origin]

    def is_empty(self) -> bool:
        return not self.blocks

    def sections(self) -> list[str]:
        sections = [
            block.content for origin in SECTION_ORDER for block in self.blocks_for(origin)
        ]
        rules = [block.content for origin in RULES_ORDER for block in self.blocks_for(origin)]
        if rules:
            sections.append("Rules:\n\n" + "\n\n".join(rules))
        return sections

    def render(self) -> str:
        sections = self.sections()
        if not sections:
            return ""
        joined = "\n\n".join(sections)
        return f"\n{INSTRUCTIONS_BANNER}\n\n{joined}"
