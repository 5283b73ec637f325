"""Assemble the user's custom instructions into one prompt section."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from code_context.instructions.loader import RuleFileLoader
from code_context.instructions.models import (
    InstructionDocument,
    InstructionOptions,
    InstructionOrigin,
    RuleFileInstruction,
)
from code_context.languages import language_display_name

logger = logging.getLogger(__name__)


class InstructionAggregator:
    def build(
        self,
        cwd: Path,
        mode: str,
        global_instructions: Optional[str] = None,
        mode_instructions: Optional[str] = None,
        options: Optional[InstructionOptions] = None,
    ) -> str:
        return self.build_document(
            cwd,
            mode,
            global_instructions=global_instructions,
            mode_instructions=mode_instructions,
            options=options,
        ).render()

    def build_document(
        self,
        cwd: Path,
        mode: str,
        global_instructions: Optional[str] = None,
        mode_instructions: Optional[str] = None,
        options: Optional[InstructionOptions] = None,
    ) -> InstructionDocument:
        options = options or InstructionOptions()
        loader = RuleFileLoader(Path(cwd))
        document = InstructionDocument()

        mode_rule = loader.load_mode_rule_file(mode)

        if options.language:
            document.add(self._language_block(options.language))

        global_text = (global_instructions or "").strip()
        if global_text:
            document.add(
                RuleFileInstruction(
                    name="global",
                    origin=InstructionOrigin.GLOBAL,
                    content=f"Global Instructions:\n{global_text}",
                )
            )

        mode_text = (mode_instructions or "").strip()
        if mode_text:
            document.add(
                RuleFileInstruction(
                    name=mode,
                    origin=InstructionOrigin.MODE,
                    content=f"Mode-specific Instructions:\n{mode_text}",
                )
            )

        if mode_rule is not None:
            document.add(mode_rule)

        if options.ignore_instructions:
            document.add(
                RuleFileInstruction(
                    name="ignore",
                    origin=InstructionOrigin.IGNORE,
                    content=options.ignore_instructions,
                )
            )

        for rule_file in loader.load_rule_files():
            document.add(rule_file)

        logger.debug("Assembled %d instruction blocks for mode %r", len(document.blocks), mode)
        return document

    @staticmethod
    def _language_block(code: str) -> RuleFileInstruction:
        name = language_display_name(code)
        return RuleFileInstruction(
            name=code,
            origin=InstructionOrigin.LANGUAGE,
            content=(
                "Language Preference:\n"
                f'You should always speak and think in the "{name}" ({code}) language '
                "unless the user gives you instructions below to do otherwise."
            ),
        )


def build_instructions(
    cwd: Path,
    mode: str,
    global_instructions: Optional[str] = None,
    mode_instructions: Optional[str] = None,
    options: Optional[InstructionOptions] = None,
) -> str:
    return InstructionAggregator().build(
        cwd,
        mode,
        global_instructions=global_instructions,
        mode_instructions=mode_instructions,
        options=options,
    )
