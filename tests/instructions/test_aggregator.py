"""Tests for custom instruction assembly."""

from pathlib import Path

import pytest

from code_context.constants import INSTRUCTIONS_BANNER
from code_context.errors import RuleFileReadError
from code_context.instructions.aggregator import InstructionAggregator, build_instructions
from code_context.instructions.models import (
    InstructionDocument,
    InstructionOptions,
    InstructionOrigin,
    RuleFileInstruction,
)


def test_empty_inputs_build_empty_string(workspace: Path) -> None:
    assert build_instructions(workspace, "code") == ""
    assert build_instructions(workspace, "code", "  \n", "\t", InstructionOptions()) == ""


def test_language_only(workspace: Path) -> None:
    result = build_instructions(workspace, "code", options=InstructionOptions(language="fr"))

    assert result == (
        f"\n{INSTRUCTIONS_BANNER}\n\n"
        "Language Preference:\n"
        'You should always speak and think in the "Français" (fr) language '
        "unless the user gives you instructions below to do otherwise."
    )


def test_unknown_language_falls_back_to_code(workspace: Path) -> None:
    result = build_instructions(workspace, "code", options=InstructionOptions(language="xx-YY"))

    assert '"xx-YY" (xx-YY)' in result


def test_banner_header(workspace: Path) -> None:
    result = build_instructions(workspace, "code", global_instructions="Be brief.")

    assert result.startswith("\n====\n\nUSER'S CUSTOM INSTRUCTIONS\n\n")
    assert result.endswith("Global Instructions:\nBe brief.")


def test_instructions_are_trimmed(workspace: Path) -> None:
    result = build_instructions(
        workspace, "code", global_instructions="\n  Global.  \n", mode_instructions=" Mode. "
    )

    assert "Global Instructions:\nGlobal.\n\nMode-specific Instructions:\nMode." in result


def test_section_order(workspace: Path) -> None:
    (workspace / ".clinerules").write_text("Generic rule.", encoding="utf-8")
    (workspace / ".clinerules-code").write_text("Mode rule.", encoding="utf-8")

    result = build_instructions(
        workspace,
        "code",
        global_instructions="Global text.",
        mode_instructions="Mode text.",
        options=InstructionOptions(language="de", ignore_instructions="Ignore text."),
    )

    markers = [
        "Language Preference:",
        "Global Instructions:\nGlobal text.",
        "Mode-specific Instructions:\nMode text.",
        "Rules:\n\n# Rules from .clinerules-code:\n# .clinerules-code\n",
        "Mode rule.",
        "Ignore text.",
        "# .clinerules\n",
        "Generic rule.",
    ]
    positions = [result.index(marker) for marker in markers]
    assert positions == sorted(positions)


def test_rules_block_contents(workspace: Path) -> None:
    (workspace / ".cursorrules").write_text("Cursor rule.", encoding="utf-8")

    result = build_instructions(
        workspace, "ask", options=InstructionOptions(ignore_instructions="Ignore text.")
    )

    cwd = workspace.as_posix()
    assert result == (
        f"\n{INSTRUCTIONS_BANNER}\n\n"
        "Rules:\n\n"
        "Ignore text.\n\n"
        "# .cursorrules\n\n"
        "The following is provided by a root-level .cursorrules file where the user has "
        f"specified instructions for this working directory ({cwd})\n\n"
        "Cursor rule."
    )


def test_mode_rule_file_only_for_active_mode(workspace: Path) -> None:
    (workspace / ".clinerules-architect").write_text("Architect only.", encoding="utf-8")

    assert build_instructions(workspace, "code") == ""
    assert "Architect only." in build_instructions(workspace, "architect")


def test_document_orders_by_origin_not_insertion() -> None:
    document = InstructionDocument()
    document.add(RuleFileInstruction("rules", InstructionOrigin.RULE_FILE, "generic"))
    document.add(RuleFileInstruction("mode", InstructionOrigin.MODE, "mode"))
    document.add(RuleFileInstruction("ignore", InstructionOrigin.IGNORE, "ignore"))
    document.add(RuleFileInstruction("global", InstructionOrigin.GLOBAL, "global"))
    document.add(RuleFileInstruction("mode-file", InstructionOrigin.MODE_RULE_FILE, "mode-file"))
    document.add(RuleFileInstruction("lang", InstructionOrigin.LANGUAGE, "lang"))

    assert document.sections() == [
        "lang",
        "global",
        "mode",
        "Rules:\n\nmode-file\n\nignore\n\ngeneric",
    ]


def test_document_skips_blank_blocks() -> None:
    document = InstructionDocument()
    document.add(RuleFileInstruction("global", InstructionOrigin.GLOBAL, "   "))

    assert document.is_empty()
    assert document.render() == ""


def test_build_is_idempotent(workspace: Path) -> None:
    rules_dir = workspace / ".clinerules"
    rules_dir.mkdir()
    (rules_dir / "one.md").write_text("One", encoding="utf-8")
    (rules_dir / "two.md").write_text("Two", encoding="utf-8")
    aggregator = InstructionAggregator()
    options = InstructionOptions(language="ja")

    first = aggregator.build(workspace, "code", "Global", "Mode", options)
    second = aggregator.build(workspace, "code", "Global", "Mode", options)

    assert first == second


def test_fatal_read_errors_surface(workspace: Path, monkeypatch) -> None:
    target = workspace / ".clinerules-code"
    target.write_text("x", encoding="utf-8")
    original = Path.read_text

    def _read_text(self: Path, *args, **kwargs) -> str:
        if self == target:
            raise PermissionError(13, "Permission denied", str(self))
        return original(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", _read_text)

    with pytest.raises(RuleFileReadError):
        build_instructions(workspace, "code", global_instructions="Global")


def test_ignore_instructions_pass_through_unchanged(workspace: Path) -> None:
    (workspace / ".cursorrules").write_text("Cursor rule.", encoding="utf-8")

    result = build_instructions(
        workspace, "ask", options=InstructionOptions(ignore_instructions="  Ignore text.\n")
    )

    assert "Rules:\n\n  Ignore text.\n\n\n# .cursorrules\n" in result
