import asyncio
import json
import logging
from pathlib import Path
from typing import Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from code_context.errors import ContextAppError
from code_context.instructions import (
    InstructionAggregator,
    InstructionOptions,
    load_ignore_instructions,
    load_rule_files,
)
from code_context.lint import EslintCliProbe, LintConfigResolver, format_lint_rules
from code_context.settings import LintSettings, Settings, SettingsRepository
from code_context.tui import ContextConsoleUI
from code_context.workspace import resolve_workspace_path


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("code_context")
    package_logger.handlers = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def _path_argument():
    return click.argument(
        "path",
        required=False,
        type=click.Path(path_type=Path, file_okay=False),
    )


def _load_settings() -> Settings:
    try:
        return SettingsRepository().load()
    except ContextAppError as exc:
        raise click.ClickException(str(exc))


def _workspace(path: Optional[Path]) -> Path:
    return resolve_workspace_path([path] if path else [])


def _build_resolver(lint: LintSettings, no_probe: bool, timeout: Optional[float]) -> LintConfigResolver:
    probe = EslintCliProbe(
        command=lint.command,
        timeout=timeout if timeout is not None else lint.timeout,
    )
    return LintConfigResolver(
        probe,
        probe_file=lint.probe_file,
        use_probe=lint.use_probe and not no_probe,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Resolve lint rules and custom instructions for a workspace."""
    _configure_logging(verbose)
    ctx.obj = {}


@cli.command("lint-rules", help="Resolve the effective ESLint rules of a workspace.")
@_path_argument()
@click.option("--json", "as_json", is_flag=True, help="Print rules as JSON.")
@click.option("--prompt", "as_prompt", is_flag=True, help="Print the prompt text block.")
@click.option("--no-probe", is_flag=True, help="Only parse config files; never run ESLint.")
@click.option("--timeout", type=float, default=None, help="ESLint probe timeout in seconds.")
@click.pass_obj
def lint_rules(
    obj: Dict[str, str],
    path: Optional[Path],
    as_json: bool,
    as_prompt: bool,
    no_probe: bool,
    timeout: Optional[float],
) -> None:
    ui = ContextConsoleUI(Console())
    settings = _load_settings()
    workspace = _workspace(path)
    resolver = _build_resolver(settings.lint, no_probe=no_probe, timeout=timeout)

    resolution = asyncio.run(resolver.resolve_with_source(workspace))

    if as_json:
        click.echo(json.dumps(resolution.rules if resolution else None, indent=2))
    elif as_prompt:
        click.echo(format_lint_rules(resolution.rules if resolution else None))
    elif resolution is None:
        ui.render_no_lint_rules(str(workspace))
    else:
        ui.render_lint_rules(resolution, str(workspace))

    if resolution is None:
        raise click.exceptions.Exit(1)


@cli.command(help="Assemble custom instructions for a mode.")
@_path_argument()
@click.option("--mode", default="code", show_default=True, help="Mode identifier.")
@click.option("--language", default=None, help="Preferred language code, e.g. fr.")
@click.option("--global", "global_instructions", default=None, help="Global instructions text.")
@click.option("--mode-instructions", default=None, help="Mode-specific instructions text.")
@click.option(
    "--ignore-file/--no-ignore-file",
    default=True,
    show_default=True,
    help="Describe the workspace ignore file in the rules block.",
)
@click.option("--raw", is_flag=True, help="Print the document without decoration.")
@click.pass_obj
def instructions(
    obj: Dict[str, str],
    path: Optional[Path],
    mode: str,
    language: Optional[str],
    global_instructions: Optional[str],
    mode_instructions: Optional[str],
    ignore_file: bool,
    raw: bool,
) -> None:
    ui = ContextConsoleUI(Console())
    settings = _load_settings()
    cwd = _workspace(path)

    try:
        options = InstructionOptions(
            language=language or settings.language,
            ignore_instructions=load_ignore_instructions(cwd) if ignore_file else None,
        )
        document = InstructionAggregator().build(
            cwd,
            mode,
            global_instructions=(
                global_instructions
                if global_instructions is not None
                else settings.global_instructions
            ),
            mode_instructions=(
                mode_instructions
                if mode_instructions is not None
                else settings.instructions_for_mode(mode)
            ),
            options=options,
        )
    except ContextAppError as exc:
        raise click.ClickException(str(exc))

    if raw:
        click.echo(document)
        return
    ui.render_document(f"instructions:{mode}", document, "No custom instructions found.")


@cli.command("rule-files", help="Print the combined root-level rule files.")
@_path_argument()
@click.option("--raw", is_flag=True, help="Print the rules without decoration.")
@click.pass_obj
def rule_files(obj: Dict[str, str], path: Optional[Path], raw: bool) -> None:
    ui = ContextConsoleUI(Console())
    cwd = _workspace(path)
    try:
        content = load_rule_files(cwd)
    except ContextAppError as exc:
        raise click.ClickException(str(exc))

    if raw:
        click.echo(content)
        return
    ui.render_document("rule files", content, "No rule files found.")


def main() -> int:
    try:
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
