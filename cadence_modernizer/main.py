from __future__ import annotations

"""
Typer CLI entry point for the legacy Cadence syntax engine.

Commands:
- validate: detect legacy syntax in a .cdc file or a directory of them; exits 1
  when any critical pattern is present so it can gate a pipeline
- plan: prioritized remediation plan with time estimate and risk level
- modernize: rewrite auto-fixable patterns (print, or --write in place)
- explain: educational content for a pattern kind
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from cadence_modernizer.config import Config, get_default_config, get_enabled_rules
from cadence_modernizer.context import SourceContext, load_contexts
from cadence_modernizer.detector import detect_legacy_patterns
from cadence_modernizer.findings.models import AutoModernizationOptions, PatternKind
from cadence_modernizer.logger import setup_logging
from cadence_modernizer.planner import build_fix_plan, categorize_patterns
from cadence_modernizer.reporting.console import (
    print_education,
    print_fix_plan,
    print_modernization,
    print_validation,
)
from cadence_modernizer.suggestions import provide_education
from cadence_modernizer.transformer import auto_modernize
from cadence_modernizer.traversal import find_cadence_files, is_cadence_file
from cadence_modernizer.validator import validate_source

logger = logging.getLogger(__name__)

app = typer.Typer(help="Cadence Modernizer - detect and rewrite legacy Cadence syntax.")

TARGET_ARGUMENT = typer.Argument(
    ...,
    exists=True,
    readable=True,
    resolve_path=True,
    help="Cadence file or directory to process.",
)


def _collect_cadence_files(target: Path) -> List[Path]:
    """
    Resolve a target path into a list of .cdc files.

    - If target is a .cdc file, return [target]
    - If target is a directory, use traversal.find_cadence_files()
    - Otherwise, raise BadParameter.
    """
    if target.is_file():
        if not is_cadence_file(target):
            raise typer.BadParameter(f"Target file must have .cdc extension, got: {target}")
        return [target]

    if target.is_dir():
        files = find_cadence_files(target)
        if not files:
            logger.warning("No .cdc files found under %s", target)
        return files

    raise typer.BadParameter(f"Target path is neither a file nor a directory: {target}")


def _load(target: Path) -> List[SourceContext]:
    return load_contexts(_collect_cadence_files(target))


def _build_config(disable: Optional[List[str]]) -> Config:
    config = get_default_config()
    if not disable:
        return config
    try:
        return config.without(*disable)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--disable") from exc


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    setup_logging("DEBUG" if verbose else "WARNING")


@app.command()
def validate(
    target: Path = TARGET_ARGUMENT,
    explain: bool = typer.Option(False, "--explain", help="Show explanations and educational content."),
    disable: Optional[List[str]] = typer.Option(None, "--disable", help="Rule name to disable (repeatable)."),
) -> None:
    """Detect legacy syntax; exit code 1 if any critical pattern is found."""
    config = _build_config(disable)
    contexts = _load(target)

    results = [(ctx.path, validate_source(ctx.text, config=config)) for ctx in contexts]
    print_validation(results, verbose=explain)

    if any(not result.is_valid for _, result in results):
        raise typer.Exit(code=1)


@app.command()
def plan(
    target: Path = TARGET_ARGUMENT,
    disable: Optional[List[str]] = typer.Option(None, "--disable", help="Rule name to disable (repeatable)."),
) -> None:
    """Show a prioritized fix plan per file."""
    rules = get_enabled_rules(_build_config(disable))
    for ctx in _load(target):
        patterns = detect_legacy_patterns(ctx.text, rules=rules)
        print_fix_plan(ctx.path, build_fix_plan(patterns), categorize_patterns(patterns))


@app.command()
def modernize(
    target: Path = TARGET_ARGUMENT,
    write: bool = typer.Option(False, "--write", help="Rewrite files in place instead of printing."),
    fix_critical: Optional[bool] = typer.Option(None, "--fix-critical/--no-fix-critical", help="Auto-fix critical patterns."),
    fix_warnings: Optional[bool] = typer.Option(None, "--fix-warnings/--no-fix-warnings", help="Auto-fix warning patterns."),
    preserve_comments: Optional[bool] = typer.Option(
        None, "--preserve-comments/--no-preserve-comments", help="Leave matches inside comments untouched."
    ),
    explain_comments: Optional[bool] = typer.Option(
        None, "--explain-comments/--no-explain-comments", help="Insert a comment above each edit."
    ),
    disable: Optional[List[str]] = typer.Option(None, "--disable", help="Rule name to disable (repeatable)."),
) -> None:
    """Rewrite auto-fixable legacy patterns."""
    config = _build_config(disable)
    rules = get_enabled_rules(config)
    overrides = {
        "auto_fix_critical": fix_critical,
        "auto_fix_warnings": fix_warnings,
        "preserve_comments": preserve_comments,
        "add_explanation_comments": explain_comments,
    }
    options: AutoModernizationOptions = config.modernization.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    for ctx in _load(target):
        patterns = detect_legacy_patterns(ctx.text, rules=rules)
        result = auto_modernize(ctx.text, patterns=patterns, options=options)
        if write:
            print_modernization(ctx.path, result)
            if result.modernized_code != ctx.text:
                ctx.path.write_text(result.modernized_code, encoding="utf-8")
                logger.info("Rewrote %s", ctx.path)
        else:
            typer.echo(result.modernized_code, nl=False)


@app.command()
def explain(
    kind: str = typer.Argument(..., help=f"Pattern kind, one of: {', '.join(k.value for k in PatternKind)}"),
) -> None:
    """Show educational content for a pattern kind."""
    content = provide_education(kind)
    if content is None:
        typer.echo(f"No educational content for pattern kind: {kind}", err=True)
        raise typer.Exit(code=1)
    print_education(content)


def main() -> None:
    """Entry point for `python -m cadence_modernizer.main` and the console script."""
    app()


if __name__ == "__main__":
    main()
