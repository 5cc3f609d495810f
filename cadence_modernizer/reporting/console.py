# Rich console output: validation results, fix plans and modernization reports.

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cadence_modernizer.findings.models import (
    EducationalContent,
    FixPlan,
    ModernizationResult,
    PatternCategory,
    ValidationResult,
)

# Severity / impact / risk -> Rich style
SEVERITY_STYLE = {
    "critical": "bold red",
    "warning": "bold yellow",
    "suggestion": "bold blue",
    "high": "bold red",
    "medium": "bold yellow",
    "low": "bold dim",
}

DEFAULT_SEVERITY_STYLE = "bold white"


def _severity_style(severity: str) -> str:
    return SEVERITY_STYLE.get(severity.lower(), DEFAULT_SEVERITY_STYLE)


def _shorten_path(path: str | Path) -> str:
    """Return the path relative to the working directory when possible."""
    p = Path(path)
    try:
        return str(p.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(p)


def print_validation(
    results: Sequence[Tuple[Path, ValidationResult]],
    verbose: bool = False,
    console: Optional[Console] = None,
) -> None:
    """
    Print validation results grouped by file.

    Each file with legacy patterns gets a table (line, column, severity, rule,
    description) followed by the proposed replacements. With verbose, the
    explanation of each suggestion and the education entries are shown too.
    A files summary and a severity summary close the report.
    """
    console = console or Console()

    if not any(r.has_legacy_patterns for _, r in results):
        console.print(
            Panel(
                "[green]No legacy syntax found.[/green]",
                title="Cadence Modernizer",
                border_style="green",
                box=box.ROUNDED,
            )
        )
        if len(results) > 1:
            _print_file_summary_table(results, console)
        return

    for path, result in sorted(results, key=lambda item: str(item[0])):
        if not result.has_legacy_patterns:
            continue

        console.print()
        console.print(Panel(
            f"[bold cyan]{_shorten_path(path)}[/bold cyan]",
            box=box.SIMPLE_HEAD,
            border_style="blue",
            padding=(0, 1),
        ))

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE,
            padding=(0, 1),
            expand=False,
        )
        table.add_column("Line", justify="right", style="dim", width=5)
        table.add_column("Col", justify="right", style="dim", width=4)
        table.add_column("Severity", width=10)
        table.add_column("Rule", width=26)
        table.add_column("Description", style="white")

        for p in result.patterns:
            table.add_row(
                str(p.location.line),
                str(p.location.column),
                Text(p.severity.value.upper(), style=_severity_style(p.severity.value)),
                Text(f"[{p.rule}]", style="dim"),
                p.description,
            )
        console.print(table)

        for p in result.patterns:
            console.print(
                Text.assemble(
                    ("  |-- ", "dim"),
                    (p.original_text.strip(), "red"),
                    ("  ->  ", "dim"),
                    (p.modern_replacement.strip(), "green"),
                )
            )
        console.print()

        if verbose:
            seen_kinds: set[str] = set()
            for s in result.suggestions:
                if s.pattern.kind.value in seen_kinds:
                    continue
                seen_kinds.add(s.pattern.kind.value)
                fix = "auto-fixable" if s.auto_fixable else "manual review"
                console.print(
                    Text.assemble(("  Why: ", "dim"), f"({s.pattern.kind.value}, {fix}) {s.explanation}")
                )
            for content in result.educational_content:
                print_education(content, console=console)

    if len(results) > 1:
        _print_file_summary_table(results, console)

    _print_summary(results, console)


def _print_file_summary_table(
    results: Sequence[Tuple[Path, ValidationResult]],
    console: Console,
) -> None:
    """Print a table of files: legacy-free vs. needing modernization."""
    table = Table(
        title="Files Summary",
        show_header=True,
        header_style="bold cyan",
        box=box.ROUNDED,
        padding=(0, 1),
    )
    table.add_column("File", style="white")
    table.add_column("Status", width=10)
    table.add_column("Patterns", justify="right", width=8)

    legacy = [(p, r) for p, r in results if r.has_legacy_patterns]
    clean = [(p, r) for p, r in results if not r.has_legacy_patterns]

    for p, r in sorted(legacy, key=lambda item: str(item[0])):
        status = Text("INVALID", style="bold red") if not r.is_valid else Text("LEGACY", style="bold yellow")
        table.add_row(_shorten_path(p), status, str(len(r.patterns)))
    for p, _ in sorted(clean, key=lambda item: str(item[0])):
        table.add_row(_shorten_path(p), Text("OK", style="bold green"), "0")

    console.print()
    console.print(Panel(table, border_style="cyan", box=box.ROUNDED))


def _print_summary(results: Sequence[Tuple[Path, ValidationResult]], console: Console) -> None:
    """Print a compact summary of patterns by severity."""
    by_severity: dict[str, int] = {}
    total = 0
    for _, r in results:
        for p in r.patterns:
            by_severity[p.severity.value] = by_severity.get(p.severity.value, 0) + 1
            total += 1

    summary_parts = [f"[bold]{total} pattern{'s' if total != 1 else ''}[/bold]"]
    for sev in ("critical", "warning", "suggestion"):
        if sev in by_severity:
            summary_parts.append(f"[{_severity_style(sev)}]{by_severity[sev]} {sev}[/]")

    console.print()
    console.print(
        Panel(
            " | ".join(summary_parts),
            title="Summary",
            border_style="yellow" if total > 0 else "green",
            box=box.ROUNDED,
        )
    )


def print_fix_plan(
    path: Path,
    plan: FixPlan,
    categories: Sequence[PatternCategory],
    console: Optional[Console] = None,
) -> None:
    """Print the prioritized fixes, categories, time estimate and risk level for one file."""
    console = console or Console()
    console.print()
    console.print(Panel(f"[bold cyan]{_shorten_path(path)}[/bold cyan]", box=box.SIMPLE_HEAD, border_style="blue"))

    if not plan.prioritized_fixes:
        console.print("  [green]Nothing to fix.[/green]")
        return

    table = Table(show_header=True, header_style="bold magenta", box=box.SIMPLE, padding=(0, 1))
    table.add_column("#", justify="right", width=4)
    table.add_column("Impact", width=8)
    table.add_column("Effort", width=9)
    table.add_column("Line", justify="right", style="dim", width=5)
    table.add_column("Rule", width=26)
    table.add_column("Fix", style="white")
    for fix in plan.prioritized_fixes:
        table.add_row(
            str(fix.order),
            Text(fix.impact.value, style=_severity_style(fix.impact.value)),
            fix.effort.value,
            str(fix.pattern.location.line),
            Text(f"[{fix.pattern.rule}]", style="dim"),
            fix.pattern.suggested_fix,
        )
    console.print(table)

    cat_table = Table(title="Categories", show_header=True, header_style="bold cyan", box=box.SIMPLE)
    cat_table.add_column("Category")
    cat_table.add_column("Priority", justify="right")
    cat_table.add_column("Patterns", justify="right")
    cat_table.add_column("Description", style="dim")
    for category in categories:
        cat_table.add_row(category.name, str(category.priority), str(len(category.patterns)), category.description)
    console.print(cat_table)

    risk = plan.risk_level.value
    console.print(
        Panel(
            f"[bold]~{plan.estimated_time} min[/bold] | risk [{_severity_style(risk)}]{risk}[/]",
            title="Estimate",
            border_style="yellow",
            box=box.ROUNDED,
        )
    )


def print_modernization(
    path: Path,
    result: ModernizationResult,
    console: Optional[Console] = None,
) -> None:
    """Print the transformations applied and the warnings left for manual review."""
    console = console or Console()
    console.print()
    console.print(Panel(f"[bold cyan]{_shorten_path(path)}[/bold cyan]", box=box.SIMPLE_HEAD, border_style="blue"))

    for change in result.transformations_applied:
        console.print(Text.assemble(("  [Fixed] ", "green"), change))
    for warning in result.warnings:
        console.print(Text.assemble(("  [Review] ", "yellow"), warning))

    border = "yellow" if result.requires_manual_review else "green"
    console.print(
        Panel(
            f"{len(result.transformations_applied)} applied | {len(result.warnings)} for review | "
            f"confidence {result.confidence:.2f}",
            border_style=border,
            box=box.ROUNDED,
        )
    )


def print_education(content: EducationalContent, console: Optional[Console] = None) -> None:
    """Print one education entry as a panel."""
    console = console or Console()
    lines = [content.description, "", f"[bold]Why modernize:[/bold] {content.why_modernize}", ""]
    lines.extend(f"  - {benefit}" for benefit in content.benefits)
    if content.learn_more_url:
        lines.extend(["", f"[dim]Learn more: {content.learn_more_url}[/dim]"])
    console.print(Panel("\n".join(lines), title=content.title, border_style="cyan", box=box.ROUNDED))
