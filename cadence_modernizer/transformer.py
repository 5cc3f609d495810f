"""
Auto-modernization: rewrite legacy patterns in place, leaving all other bytes intact.

Edits are applied back to front. Each replacement may change the text length,
which would shift the offsets of every match after it; walking the matches in
descending start order means every edit still to come lies strictly before
the ones already made, so its stored offsets remain valid.

Edits are modelled as Splice records folded over the text by apply_splices;
explanation comments are zero-width splices at the start of the edited line
and go through the same fold.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from cadence_modernizer.context import (
    LineIndex,
    comment_spans,
    get_line_indent,
    get_source_span,
    in_spans,
    normalize_source,
)
from cadence_modernizer.detector import detect_legacy_patterns
from cadence_modernizer.findings.models import (
    AutoModernizationOptions,
    LegacyPattern,
    ModernizationResult,
    Severity,
)
from cadence_modernizer.rules.catalog import is_auto_fixable

logger = logging.getLogger(__name__)

EXPLANATION_COMMENT = "// Modernized: {fix}"


@dataclass(frozen=True)
class Splice:
    """Replace text[start:end] with `text`; start == end is an insertion."""

    start: int
    end: int
    text: str


def splice(text: str, start: int, end: int, replacement: str) -> str:
    """Return text with [start, end) replaced by replacement."""
    return text[:start] + replacement + text[end:]


def apply_splices(text: str, splices: Iterable[Splice]) -> str:
    """
    Apply splices in descending (start, end) order.

    At equal start a replacement (end > start) runs before an insertion at the
    same offset, so the insertion lands in front of the replaced text.
    Splices must not overlap.
    """
    for s in sorted(splices, key=lambda s: (s.start, s.end), reverse=True):
        text = splice(text, s.start, s.end, s.text)
    return text


def is_eligible(pattern: LegacyPattern, options: AutoModernizationOptions) -> bool:
    """Severity tier enabled by the policy and rule on the auto-fix allow-list."""
    if pattern.severity == Severity.CRITICAL:
        tier_enabled = options.auto_fix_critical
    elif pattern.severity == Severity.WARNING:
        tier_enabled = options.auto_fix_warnings
    else:
        tier_enabled = False
    return tier_enabled and is_auto_fixable(pattern)


def _manual_review_warning(pattern: LegacyPattern) -> str:
    return f"Manual review required: {pattern.description} at line {pattern.location.line}"


def _splits_insertion(points: List[int], start: int, end: int) -> bool:
    """True if a pending comment insertion falls strictly inside [start, end)."""
    # points is non-increasing; scan from the smallest upwards.
    for point in reversed(points):
        if point > start:
            return point < end
    return False


def modernization_confidence(applied: int, warnings: int) -> float:
    total = applied + warnings
    if total == 0:
        return 1.0
    return max(0.1, applied / total)


def auto_modernize(
    source: Any,
    patterns: Optional[Sequence[LegacyPattern]] = None,
    options: Optional[AutoModernizationOptions] = None,
) -> ModernizationResult:
    """
    Rewrite the eligible legacy patterns in source.

    Args:
        source: Source text (None is treated as "").
        patterns: Patterns detected on exactly this text; detected here when None.
        options: Modernization policy; defaults fix critical patterns only.

    Non-eligible patterns, and patterns left inside comments under
    preserve_comments, become "Manual review required" warnings. An eligible
    pattern overlapping an edit already made (or whose text no longer matches
    its offsets) is skipped with a warning. All of these set
    requires_manual_review.
    """
    text = normalize_source(source)
    if options is None:
        options = AutoModernizationOptions()
    if patterns is None:
        patterns = detect_legacy_patterns(text)

    comments = comment_spans(text) if options.preserve_comments else []
    index = LineIndex(text)

    splices: List[Splice] = []
    applied: List[str] = []
    warnings: List[str] = []
    requires_manual_review = False
    # Start of the leftmost edit made so far; edits must end at or before it.
    frontier = len(text)
    insertion_points: List[int] = []

    ordered = sorted(patterns, key=lambda p: p.location.start_index, reverse=True)
    for pattern in ordered:
        loc = pattern.location

        if comments and in_spans(comments, loc.start_index):
            warnings.append(f"{_manual_review_warning(pattern)} (inside a comment)")
            requires_manual_review = True
            logger.debug("Leaving %s inside comment at line %d", pattern.rule, loc.line)
            continue

        if not is_eligible(pattern, options):
            warnings.append(_manual_review_warning(pattern))
            requires_manual_review = True
            logger.debug("Not auto-fixing %s at line %d", pattern.rule, loc.line)
            continue

        if loc.end_index > frontier or _splits_insertion(insertion_points, loc.start_index, loc.end_index):
            warnings.append(
                f"Skipped overlapping edit: {pattern.description} at line {loc.line}; "
                "manual review required"
            )
            requires_manual_review = True
            logger.warning("Skipping %s at line %d: overlaps a later edit", pattern.rule, loc.line)
            continue

        current = get_source_span(text, loc)
        if current != pattern.original_text:
            warnings.append(
                f"Skipped stale match: {pattern.description} at line {loc.line}; "
                "manual review required"
            )
            requires_manual_review = True
            logger.warning("Skipping %s at line %d: text no longer matches", pattern.rule, loc.line)
            continue

        splices.append(Splice(loc.start_index, loc.end_index, pattern.modern_replacement))
        if options.add_explanation_comments:
            line_start = index.line_start(loc.start_index)
            indent = get_line_indent(text, loc.start_index)
            comment = EXPLANATION_COMMENT.format(fix=pattern.suggested_fix)
            splices.append(Splice(line_start, line_start, f"{indent}{comment}\n"))
            insertion_points.append(line_start)
        frontier = loc.start_index
        applied.append(f"{pattern.description}: {current} → {pattern.modern_replacement}")

    modernized = apply_splices(text, splices)
    logger.info(
        "Modernization applied %d edit(s), %d warning(s)",
        len(applied),
        len(warnings),
    )
    return ModernizationResult(
        original_code=text,
        modernized_code=modernized,
        transformations_applied=applied,
        confidence=modernization_confidence(len(applied), len(warnings)),
        requires_manual_review=requires_manual_review,
        warnings=warnings,
    )
