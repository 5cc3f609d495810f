"""
Pattern detection: run every catalog rule over raw source text.

Each rule contributes its own non-overlapping matches; matches from different
rules may cover the same span (e.g. "pub resource Vault: A, B" fires both the
access modifier rule and the interface conformance rule) and are not merged
here. The combined list is stable-sorted by line number only, so matches on
one line keep catalog order, then match order within a rule.
"""

import logging
from typing import Any, List, Optional, Sequence

from cadence_modernizer.context import LineIndex, normalize_source
from cadence_modernizer.findings.models import LegacyPattern
from cadence_modernizer.rules.base import DetectionRule
from cadence_modernizer.rules.catalog import RULE_CATALOG

logger = logging.getLogger(__name__)


def _run_rule(rule: DetectionRule, text: str, index: LineIndex) -> List[LegacyPattern]:
    patterns: List[LegacyPattern] = []
    for match in rule.iter_matches(text):
        matched = match.group(0)
        patterns.append(
            LegacyPattern(
                kind=rule.kind,
                severity=rule.severity,
                description=rule.description,
                suggested_fix=rule.suggested_fix,
                original_text=matched,
                modern_replacement=rule.modernize(matched),
                category=rule.category,
                location=index.location(match.start(), match.end()),
                rule=rule.name,
            )
        )
    return patterns


def detect_legacy_patterns(
    source: Any,
    rules: Optional[Sequence[DetectionRule]] = None,
) -> List[LegacyPattern]:
    """
    Return every legacy pattern found in source, sorted by line.

    Args:
        source: Source text. None, bytes and other non-text input are
                normalized (None -> "").
        rules: Rules to run; defaults to the full catalog.

    A rule that raises while matching or building its replacement is logged
    and contributes no matches; the rest of the scan continues.
    """
    text = normalize_source(source)
    if not text:
        return []
    if rules is None:
        rules = RULE_CATALOG

    index = LineIndex(text)
    patterns: List[LegacyPattern] = []
    for rule in rules:
        try:
            found = _run_rule(rule, text, index)
        except Exception:
            logger.exception("Rule %s failed; treating it as no matches", rule.name)
            continue
        if found:
            logger.debug("Rule %s matched %d time(s)", rule.name, len(found))
        patterns.extend(found)

    patterns.sort(key=lambda p: p.location.line)
    logger.info("Detected %d legacy pattern(s) across %d rule(s)", len(patterns), len(rules))
    return patterns
