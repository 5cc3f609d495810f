# Fix planning: categorize patterns, prioritize fixes, estimate time and score risk.

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from cadence_modernizer.detector import detect_legacy_patterns
from cadence_modernizer.findings.models import (
    Effort,
    FixPlan,
    Impact,
    LegacyPattern,
    PatternCategory,
    PatternKind,
    PrioritizedFix,
    RiskLevel,
    Severity,
)
from cadence_modernizer.rules.base import DetectionRule
from cadence_modernizer.rules.catalog import effort_for_rule

logger = logging.getLogger(__name__)

SEVERITY_WEIGHTS: Mapping[Severity, int] = MappingProxyType(
    {Severity.CRITICAL: 10, Severity.WARNING: 5, Severity.SUGGESTION: 1}
)

SEVERITY_IMPACT: Mapping[Severity, Impact] = MappingProxyType(
    {Severity.CRITICAL: Impact.HIGH, Severity.WARNING: Impact.MEDIUM, Severity.SUGGESTION: Impact.LOW}
)

IMPACT_RANK: Mapping[Impact, int] = MappingProxyType({Impact.HIGH: 3, Impact.MEDIUM: 2, Impact.LOW: 1})
EFFORT_EASE: Mapping[Effort, int] = MappingProxyType({Effort.EASY: 3, Effort.MODERATE: 2, Effort.COMPLEX: 1})

# Minutes per fix.
EFFORT_MINUTES: Mapping[Effort, int] = MappingProxyType(
    {Effort.EASY: 2, Effort.MODERATE: 5, Effort.COMPLEX: 15}
)

CATEGORY_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "Access Control": "Legacy access modifier patterns that need modernization",
        "Storage API": "Outdated storage and capability API usage",
        "Interface Conformance": "Legacy interface inheritance syntax",
        "Function Declarations": "Function signature patterns requiring updates",
        "Variable Declarations": "Variable declaration syntax modernization",
        "Type Declarations": "Composite type declarations using the legacy pub keyword",
        "Event Declarations": "Event declarations using the legacy pub keyword",
        "Account Types": "AuthAccount/PublicAccount types replaced by &Account references",
        "Import Statements": "Import statements that may need verification",
    }
)
DEFAULT_CATEGORY_DESCRIPTION = "Legacy patterns requiring attention"

# Kinds whose rewrites touch storage layout or type structure.
STRUCTURAL_KINDS = frozenset({PatternKind.STORAGE_API, PatternKind.INTERFACE_CONFORMANCE})


def categorize_patterns(patterns: Sequence[LegacyPattern]) -> List[PatternCategory]:
    """
    Group patterns by category label.

    Priority is the sum of severity weights; categories are sorted by priority
    descending, equal priorities keep first-seen order.
    """
    groups: Dict[str, List[LegacyPattern]] = {}
    for pattern in patterns:
        groups.setdefault(pattern.category, []).append(pattern)

    categories = [
        PatternCategory(
            name=name,
            patterns=members,
            priority=sum(SEVERITY_WEIGHTS[p.severity] for p in members),
            description=CATEGORY_DESCRIPTIONS.get(name, DEFAULT_CATEGORY_DESCRIPTION),
        )
        for name, members in groups.items()
    ]
    categories.sort(key=lambda c: c.priority, reverse=True)
    return categories


def prioritize_fixes(patterns: Sequence[LegacyPattern]) -> List[PrioritizedFix]:
    """
    Turn every pattern into a PrioritizedFix.

    Sorted by impact (high first), then ease (easy first); `order` is the
    1-based position after sorting.
    """
    ranked = sorted(
        patterns,
        key=lambda p: (
            IMPACT_RANK[SEVERITY_IMPACT[p.severity]],
            EFFORT_EASE[effort_for_rule(p.rule)],
        ),
        reverse=True,
    )
    return [
        PrioritizedFix(
            pattern=pattern,
            impact=SEVERITY_IMPACT[pattern.severity],
            effort=effort_for_rule(pattern.rule),
            order=position,
        )
        for position, pattern in enumerate(ranked, start=1)
    ]


def estimate_minutes(fixes: Sequence[PrioritizedFix]) -> int:
    return sum(EFFORT_MINUTES[fix.effort] for fix in fixes)


def calculate_risk_level(patterns: Sequence[LegacyPattern]) -> RiskLevel:
    critical = sum(1 for p in patterns if p.severity == Severity.CRITICAL)
    structural = sum(1 for p in patterns if p.kind in STRUCTURAL_KINDS)

    if critical > 10 or structural > 5:
        return RiskLevel.HIGH
    if critical > 5 or structural > 2:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def build_fix_plan(patterns: Sequence[LegacyPattern]) -> FixPlan:
    """Fix plan for an already-detected pattern list."""
    fixes = prioritize_fixes(patterns)
    plan = FixPlan(
        patterns=list(patterns),
        prioritized_fixes=fixes,
        estimated_time=estimate_minutes(fixes),
        risk_level=calculate_risk_level(patterns),
    )
    logger.info(
        "Fix plan: %d fix(es), ~%d min, risk %s",
        len(fixes),
        plan.estimated_time,
        plan.risk_level.value,
    )
    return plan


def generate_fix_plan(source: Any, rules: Optional[Sequence[DetectionRule]] = None) -> FixPlan:
    """Detect patterns in source and plan their remediation."""
    return build_fix_plan(detect_legacy_patterns(source, rules=rules))
