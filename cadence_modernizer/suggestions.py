# Modernization suggestions and educational content for detected legacy patterns.
# Explanation, example and education tables are keyed by pattern kind and are
# read-only module constants.

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence

from cadence_modernizer.findings.models import (
    CodeExample,
    EducationalContent,
    LegacyPattern,
    ModernizationSuggestion,
    PatternKind,
    Severity,
)
from cadence_modernizer.rules.catalog import is_auto_fixable

GENERIC_EXPLANATION = "This pattern should be updated to use modern Cadence 1.0 syntax."

EXPLANATIONS: Mapping[PatternKind, str] = MappingProxyType(
    {
        PatternKind.ACCESS_MODIFIER: (
            "Cadence 1.0 uses explicit access control with access(all), access(self), etc. "
            'instead of the legacy "pub" keyword.'
        ),
        PatternKind.STORAGE_API: (
            "The storage API has been modernized to use account.storage and "
            "account.capabilities for better security and clarity."
        ),
        PatternKind.INTERFACE_CONFORMANCE: (
            "Interface conformance now uses ampersand (&) syntax instead of commas "
            "for better type composition."
        ),
        PatternKind.FUNCTION_SIGNATURE: (
            "Modern function signatures support view modifiers and entitlement-based "
            "access control; accounts are passed as (entitled) &Account references."
        ),
        PatternKind.IMPORT_STATEMENT: (
            "Import statements should use current contract addresses for the target "
            "network, ideally through named imports resolved by flow.json."
        ),
        PatternKind.EVENT_DECLARATION: (
            'Events follow the same access control rules as other declarations; "pub event" '
            "becomes access(all) event."
        ),
    }
)

EXAMPLES: Mapping[PatternKind, CodeExample] = MappingProxyType(
    {
        PatternKind.ACCESS_MODIFIER: CodeExample(
            before="pub fun getValue(): String {\n  return self.value\n}",
            after="access(all) fun getValue(): String {\n  return self.value\n}",
            description='Replace "pub" with explicit access control',
        ),
        PatternKind.STORAGE_API: CodeExample(
            before="account.save(<-vault, to: /storage/vault)",
            after="account.storage.save(<-vault, to: /storage/vault)",
            description="Use the modern storage API",
        ),
        PatternKind.INTERFACE_CONFORMANCE: CodeExample(
            before="resource Vault: Provider, Receiver, Balance",
            after="resource Vault: Provider & Receiver & Balance",
            description="Use ampersand syntax for interface conformance",
        ),
        PatternKind.FUNCTION_SIGNATURE: CodeExample(
            before="prepare(signer: AuthAccount) {\n  signer.save(<-vault, to: /storage/vault)\n}",
            after=(
                "prepare(signer: auth(Storage) &Account) {\n"
                "  signer.storage.save(<-vault, to: /storage/vault)\n}"
            ),
            description="Take an entitled &Account reference instead of AuthAccount",
        ),
    }
)

EDUCATION: Mapping[PatternKind, EducationalContent] = MappingProxyType(
    {
        PatternKind.ACCESS_MODIFIER: EducationalContent(
            pattern=PatternKind.ACCESS_MODIFIER,
            title="Access Control Modernization",
            description=(
                "Cadence 1.0 introduces explicit access control modifiers to replace "
                'the legacy "pub" keyword.'
            ),
            why_modernize=(
                "The new access control system provides better security, clearer intent, "
                "and more granular permissions."
            ),
            benefits=[
                "Explicit access control reduces security vulnerabilities",
                "Better code readability and maintainability",
                "Support for entitlement-based permissions",
                "Compatibility with modern Flow tooling",
            ],
            learn_more_url="https://cadence-lang.org/docs/language/access-control",
        ),
        PatternKind.STORAGE_API: EducationalContent(
            pattern=PatternKind.STORAGE_API,
            title="Storage API Modernization",
            description=(
                "The storage API has been redesigned to use capabilities for better "
                "security and composability."
            ),
            why_modernize=(
                "Modern storage APIs provide better security guarantees and clearer "
                "separation of concerns."
            ),
            benefits=[
                "Capability-based security model",
                "Clearer API surface with account.storage and account.capabilities",
                "Better composability with other contracts",
                "Reduced risk of storage collisions",
            ],
            learn_more_url="https://cadence-lang.org/docs/language/capabilities",
        ),
        PatternKind.INTERFACE_CONFORMANCE: EducationalContent(
            pattern=PatternKind.INTERFACE_CONFORMANCE,
            title="Interface Conformance Syntax",
            description="Interface conformance now uses ampersand (&) syntax for better type composition.",
            why_modernize=(
                "The new syntax better represents the intersection of types and improves "
                "type safety."
            ),
            benefits=[
                "Clearer type composition semantics",
                "Better support for complex type hierarchies",
                "Improved type checking and inference",
                "Consistency with other modern languages",
            ],
        ),
        PatternKind.FUNCTION_SIGNATURE: EducationalContent(
            pattern=PatternKind.FUNCTION_SIGNATURE,
            title="Function Signature Modernization",
            description="Modern function signatures support view modifiers and entitlement-based access.",
            why_modernize=(
                "New function features improve performance and security through better "
                "optimization and access control."
            ),
            benefits=[
                "View functions enable better optimization",
                "Entitlement-based access provides fine-grained security",
                "Clearer function intent and behavior",
                "Better tooling support and analysis",
            ],
        ),
    }
)

SEVERITY_BASE_CONFIDENCE: Mapping[Severity, float] = MappingProxyType(
    {
        Severity.CRITICAL: 0.9,
        Severity.WARNING: 0.7,
        Severity.SUGGESTION: 0.5,
    }
)

# Per-kind confidence used for the aggregate validation confidence.
KIND_CONFIDENCE: Mapping[PatternKind, float] = MappingProxyType(
    {
        PatternKind.ACCESS_MODIFIER: 0.95,
        PatternKind.STORAGE_API: 0.90,
        PatternKind.INTERFACE_CONFORMANCE: 0.85,
        PatternKind.FUNCTION_SIGNATURE: 0.70,
    }
)
DEFAULT_KIND_CONFIDENCE = 0.60


def get_explanation(pattern: LegacyPattern) -> str:
    return EXPLANATIONS.get(pattern.kind, GENERIC_EXPLANATION)


def get_example(pattern: LegacyPattern) -> CodeExample:
    """Canned example for the pattern's kind, or one built from the match itself."""
    example = EXAMPLES.get(pattern.kind)
    if example is not None:
        return example
    return CodeExample(
        before=pattern.original_text,
        after=pattern.modern_replacement,
        description=pattern.suggested_fix,
    )


def suggestion_confidence(pattern: LegacyPattern) -> float:
    """Severity baseline, +0.1 when auto-fixable and -0.2 otherwise, clamped to [0.1, 1.0]."""
    base = SEVERITY_BASE_CONFIDENCE[pattern.severity]
    adjustment = 0.1 if is_auto_fixable(pattern) else -0.2
    return max(0.1, min(1.0, base + adjustment))


def generate_suggestions(patterns: Sequence[LegacyPattern]) -> List[ModernizationSuggestion]:
    """Build exactly one suggestion per pattern, in pattern order."""
    return [
        ModernizationSuggestion(
            pattern=pattern,
            modern_replacement=pattern.modern_replacement,
            explanation=get_explanation(pattern),
            example=get_example(pattern),
            confidence=suggestion_confidence(pattern),
            auto_fixable=is_auto_fixable(pattern),
        )
        for pattern in patterns
    ]


def provide_education(kind: PatternKind | str) -> Optional[EducationalContent]:
    """Educational content for a pattern kind, or None if there is none (or the kind is unknown)."""
    try:
        kind = PatternKind(kind)
    except ValueError:
        return None
    return EDUCATION.get(kind)


def get_educational_content(patterns: Sequence[LegacyPattern]) -> List[EducationalContent]:
    """Education entries for the kinds present, first-seen order, no duplicates."""
    seen: dict[PatternKind, None] = {}
    for pattern in patterns:
        seen.setdefault(pattern.kind, None)
    return [EDUCATION[kind] for kind in seen if kind in EDUCATION]


def validation_confidence(patterns: Sequence[LegacyPattern]) -> float:
    """Mean per-kind confidence over all patterns; 1.0 when there are none."""
    if not patterns:
        return 1.0
    scores = [KIND_CONFIDENCE.get(p.kind, DEFAULT_KIND_CONFIDENCE) for p in patterns]
    return sum(scores) / len(scores)
