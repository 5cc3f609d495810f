# Legacy access modifier detection: "pub" and "pub(set)" in front of declarations.

from __future__ import annotations

import re

from cadence_modernizer.findings.models import PatternKind, Severity
from cadence_modernizer.rules.base import DetectionRule

MODERN_ACCESS = "access(all)"

_PUB_PREFIX = re.compile(r"\bpub\s+")


def _replace_pub_prefix(matched: str) -> str:
    # Keep everything after "pub" (keyword and trailing whitespace) as matched.
    return _PUB_PREFIX.sub(f"{MODERN_ACCESS} ", matched, count=1)


def _replace_pub_set(matched: str) -> str:
    return re.sub(r"\bpub\(set\)\s+", f"{MODERN_ACCESS} ", matched, count=1)


PUB_FUNCTION = DetectionRule(
    name="pub-function",
    pattern=re.compile(r"\bpub\s+fun\s+"),
    kind=PatternKind.ACCESS_MODIFIER,
    severity=Severity.CRITICAL,
    description='Legacy "pub fun" declaration found',
    suggested_fix='Replace "pub fun" with "access(all) fun"',
    replace=_replace_pub_prefix,
    category="Function Declarations",
)

PUB_VARIABLE = DetectionRule(
    name="pub-variable",
    pattern=re.compile(r"\bpub\s+(?:var|let)\s+"),
    kind=PatternKind.ACCESS_MODIFIER,
    severity=Severity.CRITICAL,
    description='Legacy "pub var/let" declaration found',
    suggested_fix='Replace "pub var/let" with "access(all) var/let"',
    replace=_replace_pub_prefix,
    category="Variable Declarations",
)

# The setter half of pub(set) has no mechanical equivalent; the rule still
# proposes access(all) but is left for manual review.
PUB_SET = DetectionRule(
    name="pub-set",
    pattern=re.compile(r"\bpub\(set\)\s+"),
    kind=PatternKind.ACCESS_MODIFIER,
    severity=Severity.CRITICAL,
    description='Legacy "pub(set)" modifier found',
    suggested_fix='Replace "pub(set)" with appropriate access control pattern',
    replace=_replace_pub_set,
    category="Access Control",
)

PUB_STRUCT_RESOURCE = DetectionRule(
    name="pub-struct-resource",
    pattern=re.compile(r"\bpub\s+(?:struct|resource|contract)\s+"),
    kind=PatternKind.ACCESS_MODIFIER,
    severity=Severity.CRITICAL,
    description='Legacy "pub struct/resource/contract" declaration found',
    suggested_fix='Replace "pub" with "access(all)"',
    replace=_replace_pub_prefix,
    category="Type Declarations",
)

RULES = (PUB_FUNCTION, PUB_VARIABLE, PUB_SET, PUB_STRUCT_RESOURCE)
