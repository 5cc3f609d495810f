# Comma-separated interface conformance detection: `resource Vault: A, B` declaration heads.

from __future__ import annotations

import re

from cadence_modernizer.findings.models import PatternKind, Severity
from cadence_modernizer.rules.base import DetectionRule

# Interface names may be qualified (FungibleToken.Receiver).
_TYPE_NAME = r"[A-Z]\w*(?:\.[A-Z]\w*)*"

CONFORMANCE_LIST = re.compile(
    rf"\b(?:resource|struct|contract)(?:\s+interface)?\s+[A-Za-z_]\w*\s*:\s*"
    rf"{_TYPE_NAME}(?:\s*,\s*{_TYPE_NAME})+"
)

_SEPARATOR = re.compile(r"\s*,\s*")


def _join_with_ampersands(matched: str) -> str:
    return _SEPARATOR.sub(" & ", matched)


COMMA_SEPARATED_INTERFACES = DetectionRule(
    name="comma-separated-interfaces",
    pattern=CONFORMANCE_LIST,
    kind=PatternKind.INTERFACE_CONFORMANCE,
    severity=Severity.WARNING,
    description="Comma-separated interface conformance found",
    suggested_fix="Replace commas with ampersands (&)",
    replace=_join_with_ampersands,
    category="Interface Conformance",
)

RULES = (COMMA_SEPARATED_INTERFACES,)
