# Legacy account type detection: AuthAccount / PublicAccount in signatures.

from __future__ import annotations

import re

from cadence_modernizer.findings.models import PatternKind, Severity
from cadence_modernizer.rules.base import DetectionRule

CATEGORY = "Account Types"

# The right entitlement set depends on what the transaction does with the
# account, so this replacement is only a starting point.
AUTH_ACCOUNT_TYPE = DetectionRule(
    name="auth-account-type",
    pattern=re.compile(r"\bAuthAccount\b"),
    kind=PatternKind.FUNCTION_SIGNATURE,
    severity=Severity.WARNING,
    description="Legacy AuthAccount type found",
    suggested_fix="Replace with an entitled account reference such as auth(Storage) &Account",
    replace=lambda matched: "auth(Storage, Capabilities) &Account",
    category=CATEGORY,
)

PUBLIC_ACCOUNT_TYPE = DetectionRule(
    name="public-account-type",
    pattern=re.compile(r"\bPublicAccount\b"),
    kind=PatternKind.FUNCTION_SIGNATURE,
    severity=Severity.WARNING,
    description="Legacy PublicAccount type found",
    suggested_fix="Replace with &Account",
    replace=lambda matched: "&Account",
    category=CATEGORY,
)

RULES = (AUTH_ACCOUNT_TYPE, PUBLIC_ACCOUNT_TYPE)
