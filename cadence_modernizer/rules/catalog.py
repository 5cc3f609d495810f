# Rule catalog: the ordered set of detection rules plus the auto-fix and effort tables.
# Everything here is built once at import time and never mutated.

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from cadence_modernizer.findings.models import Effort, LegacyPattern
from cadence_modernizer.rules import (
    access_modifiers,
    account_types,
    events,
    imports,
    interface_conformance,
    storage_api,
)
from cadence_modernizer.rules.base import DetectionRule

# Catalog order is detection order; the detector's stable line sort keeps it
# for matches on the same line.
RULE_CATALOG: Tuple[DetectionRule, ...] = (
    *access_modifiers.RULES,
    *events.RULES,
    *storage_api.RULES,
    *interface_conformance.RULES,
    *account_types.RULES,
    *imports.RULES,
)

RULES_BY_NAME: Mapping[str, DetectionRule] = MappingProxyType(
    {rule.name: rule for rule in RULE_CATALOG}
)

# Rules whose replacement is derived mechanically from the matched text.
AUTO_FIXABLE_RULES = frozenset(
    {
        "pub-function",
        "pub-variable",
        "pub-struct-resource",
        "pub-event",
        "account-save",
        "account-load",
        "account-copy",
        "account-borrow",
        "public-account-type",
    }
)

# Rules that always need a human, whatever the policy says.
MANUAL_REVIEW_RULES = frozenset(
    {
        "account-link",
        "account-get-capability",
        "comma-separated-interfaces",
        "auth-account-type",
    }
)

COMPLEX_RULES = frozenset({"account-link", "comma-separated-interfaces", "auth-account-type"})
MODERATE_RULES = frozenset({"pub-set", "account-get-capability"})


def get_rule(name: str) -> Optional[DetectionRule]:
    """Return the catalog rule with the given name, or None."""
    return RULES_BY_NAME.get(name)


def is_auto_fixable(pattern: LegacyPattern) -> bool:
    """True if the pattern's rule is allow-listed and not on the manual-review list."""
    if pattern.rule in MANUAL_REVIEW_RULES:
        return False
    return pattern.rule in AUTO_FIXABLE_RULES


def effort_for_rule(name: str) -> Effort:
    """Effort classification by rule name; unlisted rules are easy."""
    if name in COMPLEX_RULES:
        return Effort.COMPLEX
    if name in MODERATE_RULES:
        return Effort.MODERATE
    return Effort.EASY
