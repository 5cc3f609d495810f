# Legacy storage API detection: account-level save/load/copy/borrow/link/getCapability calls.

from __future__ import annotations

import re

from cadence_modernizer.findings.models import PatternKind, Severity
from cadence_modernizer.rules.base import DetectionRule

CATEGORY = "Storage API"


def _member_call(member: str) -> re.Pattern[str]:
    """Match `account.<member>` when called, with or without type arguments."""
    return re.compile(rf"\baccount\.{member}\b(?=\s*[<(])")


def _rename_call(member: str, modern: str):
    """Build a replacement that swaps `account.<member>` for `account.<modern>`."""
    legacy = re.compile(rf"account\.{member}\b")

    def replace(matched: str) -> str:
        return legacy.sub(f"account.{modern}", matched, count=1)

    return replace


ACCOUNT_SAVE = DetectionRule(
    name="account-save",
    pattern=_member_call("save"),
    kind=PatternKind.STORAGE_API,
    severity=Severity.CRITICAL,
    description="Legacy account.save() API found",
    suggested_fix="Replace with account.storage.save()",
    replace=_rename_call("save", "storage.save"),
    category=CATEGORY,
)

ACCOUNT_LOAD = DetectionRule(
    name="account-load",
    pattern=_member_call("load"),
    kind=PatternKind.STORAGE_API,
    severity=Severity.CRITICAL,
    description="Legacy account.load() API found",
    suggested_fix="Replace with account.storage.load()",
    replace=_rename_call("load", "storage.load"),
    category=CATEGORY,
)

ACCOUNT_COPY = DetectionRule(
    name="account-copy",
    pattern=_member_call("copy"),
    kind=PatternKind.STORAGE_API,
    severity=Severity.CRITICAL,
    description="Legacy account.copy() API found",
    suggested_fix="Replace with account.storage.copy()",
    replace=_rename_call("copy", "storage.copy"),
    category=CATEGORY,
)

ACCOUNT_BORROW = DetectionRule(
    name="account-borrow",
    pattern=_member_call("borrow"),
    kind=PatternKind.STORAGE_API,
    severity=Severity.CRITICAL,
    description="Legacy account.borrow() API found",
    suggested_fix="Replace with account.capabilities.borrow()",
    replace=_rename_call("borrow", "capabilities.borrow"),
    category=CATEGORY,
)

# link() becomes issue() + publish(); the target path and type cannot be
# recovered from the matched call prefix alone.
ACCOUNT_LINK = DetectionRule(
    name="account-link",
    pattern=_member_call("link"),
    kind=PatternKind.STORAGE_API,
    severity=Severity.CRITICAL,
    description="Legacy account.link() API found",
    suggested_fix="Replace with modern capability-based pattern (capabilities.storage.issue + capabilities.publish)",
    replace=_rename_call("link", "capabilities.storage.issue"),
    category=CATEGORY,
)

ACCOUNT_GET_CAPABILITY = DetectionRule(
    name="account-get-capability",
    pattern=_member_call("getCapability"),
    kind=PatternKind.STORAGE_API,
    severity=Severity.CRITICAL,
    description="Legacy account.getCapability() API found",
    suggested_fix="Replace with account.capabilities.get()",
    replace=_rename_call("getCapability", "capabilities.get"),
    category=CATEGORY,
)

RULES = (
    ACCOUNT_SAVE,
    ACCOUNT_LOAD,
    ACCOUNT_COPY,
    ACCOUNT_BORROW,
    ACCOUNT_LINK,
    ACCOUNT_GET_CAPABILITY,
)
