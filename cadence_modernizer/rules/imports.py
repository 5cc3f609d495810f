# Address-based import detection: `import Foo from 0x...` statements.

from __future__ import annotations

import re

from cadence_modernizer.findings.models import PatternKind, Severity
from cadence_modernizer.rules.base import DetectionRule

_ADDRESS_IMPORT = re.compile(r"\bimport\s+(\w+)\s+from\s+0x[0-9a-fA-F]+\b")


def _to_named_import(matched: str) -> str:
    m = _ADDRESS_IMPORT.match(matched)
    if m is None:
        return matched
    return f'import "{m.group(1)}"'


ADDRESS_IMPORT = DetectionRule(
    name="address-import",
    pattern=_ADDRESS_IMPORT,
    kind=PatternKind.IMPORT_STATEMENT,
    severity=Severity.SUGGESTION,
    description="Hardcoded contract address in import",
    suggested_fix='Use a named import resolved through flow.json, e.g. import "FungibleToken"',
    replace=_to_named_import,
    category="Import Statements",
)

RULES = (ADDRESS_IMPORT,)
