# Legacy event declaration detection: "pub event" declarations.

from __future__ import annotations

import re

from cadence_modernizer.findings.models import PatternKind, Severity
from cadence_modernizer.rules.access_modifiers import MODERN_ACCESS
from cadence_modernizer.rules.base import DetectionRule


def _replace_pub_event(matched: str) -> str:
    return re.sub(r"\bpub\s+", f"{MODERN_ACCESS} ", matched, count=1)


PUB_EVENT = DetectionRule(
    name="pub-event",
    pattern=re.compile(r"\bpub\s+event\s+"),
    kind=PatternKind.EVENT_DECLARATION,
    severity=Severity.CRITICAL,
    description='Legacy "pub event" declaration found',
    suggested_fix='Replace "pub event" with "access(all) event"',
    replace=_replace_pub_event,
    category="Event Declarations",
)

RULES = (PUB_EVENT,)
