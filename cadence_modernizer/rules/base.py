# Detection rule type: one legacy syntax shape, its metadata, and its modern replacement.
# Rules are plain immutable data; the detector runs every rule the same way.

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator

from cadence_modernizer.findings.models import PatternKind, Severity


@dataclass(frozen=True)
class DetectionRule:
    """
    A single entry of the rule catalog.

    Fields:
    - name: unique rule identifier (e.g. "pub-function"); effort and
      auto-fix classification are keyed by it
    - pattern: compiled regex matched over raw source text (not an AST)
    - kind: pattern kind used for explanations and education lookups
    - severity: critical / warning / suggestion
    - description, suggested_fix: human text copied onto every match
    - replace: pure function mapping the matched substring to modern text
    - category: label used by the fix planner to group matches
    """

    name: str
    pattern: re.Pattern[str]
    kind: PatternKind
    severity: Severity
    description: str
    suggested_fix: str
    replace: Callable[[str], str]
    category: str

    def iter_matches(self, text: str) -> Iterator[re.Match[str]]:
        """Yield non-overlapping matches of this rule over the whole text, in order."""
        return self.pattern.finditer(text)

    def modernize(self, matched: str) -> str:
        """Return the modern replacement for a substring this rule matched."""
        return self.replace(matched)
