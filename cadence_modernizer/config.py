from __future__ import annotations

"""
Engine configuration: which detection rules are enabled and the default
modernization policy.

The rule catalog itself is fixed; a Config only selects from it. The CLI
builds one from its flags, library callers can pass one to the orchestrator,
and None everywhere means the full catalog with default options.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Sequence

from cadence_modernizer.findings.models import AutoModernizationOptions
from cadence_modernizer.rules.base import DetectionRule
from cadence_modernizer.rules.catalog import RULE_CATALOG, get_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """
    Engine configuration.

    rules: detection rules to run, in catalog order.
    modernization: default policy used by the modernize command.
    """

    rules: Sequence[DetectionRule] = RULE_CATALOG
    modernization: AutoModernizationOptions = field(default_factory=AutoModernizationOptions)

    def without(self, *names: str) -> Config:
        """
        Return a copy with the named rules disabled.

        Raises:
            ValueError: if a name is not in the rule catalog.
        """
        unknown = [n for n in names if get_rule(n) is None]
        if unknown:
            raise ValueError(f"Unknown rule(s): {', '.join(unknown)}")
        disabled = set(names)
        if disabled:
            logger.info("Disabled rule(s): %s", ", ".join(sorted(disabled)))
        return replace(self, rules=tuple(r for r in self.rules if r.name not in disabled))


def get_default_config() -> Config:
    """Return the default configuration: every catalog rule, default policy."""
    return Config()


def get_enabled_rules(config: Config | None = None) -> Sequence[DetectionRule]:
    """
    Return the enabled rules from the given config (or default config).

    Keeps callers simple and gives one place for rule filtering.
    """
    if config is None:
        config = get_default_config()
    return config.rules
