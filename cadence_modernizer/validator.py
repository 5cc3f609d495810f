"""
Validation orchestrator: the single entry point used by the generation pipeline.

detect -> suggestions -> education -> aggregate confidence -> result, wrapped in
a failure boundary. Callers always get a well-formed ValidationResult; an
internal failure shows up as a degraded result (no patterns, is_valid=False,
confidence 0) rather than an exception.
"""

import logging
import time
from typing import Any, Optional

from cadence_modernizer.config import Config, get_enabled_rules
from cadence_modernizer.detector import detect_legacy_patterns
from cadence_modernizer.findings.models import Severity, ValidationResult
from cadence_modernizer.suggestions import (
    generate_suggestions,
    get_educational_content,
    validation_confidence,
)

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


def validate_source(source: Any, config: Optional[Config] = None) -> ValidationResult:
    """Synchronous validation; never raises."""
    started = time.perf_counter()
    try:
        patterns = detect_legacy_patterns(source, rules=get_enabled_rules(config))
        suggestions = generate_suggestions(patterns)
        education = get_educational_content(patterns)
        confidence = validation_confidence(patterns)
        result = ValidationResult(
            is_valid=not any(p.severity == Severity.CRITICAL for p in patterns),
            has_legacy_patterns=bool(patterns),
            patterns=patterns,
            suggestions=suggestions,
            educational_content=education,
            validation_time=_elapsed_ms(started),
            confidence=confidence,
        )
    except Exception:
        logger.exception("Validation failed; returning degraded result")
        return ValidationResult(
            is_valid=False,
            has_legacy_patterns=False,
            validation_time=_elapsed_ms(started),
            confidence=0.0,
        )

    logger.debug(
        "Validated in %.2f ms: %d pattern(s), valid=%s",
        result.validation_time,
        len(result.patterns),
        result.is_valid,
    )
    return result


async def validate_user_input(source: Any, config: Optional[Config] = None) -> ValidationResult:
    """
    Async entry point for the generation pipeline.

    The work is synchronous and CPU-bound with no suspension point; the
    coroutine form only lets it compose with async callers.
    """
    return validate_source(source, config=config)
