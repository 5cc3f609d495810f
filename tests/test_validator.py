"""Tests for the validation orchestrator and its failure boundary."""

import asyncio
from pathlib import Path

import pytest

from cadence_modernizer import validator
from cadence_modernizer.config import get_default_config
from cadence_modernizer.findings.models import PatternKind, Severity
from cadence_modernizer.validator import validate_source, validate_user_input

SAMPLE = Path(__file__).parent / "sample.cdc"


def test_pub_fun_is_invalid():
    result = asyncio.run(validate_user_input("pub fun test() {}"))
    assert result.is_valid is False
    assert result.has_legacy_patterns is True
    assert len(result.patterns) == 1
    assert result.patterns[0].kind == PatternKind.ACCESS_MODIFIER
    assert result.patterns[0].severity == Severity.CRITICAL
    assert "access(all)" in result.suggestions[0].modern_replacement
    assert [c.pattern for c in result.educational_content] == [PatternKind.ACCESS_MODIFIER]
    assert result.confidence == pytest.approx(0.95)


def test_warnings_only_is_valid():
    result = asyncio.run(validate_user_input("resource Vault: Provider, Receiver"))
    assert result.is_valid is True
    assert result.has_legacy_patterns is True
    (pattern,) = result.patterns
    assert pattern.kind == PatternKind.INTERFACE_CONFORMANCE
    assert pattern.severity == Severity.WARNING
    assert pattern.modern_replacement == "resource Vault: Provider & Receiver"


def test_empty_input():
    result = asyncio.run(validate_user_input(""))
    assert result.is_valid is True
    assert result.has_legacy_patterns is False
    assert result.patterns == []
    assert result.suggestions == []
    assert result.educational_content == []
    assert result.confidence == 1.0
    assert 0.0 <= result.validation_time < 100.0


def test_none_input():
    result = validate_source(None)
    assert result.is_valid is True
    assert result.has_legacy_patterns is False


def test_large_input():
    source = "\n".join(f"pub fun test{n}(){{}}" for n in range(1000))
    result = validate_source(source)
    assert len(result.patterns) == 1000
    assert len(result.suggestions) == 1000
    assert len(result.educational_content) == 1
    assert [p.location.line for p in result.patterns] == list(range(1, 1001))


def test_sample_contract():
    result = validate_source(SAMPLE.read_text(encoding="utf-8"))
    assert result.is_valid is False
    assert len(result.suggestions) == len(result.patterns) == 19
    kinds = [c.pattern for c in result.educational_content]
    assert len(kinds) == len(set(kinds))
    assert 0.0 < result.confidence <= 1.0


def test_disabled_rules_are_not_run():
    config = get_default_config().without("pub-function")
    result = validate_source("pub fun test() {}", config=config)
    assert result.is_valid is True
    assert result.patterns == []


def test_internal_failure_returns_degraded_result(monkeypatch, caplog):
    def broken(patterns):
        raise RuntimeError("suggestion tables unavailable")

    monkeypatch.setattr(validator, "generate_suggestions", broken)
    result = asyncio.run(validate_user_input("pub fun test() {}"))
    assert result.is_valid is False
    assert result.has_legacy_patterns is False
    assert result.patterns == []
    assert result.confidence == 0.0
    assert result.validation_time >= 0.0
    assert "Validation failed" in caplog.text
