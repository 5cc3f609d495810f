"""Tests for cadence_modernizer.detector: rule scanning, locations and ordering."""

import re
from pathlib import Path

from cadence_modernizer.detector import detect_legacy_patterns
from cadence_modernizer.findings.models import PatternKind, Severity
from cadence_modernizer.rules.access_modifiers import PUB_FUNCTION
from cadence_modernizer.rules.base import DetectionRule

SAMPLE = Path(__file__).parent / "sample.cdc"

EXPECTED_SAMPLE = [
    (1, "address-import"),
    (3, "pub-function"),
    (4, "pub-struct-resource"),
    (6, "pub-variable"),
    (7, "pub-set"),
    (9, "pub-event"),
    (11, "pub-struct-resource"),
    (11, "comma-separated-interfaces"),
    (12, "pub-variable"),
    (18, "pub-function"),
    (23, "pub-function"),
    (23, "auth-account-type"),
    (23, "public-account-type"),
    (30, "account-save"),
    (31, "account-load"),
    (32, "account-copy"),
    (33, "account-borrow"),
    (34, "account-link"),
    (35, "account-get-capability"),
]


def _exploding_rule() -> DetectionRule:
    def replace(matched: str) -> str:
        raise RuntimeError("boom")

    return DetectionRule(
        name="exploding",
        pattern=re.compile(r"pub"),
        kind=PatternKind.ACCESS_MODIFIER,
        severity=Severity.CRITICAL,
        description="always fails",
        suggested_fix="none",
        replace=replace,
        category="Access Control",
    )


def test_single_pub_fun():
    patterns = detect_legacy_patterns("pub fun test() {}")
    assert len(patterns) == 1
    (p,) = patterns
    assert p.kind == PatternKind.ACCESS_MODIFIER
    assert p.severity == Severity.CRITICAL
    assert p.original_text == "pub fun "
    assert "access(all)" in p.modern_replacement
    assert (p.location.line, p.location.column) == (1, 1)
    assert (p.location.start_index, p.location.end_index) == (0, 8)


def test_comma_interface_conformance():
    patterns = detect_legacy_patterns("resource Vault: Provider, Receiver")
    assert len(patterns) == 1
    (p,) = patterns
    assert p.kind == PatternKind.INTERFACE_CONFORMANCE
    assert p.severity == Severity.WARNING
    assert p.modern_replacement == "resource Vault: Provider & Receiver"


def test_empty_and_none_input():
    assert detect_legacy_patterns("") == []
    assert detect_legacy_patterns(None) == []


def test_modern_source_has_no_patterns():
    source = (
        'import "FungibleToken"\n'
        "access(all) contract C {\n"
        "    access(all) fun f(acct: auth(Storage) &Account) {\n"
        "        acct.storage.save(<-create R(), to: /storage/r)\n"
        "    }\n"
        "}\n"
    )
    assert detect_legacy_patterns(source) == []


def test_thousand_lines_sorted_by_line():
    source = "\n".join(f"pub fun test{n}(){{}}" for n in range(1000))
    patterns = detect_legacy_patterns(source)
    assert len(patterns) == 1000
    assert all(p.kind == PatternKind.ACCESS_MODIFIER for p in patterns)
    assert all(p.severity == Severity.CRITICAL for p in patterns)
    lines = [p.location.line for p in patterns]
    assert lines == list(range(1, 1001))


def test_sample_contract_rules_and_lines():
    patterns = detect_legacy_patterns(SAMPLE.read_text(encoding="utf-8"))
    assert [(p.location.line, p.rule) for p in patterns] == EXPECTED_SAMPLE


def test_locations_slice_back_to_original_text():
    text = SAMPLE.read_text(encoding="utf-8")
    for p in detect_legacy_patterns(text):
        assert text[p.location.start_index : p.location.end_index] == p.original_text
        line_text = text.splitlines()[p.location.line - 1]
        assert line_text[p.location.column - 1 :].startswith(p.original_text.split("\n")[0])


def test_storage_call_location():
    text = SAMPLE.read_text(encoding="utf-8")
    save = next(p for p in detect_legacy_patterns(text) if p.rule == "account-save")
    assert save.location.line == 30
    assert save.location.column == 14
    assert save.original_text == "account.save"
    assert save.modern_replacement == "account.storage.save"


def test_same_span_reported_by_both_rules():
    patterns = detect_legacy_patterns("pub resource Vault: A, B {}")
    assert [p.rule for p in patterns] == ["pub-struct-resource", "comma-separated-interfaces"]
    first, second = patterns
    assert first.location.end_index > second.location.start_index


def test_failing_rule_is_contained(caplog):
    rules = (_exploding_rule(), PUB_FUNCTION)
    patterns = detect_legacy_patterns("pub fun f() {}", rules=rules)
    assert [p.rule for p in patterns] == ["pub-function"]
    assert "Rule exploding failed" in caplog.text


def test_custom_rule_subset():
    patterns = detect_legacy_patterns(SAMPLE.read_text(encoding="utf-8"), rules=(PUB_FUNCTION,))
    assert [p.location.line for p in patterns] == [3, 18, 23]


def test_bytes_input():
    patterns = detect_legacy_patterns(b"pub event Ping()")
    assert [p.kind for p in patterns] == [PatternKind.EVENT_DECLARATION]
