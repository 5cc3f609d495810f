"""Unit tests for the detection rules and the rule catalog."""

import pytest

from cadence_modernizer.findings.models import Effort, PatternKind, Severity
from cadence_modernizer.rules.access_modifiers import (
    PUB_FUNCTION,
    PUB_SET,
    PUB_STRUCT_RESOURCE,
    PUB_VARIABLE,
)
from cadence_modernizer.rules.account_types import AUTH_ACCOUNT_TYPE, PUBLIC_ACCOUNT_TYPE
from cadence_modernizer.rules.catalog import (
    AUTO_FIXABLE_RULES,
    MANUAL_REVIEW_RULES,
    RULE_CATALOG,
    effort_for_rule,
    get_rule,
)
from cadence_modernizer.rules.events import PUB_EVENT
from cadence_modernizer.rules.imports import ADDRESS_IMPORT
from cadence_modernizer.rules.interface_conformance import COMMA_SEPARATED_INTERFACES
from cadence_modernizer.rules.storage_api import (
    ACCOUNT_BORROW,
    ACCOUNT_GET_CAPABILITY,
    ACCOUNT_LINK,
    ACCOUNT_LOAD,
    ACCOUNT_SAVE,
)


def _matches(rule, text):
    return [m.group(0) for m in rule.iter_matches(text)]


class TestAccessModifierRules:
    def test_pub_fun_matched_and_replaced(self):
        assert _matches(PUB_FUNCTION, "pub fun test() {}") == ["pub fun "]
        assert PUB_FUNCTION.modernize("pub fun ") == "access(all) fun "

    def test_pub_fun_requires_word_boundary(self):
        assert _matches(PUB_FUNCTION, "epub fun x() {}") == []
        assert _matches(PUB_FUNCTION, "pubfun x() {}") == []

    def test_pub_var_and_let(self):
        text = "pub var balance: UFix64\npub let name: String"
        assert _matches(PUB_VARIABLE, text) == ["pub var ", "pub let "]
        assert PUB_VARIABLE.modernize("pub let ") == "access(all) let "

    def test_pub_set(self):
        assert _matches(PUB_SET, "pub(set) var x: Int") == ["pub(set) "]
        assert PUB_SET.modernize("pub(set) ") == "access(all) "
        assert _matches(PUB_VARIABLE, "pub(set) var x: Int") == []

    def test_pub_composite_declarations(self):
        text = "pub contract C {}\npub resource R {}\npub struct S {}"
        assert _matches(PUB_STRUCT_RESOURCE, text) == ["pub contract ", "pub resource ", "pub struct "]
        assert PUB_STRUCT_RESOURCE.modernize("pub resource ") == "access(all) resource "

    def test_modern_access_not_matched(self):
        text = "access(all) fun f() {}\naccess(all) var x: Int"
        for rule in (PUB_FUNCTION, PUB_VARIABLE, PUB_SET, PUB_STRUCT_RESOURCE):
            assert _matches(rule, text) == []


class TestEventRule:
    def test_pub_event(self):
        assert _matches(PUB_EVENT, "pub event Minted(id: UInt64)") == ["pub event "]
        assert PUB_EVENT.modernize("pub event ") == "access(all) event "
        assert PUB_EVENT.kind == PatternKind.EVENT_DECLARATION


class TestStorageApiRules:
    def test_save_with_and_without_type_arguments(self):
        text = "account.save(<-v, to: /storage/v)\naccount.save<@R>(<-r, to: /storage/r)"
        assert _matches(ACCOUNT_SAVE, text) == ["account.save", "account.save"]
        assert ACCOUNT_SAVE.modernize("account.save") == "account.storage.save"

    def test_self_account_prefix_matched(self):
        assert _matches(ACCOUNT_LOAD, "let v <- self.account.load<@V>(from: /storage/v)") == ["account.load"]

    def test_borrow_goes_to_capabilities(self):
        assert ACCOUNT_BORROW.modernize("account.borrow") == "account.capabilities.borrow"

    def test_not_a_call_not_matched(self):
        assert _matches(ACCOUNT_SAVE, "let saved = account.saveCount") == []
        assert _matches(ACCOUNT_SAVE, "// account.save is gone") == []

    def test_modern_api_not_matched(self):
        text = "account.storage.save(<-v, to: /storage/v)\naccount.capabilities.borrow<&V>(/public/v)"
        assert _matches(ACCOUNT_SAVE, text) == []
        assert _matches(ACCOUNT_BORROW, text) == []

    def test_link_and_get_capability(self):
        assert _matches(ACCOUNT_LINK, "account.link<&V>(/public/v, target: /storage/v)") == ["account.link"]
        assert _matches(ACCOUNT_GET_CAPABILITY, "account.getCapability(/public/v)") == ["account.getCapability"]
        assert ACCOUNT_GET_CAPABILITY.modernize("account.getCapability") == "account.capabilities.get"


class TestInterfaceConformanceRule:
    def test_two_interfaces(self):
        text = "resource Vault: Provider, Receiver"
        assert _matches(COMMA_SEPARATED_INTERFACES, text) == [text]
        assert COMMA_SEPARATED_INTERFACES.modernize(text) == "resource Vault: Provider & Receiver"

    def test_three_qualified_interfaces(self):
        text = "pub resource Vault: FungibleToken.Provider,FungibleToken.Receiver , Balance {"
        (matched,) = _matches(COMMA_SEPARATED_INTERFACES, text)
        assert matched == "resource Vault: FungibleToken.Provider,FungibleToken.Receiver , Balance"
        assert COMMA_SEPARATED_INTERFACES.modernize(matched) == (
            "resource Vault: FungibleToken.Provider & FungibleToken.Receiver & Balance"
        )

    def test_resource_interface_declaration(self):
        text = "pub resource interface Receiver: A, B {"
        assert _matches(COMMA_SEPARATED_INTERFACES, text) == ["resource interface Receiver: A, B"]

    def test_single_or_ampersand_conformance_not_matched(self):
        assert _matches(COMMA_SEPARATED_INTERFACES, "resource Vault: Provider {") == []
        assert _matches(COMMA_SEPARATED_INTERFACES, "resource Vault: Provider & Receiver {") == []

    def test_severity_is_warning(self):
        assert COMMA_SEPARATED_INTERFACES.severity == Severity.WARNING


class TestAccountTypeRules:
    def test_auth_account(self):
        assert _matches(AUTH_ACCOUNT_TYPE, "prepare(signer: AuthAccount) {") == ["AuthAccount"]
        assert "&Account" in AUTH_ACCOUNT_TYPE.modernize("AuthAccount")

    def test_public_account(self):
        assert _matches(PUBLIC_ACCOUNT_TYPE, "fun f(a: PublicAccount)") == ["PublicAccount"]
        assert PUBLIC_ACCOUNT_TYPE.modernize("PublicAccount") == "&Account"

    def test_modern_account_reference_not_matched(self):
        assert _matches(AUTH_ACCOUNT_TYPE, "prepare(signer: auth(Storage) &Account) {") == []


class TestImportRule:
    def test_address_import(self):
        text = "import FungibleToken from 0xf233dcee88fe0abe"
        assert _matches(ADDRESS_IMPORT, text) == [text]
        assert ADDRESS_IMPORT.modernize(text) == 'import "FungibleToken"'
        assert ADDRESS_IMPORT.severity == Severity.SUGGESTION

    def test_named_import_not_matched(self):
        assert _matches(ADDRESS_IMPORT, 'import "FungibleToken"') == []


class TestCatalog:
    def test_rule_names_unique(self):
        names = [r.name for r in RULE_CATALOG]
        assert len(names) == len(set(names))

    def test_allow_and_deny_lists_disjoint_and_known(self):
        names = {r.name for r in RULE_CATALOG}
        assert not AUTO_FIXABLE_RULES & MANUAL_REVIEW_RULES
        assert AUTO_FIXABLE_RULES <= names
        assert MANUAL_REVIEW_RULES <= names

    def test_link_and_interfaces_need_manual_review(self):
        assert "account-link" in MANUAL_REVIEW_RULES
        assert "comma-separated-interfaces" in MANUAL_REVIEW_RULES

    def test_every_pattern_kind_has_a_rule(self):
        kinds = {r.kind for r in RULE_CATALOG}
        assert kinds == set(PatternKind)

    def test_get_rule(self):
        assert get_rule("pub-function") is PUB_FUNCTION
        assert get_rule("no-such-rule") is None

    @pytest.mark.parametrize(
        "name, effort",
        [
            ("account-link", Effort.COMPLEX),
            ("comma-separated-interfaces", Effort.COMPLEX),
            ("pub-set", Effort.MODERATE),
            ("pub-function", Effort.EASY),
            ("unknown-rule", Effort.EASY),
        ],
    )
    def test_effort_for_rule(self, name, effort):
        assert effort_for_rule(name) == effort
