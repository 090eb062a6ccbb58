import json

import pytest

from bera_verifier.extraction.source_code import (
    contract_name_from_path,
    extract_contract_name,
    resolve_contract_name,
)
from bera_verifier.models import NameStrategy


def standard_input(*paths, contract_name=None):
    payload = {"language": "Solidity", "sources": {path: {"content": ""} for path in paths}}
    if contract_name:
        payload["ContractName"] = contract_name
    return json.dumps(payload)


@pytest.mark.parametrize("path, expected", [
    ("contracts/Foo.sol", "Foo"),
    ("Foo.sol", "Foo"),
    ("src/tokens/Bar.t.sol", "Bar.t"),
    ("lib/Makefile", "Makefile"),
])
def test_contract_name_from_path(path, expected):
    assert contract_name_from_path(path) == expected


def test_by_hint_picks_first_matching_key():
    source = standard_input("lib/IERC20.sol", "contracts/Vault.sol", "contracts/VaultLib.sol")
    assert extract_contract_name(source, "Vault") == "contracts/Vault.sol:Vault"


def test_by_hint_prefers_embedded_contract_name():
    source = standard_input("contracts/Foo.sol", contract_name="RealName")
    assert extract_contract_name(source, "Foo") == "contracts/Foo.sol:RealName"


def test_by_hint_without_match_returns_none():
    source = standard_input("contracts/Foo.sol")
    assert extract_contract_name(source, "Missing") is None


def test_by_hint_without_hint_returns_none():
    assert extract_contract_name(standard_input("contracts/Foo.sol"), None) is None


def test_first_key_ignores_hint():
    source = standard_input("lib/Ownable.sol", "contracts/Foo.sol")
    result = extract_contract_name(source, "Foo", NameStrategy.FIRST_KEY)
    assert result == "lib/Ownable.sol:Ownable"


def test_first_key_with_empty_sources_returns_none():
    assert extract_contract_name(standard_input(), None, NameStrategy.FIRST_KEY) is None


@pytest.mark.parametrize("source", [
    "pragma solidity ^0.8.0; contract Foo {}",
    "[1, 2]",
    json.dumps({"language": "Solidity"}),
    json.dumps({"sources": ["contracts/Foo.sol"]}),
])
def test_non_standard_input_returns_none(source):
    assert extract_contract_name(source, "Foo") is None


def test_fallback_chain_uses_first_non_empty():
    assert resolve_contract_name([lambda: "a.sol:A", lambda: "Hint"]) == "a.sol:A"
    assert resolve_contract_name([lambda: None, lambda: "Hint"]) == "Hint"
    assert resolve_contract_name([lambda: None, lambda: ""]) == "Contract"


def test_fallback_chain_stops_at_first_hit():
    calls = []

    def later():
        calls.append("later")
        return "Later"

    assert resolve_contract_name([lambda: "First", later]) == "First"
    assert calls == []
