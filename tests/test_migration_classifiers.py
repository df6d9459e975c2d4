"""Tests for language, VM and transaction model classifiers."""

import pytest

from app.core.migration.classifiers import (
    OTHER,
    is_account_family,
    language_family,
    vm_group,
)


@pytest.mark.parametrize(
    "language,family",
    [
        ("Solidity", "evm-adjacent"),
        ("Cairo", "evm-adjacent"),
        ("Rust", "rust"),
        ("Golang", "go"),
        ("C", "c-family"),
        ("AssemblyScript", "js-family"),
        ("Aptos Move", "move"),
        ("FunC (legacy)", "ton-native"),
        ("OpShin", "cardano-native"),
        ("Compact", "zk-native"),
    ],
)
def test_language_family(language, family):
    assert language_family(language) == family


def test_unknown_language_falls_back_to_other():
    assert language_family("ink!") == OTHER
    assert language_family("") == OTHER
    # Lookups are exact, not case-insensitive
    assert language_family("solidity") == OTHER


@pytest.mark.parametrize(
    "vm,group",
    [
        ("EVM", "evm"),
        ("EVM / Subnet-EVM", "evm"),
        ("zkEVM", "evm"),
        ("PolkaVM/EVM", "evm-plus-pvm"),
        ("Soroban (Wasmi)", "wasm"),
        ("NearVM", "wasm"),
        ("SVM (sBPF)", "svm"),
        ("MoveVM + Block-STM", "move"),
        ("TVM", "tvm"),
        ("CairoVM (STARK)", "cairo"),
        ("Plutus VM (UPLC)", "plutus"),
        ("ZK Circuit VM", "zk-circuit"),
        ("N/A (DA layer)", "da-layer"),
        ("XRPL Native", "xrpl-native"),
    ],
)
def test_vm_group(vm, group):
    assert vm_group(vm) == group


def test_unknown_vm_falls_back_to_other():
    assert vm_group("FuelVM") == OTHER


def test_account_family():
    assert is_account_family("account")
    assert is_account_family("account-resource")
    assert not is_account_family("eUTXO")
    assert not is_account_family("object-centric")
    assert not is_account_family("actor")
