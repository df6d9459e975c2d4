"""Category classifiers for fuzzy matching of ecosystem attributes.

Raw catalog strings (languages, VM names, transaction models) are collapsed
into coarser groups so near-matches can be told apart from complete
mismatches. New catalog values only need an entry here when they should
join an existing group; anything unmapped lands in OTHER.
"""

OTHER = "other"

# Language -> family
LANGUAGE_FAMILIES = {
    "Solidity": "evm-adjacent",
    "Vyper": "evm-adjacent",
    "Huff": "evm-adjacent",
    "Cairo": "evm-adjacent",
    "Rust": "rust",
    "Go": "go",
    "Golang": "go",
    "C++": "c-family",
    "C": "c-family",
    "TypeScript": "js-family",
    "JavaScript": "js-family",
    "AssemblyScript": "js-family",
    "Move": "move",
    "Sui Move": "move",
    "Aptos Move": "move",
    "Tolk": "ton-native",
    "Tact": "ton-native",
    "FunC": "ton-native",
    "FunC (legacy)": "ton-native",
    "Aiken": "cardano-native",
    "Plinth": "cardano-native",
    "OpShin": "cardano-native",
    "Compact": "zk-native",
}

# VM identifier -> runtime group
VM_GROUPS = {
    "EVM": "evm",
    "EVM / Subnet-EVM": "evm",
    "zkEVM": "evm",
    "PolkaVM/EVM": "evm-plus-pvm",
    "CosmWasm": "wasm",
    "NearVM": "wasm",
    "Soroban (Wasmi)": "wasm",
    "SVM (sBPF)": "svm",
    "Sui MoveVM": "move",
    "MoveVM + Block-STM": "move",
    "TVM": "tvm",
    "CairoVM (STARK)": "cairo",
    "Plutus VM (UPLC)": "plutus",
    "ZK Circuit VM": "zk-circuit",
    "N/A (DA layer)": "da-layer",
    "XRPL Native": "xrpl-native",
}

# Engines with no general-purpose VM
NO_VM_GROUPS = frozenset({"da-layer", "xrpl-native"})

ACCOUNT_FAMILY = frozenset({"account", "account-resource"})


def language_family(language: str) -> str:
    """Map a language name to its family, OTHER when unknown."""
    return LANGUAGE_FAMILIES.get(language, OTHER)


def vm_group(vm: str) -> str:
    """Map a VM identifier to its runtime group, OTHER when unknown."""
    return VM_GROUPS.get(vm, OTHER)


def is_account_family(transaction_model: str) -> bool:
    return transaction_model in ACCOUNT_FAMILY
