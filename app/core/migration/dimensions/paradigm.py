"""Paradigm dimensions: language, VM, transaction model, EVM compatibility, deployment.

Each scorer compares source and destination and returns a distance in
[0.0, 1.0], where 0.0 means no migration cost on that axis. The
intermediate constants are calibrated judgments and must stay as they are.
"""

from typing import Optional

from app.core.migration.classifiers import (
    NO_VM_GROUPS,
    is_account_family,
    language_family,
    vm_group,
)
from app.core.schemas_ecosystem import Ecosystem

EVM_RANKS = {"native": 0, "supported": 1}
NON_EVM_RANK = 2


def language_distance(
    src: Ecosystem,
    dst: Ecosystem,
    src_mode: Optional[str] = None,
    dst_mode: Optional[str] = None,
) -> float:
    """
    Score the Language dimension.

    Args:
        src: Source ecosystem
        dst: Destination ecosystem
        src_mode: Optional source deploy mode overriding its languages
        dst_mode: Optional destination deploy mode overriding its languages

    Returns:
        0.0 when a language is shared, 0.3 when a language family is shared,
        1.0 otherwise
    """
    src_langs = src.languages_for_mode(src_mode)
    dst_langs = dst.languages_for_mode(dst_mode)

    if any(lang in dst_langs for lang in src_langs):
        return 0.0

    src_families = {language_family(lang) for lang in src_langs}
    dst_families = {language_family(lang) for lang in dst_langs}
    if src_families & dst_families:
        return 0.3

    return 1.0


def vm_distance(src: Ecosystem, dst: Ecosystem) -> float:
    """Score the VM / Runtime dimension."""
    if src.vm == dst.vm:
        return 0.0

    sg = vm_group(src.vm)
    dg = vm_group(dst.vm)

    if sg == dg:
        return 0.2

    # PolkaVM/EVM overlaps with both EVM and Wasm groups
    if (sg == "evm-plus-pvm" and dg in ("evm", "wasm")) or (
        dg == "evm-plus-pvm" and sg in ("evm", "wasm")
    ):
        return 0.3

    # DA layers and XRPL have no general-purpose VM
    if sg in NO_VM_GROUPS or dg in NO_VM_GROUPS:
        return 1.0

    return 1.0


def transaction_model_distance(src: Ecosystem, dst: Ecosystem) -> float:
    """Score the transaction/state model dimension."""
    sm = src.transaction_model
    dm = dst.transaction_model

    if sm == dm:
        return 0.0

    src_account = is_account_family(sm)
    dst_account = is_account_family(dm)

    # Account variants are close
    if src_account and dst_account:
        return 0.15

    if (src_account and dm == "eUTXO") or (sm == "eUTXO" and dst_account):
        return 0.6

    if (src_account and dm == "object-centric") or (sm == "object-centric" and dst_account):
        return 0.5

    if sm == "actor" or dm == "actor":
        return 0.8

    return 0.7


def evm_compat_distance(src: Ecosystem, dst: Ecosystem) -> float:
    """Score the EVM compatibility dimension.

    Moving between EVM chains is cheap; crossing between the EVM world and
    the non-EVM world is the expensive case.
    """
    sr = EVM_RANKS.get(src.evm_compatibility, NON_EVM_RANK)
    dr = EVM_RANKS.get(dst.evm_compatibility, NON_EVM_RANK)

    if sr == dr:
        return 0.0

    # native <-> supported
    if sr < NON_EVM_RANK and dr < NON_EVM_RANK:
        return 0.2

    if (sr < NON_EVM_RANK and dr == NON_EVM_RANK) or (sr == NON_EVM_RANK and dr < NON_EVM_RANK):
        return 1.0

    return 0.5


def deploy_model_distance(src: Ecosystem, dst: Ecosystem) -> float:
    """Score the deployment model dimension (what actually gets shipped)."""
    src_opts = set(src.deployment_options)
    dst_opts = set(dst.deployment_options)

    if src_opts & dst_opts:
        return 0.0

    # Sidechains carry their own validator set and bridge trust assumptions
    if ("sidechain" in src_opts and "contract" in dst_opts) or (
        "contract" in src_opts and "sidechain" in dst_opts
    ):
        return 0.8

    if "sidechain" in src_opts or "sidechain" in dst_opts:
        return 0.9

    if ("contract" in src_opts and "appchain" in dst_opts and "contract" not in dst_opts) or (
        "appchain" in src_opts and "contract" in dst_opts and "appchain" not in dst_opts
    ):
        return 0.7

    return 0.5
