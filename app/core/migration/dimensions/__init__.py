"""Migration dimension scorers."""

from app.core.migration.dimensions.destination import (
    dest_docs_difficulty,
    dest_funding_difficulty,
    dest_tooling_difficulty,
    l2_gap,
)
from app.core.migration.dimensions.paradigm import (
    deploy_model_distance,
    evm_compat_distance,
    language_distance,
    transaction_model_distance,
    vm_distance,
)

__all__ = [
    "language_distance",
    "vm_distance",
    "transaction_model_distance",
    "evm_compat_distance",
    "deploy_model_distance",
    "dest_tooling_difficulty",
    "dest_docs_difficulty",
    "l2_gap",
    "dest_funding_difficulty",
]
