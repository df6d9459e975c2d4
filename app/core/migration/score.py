"""Main migration difficulty computation.

This module orchestrates migration scoring by:
1. Running each dimension scorer
2. Combining distances into the weighted overall score
3. Labeling the overall score and each dimension
4. Generating positives and challenges
"""

import logging
from typing import Optional

from app.core.logging import get_logger, log_with_context
from app.core.migration.banding import difficulty_tier, label_for
from app.core.migration.dimensions import (
    deploy_model_distance,
    dest_docs_difficulty,
    dest_funding_difficulty,
    dest_tooling_difficulty,
    evm_compat_distance,
    l2_gap,
    language_distance,
    transaction_model_distance,
    vm_distance,
)
from app.core.migration.explanations import collect_challenges, collect_positives
from app.core.migration.types import Dimension, DimensionScore, MigrationReport
from app.core.schemas_ecosystem import Ecosystem

logger = get_logger(__name__)


def compute_migration(
    src: Ecosystem,
    dst: Ecosystem,
    src_mode: Optional[str] = None,
    dst_mode: Optional[str] = None,
) -> MigrationReport:
    """
    Compute the migration difficulty report for moving from src to dst.

    Always computed fresh (no caching); the result depends only on the
    four arguments. Unknown mode names fall back to default languages.

    Args:
        src: Source ecosystem
        dst: Destination ecosystem
        src_mode: Optional source deploy mode name
        dst_mode: Optional destination deploy mode name

    Returns:
        MigrationReport with overall score, breakdown and explanations
    """
    # ==========================================================================
    # 1. Score each dimension
    # ==========================================================================
    scores: dict[Dimension, float] = {
        Dimension.LANGUAGE: language_distance(src, dst, src_mode, dst_mode),
        Dimension.VM: vm_distance(src, dst),
        Dimension.TX_MODEL: transaction_model_distance(src, dst),
        Dimension.EVM_COMPAT: evm_compat_distance(src, dst),
        Dimension.DEPLOY_MODEL: deploy_model_distance(src, dst),
        Dimension.DEST_TOOLING: dest_tooling_difficulty(dst),
        Dimension.DEST_DOCS: dest_docs_difficulty(dst),
        Dimension.L2_GAP: l2_gap(src, dst),
        Dimension.FUNDING: dest_funding_difficulty(dst),
    }

    # ==========================================================================
    # 2. Weighted total
    # ==========================================================================
    overall = sum(scores[dim] * dim.weight for dim in Dimension)

    # ==========================================================================
    # 3. Labels
    # ==========================================================================
    dimensions = [
        DimensionScore(
            name=dim.value,
            score=scores[dim],
            weight=dim.weight,
            label=label_for(dim, scores[dim]),
        )
        for dim in Dimension
    ]

    # ==========================================================================
    # 4. Explanations
    # ==========================================================================
    positives = collect_positives(src, dst, scores, src_mode)
    challenges = collect_challenges(src, dst, scores, src_mode, dst_mode)

    report = MigrationReport(
        source_id=src.id,
        destination_id=dst.id,
        source_mode=_applied_mode(src, src_mode),
        destination_mode=_applied_mode(dst, dst_mode),
        overall=overall,
        difficulty_label=difficulty_tier(overall),
        dimensions=dimensions,
        challenges=challenges,
        positives=positives,
    )

    log_with_context(
        logger,
        logging.DEBUG,
        "Computed migration report",
        source_id=src.id,
        destination_id=dst.id,
        overall=round(overall, 3),
        difficulty=report.difficulty_label.value,
    )

    return report


def _applied_mode(eco: Ecosystem, mode: Optional[str]) -> Optional[str]:
    """Return the mode name if the ecosystem defines it, else None."""
    if mode is not None and eco.deploy_modes and mode in eco.deploy_modes:
        return mode
    return None
