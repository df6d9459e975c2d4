"""Grouping of destinations into difficulty tiers for one fixed source."""

from collections.abc import Iterable

from app.core.logging import get_logger
from app.core.migration.banding import difficulty_tier
from app.core.migration.score import compute_migration
from app.core.migration.types import DifficultyTier, TierBucket, TierEntry
from app.core.schemas_ecosystem import Ecosystem

logger = get_logger(__name__)


def group_by_difficulty(
    source: Ecosystem,
    candidates: Iterable[Ecosystem],
) -> list[TierBucket]:
    """
    Bucket every candidate destination by migration difficulty from source.

    The source itself is skipped. Reports use default languages on both
    sides (no deploy modes).

    Args:
        source: Fixed source ecosystem
        candidates: Destinations to place, usually the whole catalog

    Returns:
        Five buckets ordered TRIVIAL to EXTREME; empty tiers are kept
    """
    buckets = {tier: TierBucket(tier=tier) for tier in DifficultyTier}

    for eco in candidates:
        if eco.id == source.id:
            continue
        report = compute_migration(source, eco)
        buckets[difficulty_tier(report.overall)].entries.append(
            TierEntry(ecosystem_id=eco.id, name=eco.name, overall=report.overall)
        )

    logger.debug(
        f"Grouped destinations for {source.id}: "
        + ", ".join(f"{t.value}={len(b.entries)}" for t, b in buckets.items())
    )

    return list(buckets.values())
