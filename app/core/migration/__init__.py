"""Migration difficulty scoring system.

Scores how hard it is to move a project between two blockchain ecosystems
across 9 dimensions:
- Language (35%)
- VM / Runtime (12%)
- Tx Model (8%)
- EVM Compat (8%)
- Deploy Model (7%)
- Dest. Tooling (10%)
- Dest. Docs (7%)
- L2 Gap (7%)
- Ecosystem Funding (6%)

Usage:
    from app.core.migration import compute_migration

    report = compute_migration(source, destination)
    print(f"{report.difficulty_label.value} ({report.overall:.2f})")
"""

from app.core.migration.banding import (
    difficulty_tier,
    dimension_label,
    funding_label,
)
from app.core.migration.score import compute_migration
from app.core.migration.tiers import group_by_difficulty
from app.core.migration.types import (
    DIMENSION_WEIGHTS,
    DifficultyTier,
    Dimension,
    DimensionScore,
    MigrationReport,
    TierBucket,
    TierEntry,
)

__all__ = [
    "compute_migration",
    "group_by_difficulty",
    "difficulty_tier",
    "dimension_label",
    "funding_label",
    "MigrationReport",
    "DimensionScore",
    "Dimension",
    "DifficultyTier",
    "TierBucket",
    "TierEntry",
    "DIMENSION_WEIGHTS",
]
