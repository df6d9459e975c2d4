"""Pydantic models for migration difficulty scoring."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Dimensions
# =============================================================================


class Dimension(str, Enum):
    """One axis of migration cost, in report order."""

    LANGUAGE = "Language"
    VM = "VM / Runtime"
    TX_MODEL = "Tx Model"
    EVM_COMPAT = "EVM Compat"
    DEPLOY_MODEL = "Deploy Model"
    DEST_TOOLING = "Dest. Tooling"
    DEST_DOCS = "Dest. Docs"
    L2_GAP = "L2 Gap"
    FUNDING = "Ecosystem Funding"

    @property
    def weight(self) -> float:
        return DIMENSION_WEIGHTS[self]


class DifficultyTier(str, Enum):
    """Five ordered difficulty bands, easiest first."""

    TRIVIAL = "Trivial"
    EASY = "Easy"
    MODERATE = "Moderate"
    HARD = "Hard"
    EXTREME = "Extreme"

    @property
    def index(self) -> int:
        return list(DifficultyTier).index(self)


# =============================================================================
# Report Types
# =============================================================================


class DimensionScore(BaseModel):
    """Distance for a single dimension with its qualitative label."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Dimension display name")
    score: float = Field(..., ge=0.0, le=1.0, description="Distance (0.0 = no cost)")
    weight: float = Field(..., ge=0.0, le=1.0, description="Weight in overall score")
    label: str = Field(..., description="Qualitative label (e.g., 'Similar')")


class MigrationReport(BaseModel):
    """Complete migration difficulty assessment for one source/destination pair."""

    model_config = ConfigDict(frozen=True)

    source_id: str = Field(..., description="Source ecosystem id")
    destination_id: str = Field(..., description="Destination ecosystem id")
    source_mode: Optional[str] = Field(
        None, description="Source deploy mode applied, None when default languages were used"
    )
    destination_mode: Optional[str] = Field(
        None, description="Destination deploy mode applied, None when default languages were used"
    )

    overall: float = Field(..., ge=0.0, description="Weighted sum of dimension distances")
    difficulty_label: DifficultyTier = Field(..., description="Tier of the overall score")
    dimensions: tuple[DimensionScore, ...] = Field(
        ..., description="Breakdown for the nine dimensions in fixed order"
    )
    challenges: tuple[str, ...] = Field(
        default=(), description="Why this migration is hard"
    )
    positives: tuple[str, ...] = Field(
        default=(), description="Why this migration is easy"
    )

    def dimension(self, dimension: Dimension) -> DimensionScore:
        """Look up the breakdown entry for one dimension."""
        for dim_score in self.dimensions:
            if dim_score.name == dimension.value:
                return dim_score
        raise KeyError(dimension.value)


# =============================================================================
# Tier Grouping Types
# =============================================================================


class TierEntry(BaseModel):
    """One destination placed in a difficulty tier."""

    model_config = ConfigDict(frozen=True)

    ecosystem_id: str = Field(..., description="Destination ecosystem id")
    name: str = Field(..., description="Destination display name")
    overall: float = Field(..., ge=0.0, description="Overall migration score from the source")


class TierBucket(BaseModel):
    """All destinations falling into one difficulty tier."""

    tier: DifficultyTier = Field(..., description="Difficulty tier")
    entries: list[TierEntry] = Field(
        default_factory=list, description="Destinations in catalog order"
    )


# =============================================================================
# Dimension weights - must sum to 1.0
# =============================================================================

DIMENSION_WEIGHTS = {
    Dimension.LANGUAGE: 0.35,
    Dimension.VM: 0.12,
    Dimension.TX_MODEL: 0.08,
    Dimension.EVM_COMPAT: 0.08,
    Dimension.DEPLOY_MODEL: 0.07,
    Dimension.DEST_TOOLING: 0.10,
    Dimension.DEST_DOCS: 0.07,
    Dimension.L2_GAP: 0.07,
    Dimension.FUNDING: 0.06,
}
