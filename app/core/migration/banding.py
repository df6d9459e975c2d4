"""Banding of scores into difficulty tiers and qualitative labels.

`difficulty_tier` is also used on its own to group many destinations by
difficulty relative to one fixed source.
"""

from app.core.migration.types import DifficultyTier, Dimension

# Upper bounds (exclusive), easiest tier first; anything above is EXTREME
TIER_THRESHOLDS = [
    (0.2, DifficultyTier.TRIVIAL),
    (0.4, DifficultyTier.EASY),
    (0.6, DifficultyTier.MODERATE),
    (0.8, DifficultyTier.HARD),
]

DIMENSION_LABEL_THRESHOLDS = [
    (0.15, "Same"),
    (0.35, "Similar"),
    (0.65, "Different"),
]
DIMENSION_LABEL_MAX = "Very different"

# A high funding score means worse funding, so it reads as opportunity
FUNDING_LABEL_THRESHOLDS = [
    (0.15, "Strong opportunities"),
    (0.35, "Good opportunities"),
    (0.65, "Moderate opportunities"),
]
FUNDING_LABEL_MAX = "Limited opportunities"


def difficulty_tier(score: float) -> DifficultyTier:
    """
    Map any score to one of the five difficulty tiers.

    Args:
        score: Overall or per-destination score, nominally in [0.0, 1.0]

    Returns:
        DifficultyTier, from TRIVIAL (< 0.2) to EXTREME (>= 0.8)
    """
    for upper, tier in TIER_THRESHOLDS:
        if score < upper:
            return tier
    return DifficultyTier.EXTREME


def dimension_label(score: float) -> str:
    for upper, label in DIMENSION_LABEL_THRESHOLDS:
        if score < upper:
            return label
    return DIMENSION_LABEL_MAX


def funding_label(score: float) -> str:
    for upper, label in FUNDING_LABEL_THRESHOLDS:
        if score < upper:
            return label
    return FUNDING_LABEL_MAX


def label_for(dimension: Dimension, score: float) -> str:
    """Pick the label vocabulary that fits the dimension."""
    if dimension is Dimension.FUNDING:
        return funding_label(score)
    return dimension_label(score)
