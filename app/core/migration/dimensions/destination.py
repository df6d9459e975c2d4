"""Destination quality dimensions and the L2 maturity gap.

Tooling, docs and funding read the destination only: moving into a
well-tooled ecosystem is easier than the reverse move, so these are never
symmetrized. Ratings are on a 1-5 scale and map linearly onto [0.0, 1.0].
"""

from app.core.schemas_ecosystem import Ecosystem

RATING_MIN = 1
RATING_SPAN = 4


def _rating_difficulty(rating: int) -> float:
    """Invert a 1-5 rating into a difficulty: 5 -> 0.0, 1 -> 1.0."""
    return 1.0 - (rating - RATING_MIN) / RATING_SPAN


def dest_tooling_difficulty(dst: Ecosystem) -> float:
    return _rating_difficulty(dst.tooling_maturity)


def dest_docs_difficulty(dst: Ecosystem) -> float:
    return _rating_difficulty(dst.doc_quality)


def dest_funding_difficulty(dst: Ecosystem) -> float:
    return _rating_difficulty(dst.ecosystem_funding)


def l2_gap(src: Ecosystem, dst: Ecosystem) -> float:
    """Absolute L2 maturity gap, symmetric."""
    return abs(src.l2_maturity - dst.l2_maturity) / RATING_SPAN
