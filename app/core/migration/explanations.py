"""Human-readable explanations for a migration report.

Rules re-examine the dimension distances (and, for funding, the raw
destination rating) against their own thresholds, which differ from the
banding thresholds. Both lists follow dimension evaluation order.
"""

from typing import Optional

from app.core.migration.types import Dimension
from app.core.schemas_ecosystem import Ecosystem

EVM_WORLD = ("native", "supported")


def collect_positives(
    src: Ecosystem,
    dst: Ecosystem,
    scores: dict[Dimension, float],
    src_mode: Optional[str] = None,
) -> list[str]:
    """
    Collect reasons the migration is easy.

    Args:
        src: Source ecosystem
        dst: Destination ecosystem
        scores: Distance per dimension
        src_mode: Source deploy mode used for the language comparison

    Returns:
        Positive explanations in dimension order
    """
    positives: list[str] = []

    lang = scores[Dimension.LANGUAGE]
    if lang == 0.0:
        src_langs = src.languages_for_mode(src_mode)
        positives.append(
            f"Same language ({', '.join(src_langs)}) — existing code may port directly"
        )
    elif lang <= 0.3:
        positives.append("Related language family — developer skills transfer well")

    if scores[Dimension.VM] == 0.0:
        positives.append(f"Same VM ({src.vm}) — runtime behavior is identical")

    if scores[Dimension.EVM_COMPAT] == 0.0 and src.evm_compatibility == "native":
        positives.append(
            "Both EVM-native — tooling, libraries, and patterns transfer directly"
        )

    if scores[Dimension.TX_MODEL] == 0.0:
        positives.append("Same transaction model — no paradigm shift required")

    if scores[Dimension.DEPLOY_MODEL] == 0.0:
        positives.append("Same deployment model — no infrastructure changes needed")

    if scores[Dimension.DEST_TOOLING] <= 0.25:
        positives.append(f"Excellent destination tooling ({dst.tooling_maturity}/5)")

    if scores[Dimension.DEST_DOCS] <= 0.25:
        positives.append(f"Strong destination documentation ({dst.doc_quality}/5)")

    # Raw rating, not the derived distance
    if dst.ecosystem_funding >= 4:
        positives.append(
            f"Well-funded destination ecosystem ({dst.ecosystem_funding}/5) — "
            "grants and support available"
        )

    return positives


def collect_challenges(
    src: Ecosystem,
    dst: Ecosystem,
    scores: dict[Dimension, float],
    src_mode: Optional[str] = None,
    dst_mode: Optional[str] = None,
) -> list[str]:
    """
    Collect reasons the migration is hard.

    Args:
        src: Source ecosystem
        dst: Destination ecosystem
        scores: Distance per dimension
        src_mode: Source deploy mode used for the language comparison
        dst_mode: Destination deploy mode used for the language comparison

    Returns:
        Challenge explanations in dimension order
    """
    challenges: list[str] = []

    lang = scores[Dimension.LANGUAGE]
    if lang >= 0.3:
        src_langs = ", ".join(src.languages_for_mode(src_mode))
        dst_langs = ", ".join(dst.languages_for_mode(dst_mode))
        if lang >= 0.8:
            challenges.append(f"Completely different languages: {src_langs} → {dst_langs}")
        else:
            challenges.append(f"Related but distinct languages: {src_langs} → {dst_langs}")

    if scores[Dimension.VM] >= 0.8:
        challenges.append(f"Different VM architecture: {src.vm} → {dst.vm}")

    if scores[Dimension.TX_MODEL] >= 0.5:
        challenges.append(
            f"Different transaction model: {src.transaction_model} → {dst.transaction_model}"
        )

    if scores[Dimension.EVM_COMPAT] >= 0.8:
        if src.evm_compatibility in EVM_WORLD:
            challenges.append("Leaving the EVM ecosystem — existing tooling won't transfer")
        else:
            challenges.append("Entering the EVM ecosystem — different paradigm from source")

    if scores[Dimension.DEPLOY_MODEL] >= 0.5:
        challenges.append(
            f"Different deployment model: {'/'.join(src.deployment_options)} → "
            f"{'/'.join(dst.deployment_options)}"
        )

    if scores[Dimension.DEST_TOOLING] >= 0.6:
        challenges.append(f"Destination tooling is immature ({dst.tooling_maturity}/5)")

    if scores[Dimension.DEST_DOCS] >= 0.6:
        challenges.append(f"Destination documentation is limited ({dst.doc_quality}/5)")

    if scores[Dimension.L2_GAP] >= 0.5:
        challenges.append("Significant L2/rollup ecosystem gap")

    if dst.ecosystem_funding <= 2:
        challenges.append(
            f"Limited ecosystem funding ({dst.ecosystem_funding}/5) — "
            "fewer grants and support programs"
        )

    return challenges
