"""API endpoints for the ecosystem catalog."""

from collections.abc import Sequence

from fastapi import APIRouter, Depends, HTTPException

from app.core.logging import get_logger
from app.core.migration import TierBucket, group_by_difficulty
from app.core.schemas_ecosystem import Ecosystem
from app.db.ecosystems import find_ecosystem, get_catalog

logger = get_logger(__name__)

router = APIRouter()


@router.get("/ecosystems", response_model=list[Ecosystem])
async def list_ecosystems(
    catalog: Sequence[Ecosystem] = Depends(get_catalog),  # noqa: B008
) -> list[Ecosystem]:
    """List every ecosystem in catalog order."""
    return list(catalog)


@router.get("/ecosystems/{ecosystem_id}", response_model=Ecosystem)
async def get_ecosystem(
    ecosystem_id: str,
    catalog: Sequence[Ecosystem] = Depends(get_catalog),  # noqa: B008
) -> Ecosystem:
    """
    Get a single ecosystem.

    Raises:
        HTTPException 404: If the ecosystem is not in the catalog
    """
    eco = find_ecosystem(catalog, ecosystem_id)
    if eco is None:
        raise HTTPException(status_code=404, detail=f"Ecosystem '{ecosystem_id}' not found")
    return eco


@router.get("/ecosystems/{ecosystem_id}/tiers", response_model=list[TierBucket])
async def get_difficulty_tiers(
    ecosystem_id: str,
    catalog: Sequence[Ecosystem] = Depends(get_catalog),  # noqa: B008
) -> list[TierBucket]:
    """
    Group every other ecosystem by migration difficulty from this one.

    Args:
        ecosystem_id: Source ecosystem id

    Returns:
        Five buckets from Trivial to Extreme

    Raises:
        HTTPException 404: If the source ecosystem is not in the catalog
        HTTPException 500: If grouping fails
    """
    source = find_ecosystem(catalog, ecosystem_id)
    if source is None:
        raise HTTPException(status_code=404, detail=f"Ecosystem '{ecosystem_id}' not found")

    try:
        buckets = group_by_difficulty(source, catalog)
    except Exception as e:
        logger.exception(f"Failed to group destinations for {ecosystem_id}")
        raise HTTPException(
            status_code=500,
            detail="Failed to group destinations by difficulty",
        ) from e

    logger.info(
        f"Grouped {len(catalog) - 1} destinations for {ecosystem_id}",
        extra={"source_id": ecosystem_id},
    )
    return buckets
