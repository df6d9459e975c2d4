"""API endpoint for migration difficulty reports."""

from collections.abc import Sequence

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.logging import get_logger
from app.core.migration import MigrationReport, compute_migration
from app.core.schemas_ecosystem import Ecosystem
from app.db.ecosystems import find_ecosystem, get_catalog

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/migrations/{source_id}/{destination_id}",
    response_model=MigrationReport,
)
async def get_migration_report(
    source_id: str,
    destination_id: str,
    source_mode: str | None = Query(None, description="Source deploy mode (e.g. 'appchain')"),
    destination_mode: str | None = Query(None, description="Destination deploy mode"),
    catalog: Sequence[Ecosystem] = Depends(get_catalog),  # noqa: B008
) -> MigrationReport:
    """
    Get the migration difficulty report for a source/destination pair.

    Unknown deploy modes fall back to the ecosystem's default languages.

    Args:
        source_id: Source ecosystem id
        destination_id: Destination ecosystem id
        source_mode: Optional source deploy mode
        destination_mode: Optional destination deploy mode

    Returns:
        MigrationReport with overall score, breakdown and explanations

    Raises:
        HTTPException 404: If either ecosystem is not in the catalog
        HTTPException 500: If computation fails
    """
    try:
        src = find_ecosystem(catalog, source_id)
        if src is None:
            raise HTTPException(status_code=404, detail=f"Ecosystem '{source_id}' not found")

        dst = find_ecosystem(catalog, destination_id)
        if dst is None:
            raise HTTPException(status_code=404, detail=f"Ecosystem '{destination_id}' not found")

        report = compute_migration(src, dst, source_mode, destination_mode)

        logger.info(
            f"Computed migration {source_id} -> {destination_id}: "
            f"{report.overall:.3f} ({report.difficulty_label.value})",
            extra={"source_id": source_id, "destination_id": destination_id},
        )

        return report

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Failed to compute migration {source_id} -> {destination_id}")
        raise HTTPException(
            status_code=500,
            detail="Failed to compute migration report",
        ) from e
