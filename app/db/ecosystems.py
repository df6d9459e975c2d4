"""Ecosystem catalog loading.

The catalog is a static TOML file with one `[[ecosystem]]` table per
platform. It is loaded once per process and never mutated afterwards, so
concurrent readers need no locking once `get_catalog()` has returned.
"""

import tomllib
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.logging import get_logger
from app.core.schemas_ecosystem import Ecosystem

logger = get_logger(__name__)


class CatalogError(Exception):
    """Raised when the ecosystem catalog cannot be loaded."""


def load_ecosystems(path: Path) -> list[Ecosystem]:
    """
    Load and validate every ecosystem from a catalog file.

    Args:
        path: Path to the TOML catalog

    Returns:
        Ecosystems in catalog order

    Raises:
        CatalogError: If the file is unreadable, malformed, fails
            validation, or repeats an id
    """
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read ecosystem catalog {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise CatalogError(f"Malformed ecosystem catalog {path}: {e}") from e

    entries = raw.get("ecosystem", [])
    if not isinstance(entries, list):
        raise CatalogError(f"Ecosystem catalog {path}: 'ecosystem' must be an array of tables")

    ecosystems: list[Ecosystem] = []
    seen_ids: set[str] = set()

    for i, entry in enumerate(entries):
        try:
            eco = Ecosystem.model_validate(entry)
        except ValidationError as e:
            raise CatalogError(f"Invalid ecosystem #{i} in {path}: {e}") from e

        if eco.id in seen_ids:
            raise CatalogError(f"Duplicate ecosystem id '{eco.id}' in {path}")
        seen_ids.add(eco.id)
        ecosystems.append(eco)

    logger.info(f"Loaded {len(ecosystems)} ecosystems from {path}")
    return ecosystems


@lru_cache(maxsize=1)
def get_catalog() -> tuple[Ecosystem, ...]:
    """
    Get the configured ecosystem catalog (cached singleton).

    Returns:
        Immutable tuple of ecosystems in catalog order

    Raises:
        CatalogError: If the configured catalog cannot be loaded
    """
    settings = get_settings()
    return tuple(load_ecosystems(settings.ECOSYSTEM_CATALOG_PATH))


def find_ecosystem(catalog: Sequence[Ecosystem], ecosystem_id: str) -> Ecosystem | None:
    """
    Find an ecosystem by id.

    Args:
        catalog: Loaded ecosystems
        ecosystem_id: Catalog key

    Returns:
        Ecosystem or None if not found
    """
    for eco in catalog:
        if eco.id == ecosystem_id:
            return eco
    return None
