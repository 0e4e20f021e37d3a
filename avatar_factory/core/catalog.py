"""Catalog loading.

The attribute catalogs ship as `data/catalog.yaml` inside the package and
are validated into an immutable `Catalog` once per process. A different
file can be supplied for custom part sets.
"""

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import Catalog, PART_CATEGORIES, COLOR_CATEGORIES


logger = logging.getLogger(__name__)

PACKAGED_CATALOG = "data/catalog.yaml"


class CatalogError(ValueError):
    """Raised when a catalog file is missing or invalid."""


def parse_catalog(text: str, source: str = "<string>") -> Catalog:
    """Parse and validate catalog YAML text.

    Args:
        text: YAML document with one list per catalog category
        source: Description of where the text came from, for error messages

    Returns:
        Validated Catalog

    Raises:
        CatalogError: If the YAML is malformed or fails validation
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in catalog {source}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {source} must be a mapping of categories")

    try:
        return Catalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {source}:\n{e}") from e


def load_catalog(path: str | Path | None = None) -> Catalog:
    """Load the packaged catalog, or a catalog file from disk."""
    if path is None:
        source = f"package:{PACKAGED_CATALOG}"
        text = (
            resources.files("avatar_factory")
            .joinpath(PACKAGED_CATALOG)
            .read_text(encoding="utf-8")
        )
    else:
        path = Path(path)
        source = str(path)
        if not path.is_file():
            raise CatalogError(f"Catalog file not found: {path}")
        text = path.read_text(encoding="utf-8")

    catalog = parse_catalog(text, source)

    total = sum(
        len(catalog.entries(c)) for c in PART_CATEGORIES + COLOR_CATEGORIES
    )
    logger.info(f"[Catalog] loaded {total} entries from {source}")
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The packaged catalog, loaded once and shared read-only."""
    return load_catalog()
