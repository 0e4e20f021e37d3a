"""Catalog plus preloaded template text, loaded once at startup.

Every template the catalog or the composer can reference is read eagerly,
so a missing fragment fails when resources are created and never in the
middle of a build.
"""

import logging
from functools import lru_cache
from pathlib import Path

from ..core.catalog import default_catalog, load_catalog
from ..core.models import Catalog, TemplateGroup
from .store import PackageTemplateStore, TemplateStore


logger = logging.getLogger(__name__)

# Fixed templates used by the composer regardless of the selected parts
AVATAR_TEMPLATE = "Avatar"
BACKGROUND_TEMPLATE = "common/Background"
EYES_TEMPLATE = "common/Eyes"
NOSE_TEMPLATE = "common/Nose"
MALE_HAIR_TEMPLATE = "male/Hair"
FEMALE_HAIR_TEMPLATE = "female/Hair"

FIXED_TEMPLATES = (
    AVATAR_TEMPLATE,
    BACKGROUND_TEMPLATE,
    EYES_TEMPLATE,
    NOSE_TEMPLATE,
    MALE_HAIR_TEMPLATE,
    FEMALE_HAIR_TEMPLATE,
)


def hair_wrapper_template(group: TemplateGroup) -> str:
    """Outer hair-group template for a hair style's group."""
    return MALE_HAIR_TEMPLATE if group == TemplateGroup.MALE else FEMALE_HAIR_TEMPLATE


class AvatarResources:
    """Read-only catalog and template text shared by all builds."""

    def __init__(self, catalog: Catalog, templates: dict[str, str]) -> None:
        self._catalog = catalog
        self._templates = dict(templates)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def template(self, path: str) -> str:
        """Return preloaded template text for a logical path."""
        try:
            return self._templates[path]
        except KeyError:
            raise KeyError(f"Template '{path}' was not loaded with these resources") from None

    def __contains__(self, path: str) -> bool:
        return path in self._templates


def load_resources(
    store: TemplateStore | None = None,
    catalog: Catalog | None = None,
    catalog_path: str | Path | None = None,
) -> AvatarResources:
    """Load the catalog and every template it needs.

    Args:
        store: Template source (defaults to the packaged templates)
        catalog: Already loaded catalog; takes precedence over catalog_path
        catalog_path: Catalog YAML file (defaults to the packaged catalog)

    Returns:
        AvatarResources ready for building avatars

    Raises:
        TemplateNotFoundError: If any required template is missing
        CatalogError: If the catalog cannot be loaded
    """
    store = store or PackageTemplateStore()
    if catalog is None:
        catalog = load_catalog(catalog_path) if catalog_path else default_catalog()

    templates: dict[str, str] = {}
    for path in list(FIXED_TEMPLATES) + catalog.template_paths():
        if path not in templates:
            templates[path] = store.load(path)

    logger.info(f"[Templates] loaded {len(templates)} templates from {store.location}")
    return AvatarResources(catalog, templates)


@lru_cache(maxsize=1)
def default_resources() -> AvatarResources:
    """Packaged catalog and templates, loaded once per process."""
    return load_resources()
