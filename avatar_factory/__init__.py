"""avatar-factory: deterministic SVG avatars from names.

Avatars are assembled from swappable parts (head, eyes, mouth, hair,
glasses, clothes, accessory, facial hair, background), either chosen by the
caller or derived reproducibly from a seed string.

Modules:
    core: Pydantic models and catalog loading
    rendering: Template stores, placeholder substitution, color helpers
    selection: Seed digest and deterministic attribute picking
    composer: Layered SVG assembly
    builder: Fluent AvatarBuilder API
"""

from .builder import AvatarBuilder, IncompatibleAttributeError
from .composer import compose, to_data_uri
from .core.catalog import CatalogError
from .rendering.store import TemplateNotFoundError

__version__ = "0.3.0"

__all__ = [
    "AvatarBuilder",
    "IncompatibleAttributeError",
    "compose",
    "to_data_uri",
    "CatalogError",
    "TemplateNotFoundError",
    "__version__",
]
