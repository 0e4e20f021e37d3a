"""Template rendering: stores, placeholder substitution and color helpers."""

from .renderer import Binding, render, component
from .colors import lighten, darken, color_bindings
from .store import (
    TemplateStore,
    PackageTemplateStore,
    DirectoryTemplateStore,
    TemplateNotFoundError,
)
from .resources import (
    AvatarResources,
    load_resources,
    default_resources,
    hair_wrapper_template,
)

__all__ = [
    # Renderer
    "Binding",
    "render",
    "component",
    # Colors
    "lighten",
    "darken",
    "color_bindings",
    # Stores
    "TemplateStore",
    "PackageTemplateStore",
    "DirectoryTemplateStore",
    "TemplateNotFoundError",
    # Resources
    "AvatarResources",
    "load_resources",
    "default_resources",
    "hair_wrapper_template",
]
