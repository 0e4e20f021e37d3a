"""Catalog records: template groups, colors, parts and the catalog itself."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TemplateGroup(str, Enum):
    """Template family a part belongs to.

    COMMON parts fit every head; MALE and FEMALE parts only fit a head of
    the same group.
    """

    COMMON = "common"
    MALE = "male"
    FEMALE = "female"


class ColorValue(BaseModel):
    """A named color from one of the color catalogs."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    hex: str = Field(pattern=r"^#[0-9a-fA-F]{6}$")
    group: TemplateGroup = TemplateGroup.COMMON


class Part(BaseModel):
    """A swappable visual part backed by a template fragment."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    template: str = Field(description="Logical template path, e.g. 'male/hair/TypeA'")
    group: TemplateGroup = TemplateGroup.COMMON


# Attribute name on Catalog -> record type, in catalog file order
PART_CATEGORIES = (
    "heads",
    "accessories",
    "clothes",
    "eyes",
    "glasses",
    "hair",
    "facial_hair",
    "mouths",
)
COLOR_CATEGORIES = (
    "colors",
    "eye_colors",
    "hair_colors",
    "lip_colors",
    "skin_colors",
)
# Categories filtered by the head's template group during seed derivation
GROUPED_CATEGORIES = (
    "accessories",
    "clothes",
    "glasses",
    "facial_hair",
    "hair",
    "lip_colors",
)


class Catalog(BaseModel):
    """All attribute enumerations, in candidate order.

    The order of every tuple is significant: seed derivation indexes into
    these tuples, so reordering entries changes every derived avatar.
    """

    model_config = ConfigDict(frozen=True)

    heads: tuple[Part, ...]
    accessories: tuple[Part, ...]
    clothes: tuple[Part, ...]
    eyes: tuple[Part, ...]
    glasses: tuple[Part, ...]
    hair: tuple[Part, ...]
    facial_hair: tuple[Part, ...]
    mouths: tuple[Part, ...]

    colors: tuple[ColorValue, ...]
    eye_colors: tuple[ColorValue, ...]
    hair_colors: tuple[ColorValue, ...]
    lip_colors: tuple[ColorValue, ...]
    skin_colors: tuple[ColorValue, ...]

    @model_validator(mode="after")
    def _check_entries(self) -> "Catalog":
        for category in PART_CATEGORIES + COLOR_CATEGORIES:
            entries = getattr(self, category)
            if not entries:
                raise ValueError(f"Catalog category '{category}' is empty")
            ids = [entry.id for entry in entries]
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(
                    f"Duplicate ids in '{category}': {', '.join(duplicates)}"
                )

        # Five colors are drawn without replacement, skin then nose likewise
        if len(self.colors) < 5:
            raise ValueError("'colors' needs at least 5 entries")
        if len(self.skin_colors) < 2:
            raise ValueError("'skin_colors' needs at least 2 entries")

        for head in self.heads:
            allowed = (TemplateGroup.COMMON, head.group)
            for category in GROUPED_CATEGORIES:
                if not any(entry.group in allowed for entry in getattr(self, category)):
                    raise ValueError(
                        f"No '{category}' entry fits head '{head.id}' "
                        f"(group '{head.group.value}')"
                    )
        return self

    def entries(self, category: str) -> tuple[Part | ColorValue, ...]:
        """Return the entries of a category by attribute name."""
        if category not in PART_CATEGORIES and category not in COLOR_CATEGORIES:
            raise KeyError(f"Unknown catalog category '{category}'")
        return getattr(self, category)

    def find(self, category: str, entry_id: str) -> Part | ColorValue:
        """Look up an entry by id within a category."""
        for entry in self.entries(category):
            if entry.id == entry_id:
                return entry
        raise KeyError(f"No entry '{entry_id}' in catalog category '{category}'")

    def template_paths(self) -> list[str]:
        """Every template path referenced by a part, without duplicates."""
        paths: list[str] = []
        for category in PART_CATEGORIES:
            for part in getattr(self, category):
                if part.template not in paths:
                    paths.append(part.template)
        return paths
