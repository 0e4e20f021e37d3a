"""Global fixtures for avatar-factory tests."""

import pytest

from avatar_factory.core.catalog import default_catalog
from avatar_factory.core.models import Catalog, ColorValue, Part, TemplateGroup
from avatar_factory.rendering.resources import AvatarResources, default_resources
from avatar_factory.rendering.store import TemplateNotFoundError, TemplateStore


class DictTemplateStore(TemplateStore):
    """In-memory store for tests; counts loads per path."""

    def __init__(self, templates: dict[str, str]) -> None:
        self.templates = templates
        self.loads: dict[str, int] = {}

    @property
    def location(self) -> str:
        return "memory"

    def load(self, path: str) -> str:
        self.loads[path] = self.loads.get(path, 0) + 1
        if path not in self.templates:
            raise TemplateNotFoundError(path, self.location)
        return self.templates[path]


@pytest.fixture
def catalog() -> Catalog:
    """The packaged catalog."""
    return default_catalog()


@pytest.fixture
def resources() -> AvatarResources:
    """Packaged catalog and templates."""
    return default_resources()


def _part(part_id, template, group=TemplateGroup.COMMON):
    return Part(id=part_id, name=part_id.title(), template=template, group=group)


def _color(color_id, hex_value, group=TemplateGroup.COMMON):
    return ColorValue(id=color_id, name=color_id.title(), hex=hex_value, group=group)


@pytest.fixture
def tiny_catalog() -> Catalog:
    """Minimal catalog whose templates echo their bindings."""
    return Catalog(
        heads=[
            _part("MALE", "male/HeadShape", TemplateGroup.MALE),
            _part("FEMALE", "female/HeadShape", TemplateGroup.FEMALE),
        ],
        accessories=[
            _part("COMMON_A", "common/accessory/TypeA"),
            _part("FEMALE_A", "female/accessory/TypeA", TemplateGroup.FEMALE),
        ],
        clothes=[
            _part("MALE_A", "male/clothes/TypeA", TemplateGroup.MALE),
            _part("FEMALE_A", "female/clothes/TypeA", TemplateGroup.FEMALE),
        ],
        eyes=[_part("OPEN", "common/eyes/TypeA")],
        glasses=[_part("COMMON_B", "common/glasses/TypeB")],
        hair=[
            _part("MALE_A", "male/hair/TypeA", TemplateGroup.MALE),
            _part("FEMALE_A", "female/hair/TypeA", TemplateGroup.FEMALE),
        ],
        facial_hair=[
            _part("NONE", "male/facial-hair/TypeA"),
            _part("BEARD", "male/facial-hair/TypeB", TemplateGroup.MALE),
        ],
        mouths=[_part("NORMAL", "common/mouth/TypeA")],
        colors=[
            _color("BLACK", "#000000"),
            _color("WHITE", "#FFFFFF"),
            _color("GREY", "#333333"),
            _color("CONCRETE", "#95a5a6"),
            _color("PETER_RIVER", "#3498db"),
            _color("TURQUOISE", "#1abc9c"),
        ],
        eye_colors=[_color("GREEN_GREY", "#497665")],
        hair_colors=[_color("GREY", "#B7A69E"), _color("BLACK", "#090806")],
        lip_colors=[
            _color("NO_LIPSTICK", "#ef843b"),
            _color("RED", "#7F0E0F", TemplateGroup.FEMALE),
        ],
        skin_colors=[_color("PALE", "#FBD2B4"), _color("TAN", "#E2B182")],
    )


@pytest.fixture
def tiny_templates(tiny_catalog) -> dict[str, str]:
    """Echo templates: each part prints its path and color bindings."""
    templates = {
        "Avatar": "<svg>{{name}}|{{components}}</svg>",
        "common/Background": "[bg {{color}} {{secondaryColor}}]",
        "common/Nose": "[nose {{color}}]",
        "common/Eyes": "[eyes {{gradientId}} {{secondaryColor}} {{component}}]",
        "male/Hair": "[hair-m {{component}}]",
        "female/Hair": "[hair-f {{component}}]",
    }
    for path in tiny_catalog.template_paths():
        templates[path] = f"[{path} {{{{color}}}}]"
    templates["common/eyes/TypeA"] = "[eye {{color}} {{gradientUrl}}]"
    templates["male/clothes/TypeA"] = "[male/clothes/TypeA {{color}} {{secondaryColor}}]"
    templates["female/clothes/TypeA"] = "[female/clothes/TypeA {{color}} {{secondaryColor}}]"
    return templates


@pytest.fixture
def tiny_store(tiny_templates) -> DictTemplateStore:
    return DictTemplateStore(tiny_templates)


@pytest.fixture
def tiny_resources(tiny_catalog, tiny_templates) -> AvatarResources:
    return AvatarResources(tiny_catalog, tiny_templates)
