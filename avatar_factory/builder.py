"""Fluent builder for avatars.

Usage:
    svg = AvatarBuilder("Alice").build()

    svg = (
        AvatarBuilder("Bob", "MALE", "TAN", "BROWN")
        .hair("MALE_B", "DARK_BROWN")
        .glasses("COMMON_D", None)
        .background("PETER_RIVER", None)
        .build()
    )

Attributes are given as catalog records or as their ids. Setters do not
reject parts from the other head group; call validate(), or build with
strict=True, to enforce it.
"""

import logging

from .composer import compose, to_data_uri
from .core.models import AvatarSpec, Catalog, ColorValue, Part
from .rendering.resources import AvatarResources, default_resources
from .selection.selector import compatible, derive_from_seed


logger = logging.getLogger(__name__)

# Defaults for explicitly constructed avatars and null colors
DEFAULT_EYES = "OPEN"
DEFAULT_EYES_COLOR = "GREEN_GREY"
DEFAULT_MOUTH = "NORMAL"
DEFAULT_MOUTH_COLOR = "NO_LIPSTICK"
DEFAULT_ACCESSORY_COLOR = "BLACK"
DEFAULT_GLASSES_COLOR = "BLACK"
DEFAULT_BACKGROUND_SECONDARY_COLOR = "WHITE"
DEFAULT_CLOTHES_COLOR = "CONCRETE"
DEFAULT_CLOTHES_SECONDARY_COLOR = "GREY"
FALLBACK_CLOTHES_SECONDARY_COLOR = "PETER_RIVER"
DEFAULT_HAIR_COLOR = "GREY"


class IncompatibleAttributeError(ValueError):
    """Raised when a part does not fit the current head's template group."""

    def __init__(self, attribute: str, value: Part | ColorValue, head: Part) -> None:
        self.attribute = attribute
        self.value = value
        self.head = head
        super().__init__(
            f"{attribute} '{value.id}' belongs to template group "
            f"'{value.group.value}' but head '{head.id}' is "
            f"'{head.group.value}'"
        )


PartRef = Part | str
ColorRef = ColorValue | str


class AvatarBuilder:
    """Mutable avatar state with fluent setters and a build step."""

    def __init__(
        self,
        name: str,
        head: PartRef | None = None,
        skin_color: ColorRef | None = None,
        nose_color: ColorRef | None = None,
        *,
        resources: AvatarResources | None = None,
        strict: bool = False,
    ) -> None:
        """Create a builder.

        With only a name, every attribute is derived from the name, so the
        same name always gives the same avatar. With head, skin_color and
        nose_color, an otherwise empty avatar with default eyes and mouth
        is created.

        Args:
            name: Avatar name; also the seed when deriving
            head: Head part or id
            skin_color: Skin color or id
            nose_color: Nose color (a skin color) or id
            resources: Catalog and templates (defaults to the packaged set)
            strict: Validate template groups before every build
        """
        self._resources = resources or default_resources()
        self._strict = strict

        explicit = (head, skin_color, nose_color)
        if all(value is None for value in explicit):
            self._spec = derive_from_seed(name, self.catalog)
            return
        if any(value is None for value in explicit):
            raise ValueError("head, skin_color and nose_color must be given together")

        self._spec = AvatarSpec(
            name=name,
            head=self._part("heads", head),
            skin_color=self._color("skin_colors", skin_color),
            nose_color=self._color("skin_colors", nose_color),
            eyes=self._part("eyes", DEFAULT_EYES),
            eyes_color=self._color("eye_colors", DEFAULT_EYES_COLOR),
            mouth=self._part("mouths", DEFAULT_MOUTH),
            mouth_color=self._color("lip_colors", DEFAULT_MOUTH_COLOR),
            accessory_color=self._color("colors", DEFAULT_ACCESSORY_COLOR),
            background_secondary_color=self._color("colors", DEFAULT_BACKGROUND_SECONDARY_COLOR),
            clothes_color=self._color("colors", DEFAULT_CLOTHES_COLOR),
            clothes_secondary_color=self._color("colors", DEFAULT_CLOTHES_SECONDARY_COLOR),
            glasses_color=self._color("colors", DEFAULT_GLASSES_COLOR),
            facial_hair_color=self._color("hair_colors", DEFAULT_HAIR_COLOR),
            hair_color=self._color("hair_colors", DEFAULT_HAIR_COLOR),
        )

    @property
    def catalog(self) -> Catalog:
        return self._resources.catalog

    @property
    def spec(self) -> AvatarSpec:
        """Current attribute state."""
        return self._spec

    @property
    def name(self) -> str:
        return self._spec.name

    # -- resolution -------------------------------------------------------

    def _part(self, category: str, value: PartRef | None) -> Part | None:
        if value is None or isinstance(value, Part):
            return value
        return self.catalog.find(category, value)

    def _color(
        self,
        category: str,
        value: ColorRef | None,
        fallback: str | None = None,
    ) -> ColorValue | None:
        if value is None:
            value = fallback
        if value is None or isinstance(value, ColorValue):
            return value
        return self.catalog.find(category, value)

    @staticmethod
    def _required(attribute: str, value):
        if value is None:
            raise ValueError(f"{attribute} is required")
        return value

    # -- setters ----------------------------------------------------------

    def head(
        self,
        head: PartRef,
        skin_color: ColorRef,
        nose_color: ColorRef,
    ) -> "AvatarBuilder":
        self._spec.head = self._required("head", self._part("heads", head))
        self._spec.skin_color = self._required("skin_color", self._color("skin_colors", skin_color))
        self._spec.nose_color = self._required("nose_color", self._color("skin_colors", nose_color))

        for attribute, value in self._spec.incompatibilities():
            logger.warning(
                f"[Builder] {attribute} '{value.id}' no longer matches head "
                f"'{self._spec.head.id}' ({self._spec.head.group.value})"
            )
        return self

    def eyes(self, eyes: PartRef, eyes_color: ColorRef) -> "AvatarBuilder":
        self._spec.eyes = self._required("eyes", self._part("eyes", eyes))
        self._spec.eyes_color = self._required("eyes_color", self._color("eye_colors", eyes_color))
        return self

    def mouth(self, mouth: PartRef, mouth_color: ColorRef) -> "AvatarBuilder":
        self._spec.mouth = self._required("mouth", self._part("mouths", mouth))
        self._spec.mouth_color = self._required("mouth_color", self._color("lip_colors", mouth_color))
        return self

    def accessory(self, accessory: PartRef | None, color: ColorRef | None = None) -> "AvatarBuilder":
        self._spec.accessory = self._part("accessories", accessory)
        self._spec.accessory_color = self._color("colors", color, DEFAULT_ACCESSORY_COLOR)
        return self

    def background(
        self,
        color: ColorRef | None,
        secondary_color: ColorRef | None = None,
    ) -> "AvatarBuilder":
        self._spec.background_color = self._color("colors", color)
        self._spec.background_secondary_color = self._color(
            "colors", secondary_color, DEFAULT_BACKGROUND_SECONDARY_COLOR
        )
        return self

    def clothes(
        self,
        clothes: PartRef | None,
        color: ColorRef | None = None,
        secondary_color: ColorRef | None = None,
    ) -> "AvatarBuilder":
        self._spec.clothes = self._part("clothes", clothes)
        self._spec.clothes_color = self._color("colors", color, DEFAULT_CLOTHES_COLOR)
        self._spec.clothes_secondary_color = self._color(
            "colors", secondary_color, FALLBACK_CLOTHES_SECONDARY_COLOR
        )
        return self

    def glasses(self, glasses: PartRef | None, color: ColorRef | None = None) -> "AvatarBuilder":
        self._spec.glasses = self._part("glasses", glasses)
        self._spec.glasses_color = self._color("colors", color, DEFAULT_GLASSES_COLOR)
        return self

    def facial_hair(
        self,
        facial_hair: PartRef | None,
        color: ColorRef | None = None,
    ) -> "AvatarBuilder":
        self._spec.facial_hair = self._part("facial_hair", facial_hair)
        self._spec.facial_hair_color = self._color("hair_colors", color, DEFAULT_HAIR_COLOR)
        return self

    def hair(self, hair: PartRef | None, color: ColorRef | None = None) -> "AvatarBuilder":
        self._spec.hair = self._part("hair", hair)
        self._spec.hair_color = self._color("hair_colors", color, DEFAULT_HAIR_COLOR)
        return self

    # -- candidates for the current head ----------------------------------

    def matching_accessories(self) -> list[Part]:
        return compatible(self.catalog.accessories, self._spec.head.group)

    def matching_clothes(self) -> list[Part]:
        return compatible(self.catalog.clothes, self._spec.head.group)

    def matching_glasses(self) -> list[Part]:
        return compatible(self.catalog.glasses, self._spec.head.group)

    def matching_facial_hair(self) -> list[Part]:
        return compatible(self.catalog.facial_hair, self._spec.head.group)

    def matching_hair(self) -> list[Part]:
        return compatible(self.catalog.hair, self._spec.head.group)

    def matching_lip_colors(self) -> list[ColorValue]:
        return compatible(self.catalog.lip_colors, self._spec.head.group)

    # -- output -----------------------------------------------------------

    def validate(self) -> None:
        """Raise IncompatibleAttributeError for the first part that does
        not fit the current head."""
        for attribute, value in self._spec.incompatibilities():
            raise IncompatibleAttributeError(attribute, value, self._spec.head)

    def build(self) -> str:
        """Render the avatar as an SVG document."""
        if self._strict:
            self.validate()
        return compose(self._spec, self._resources)

    def build_data_uri(self) -> str:
        """Render the avatar as a base64 SVG data URI."""
        return to_data_uri(self.build())
