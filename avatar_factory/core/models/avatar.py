"""Mutable attribute state of a single avatar."""

from pydantic import BaseModel

from .catalog import ColorValue, Part, TemplateGroup


# Fields whose template group must agree with the head
GROUPED_FIELDS = (
    "accessory",
    "clothes",
    "glasses",
    "facial_hair",
    "hair",
    "mouth_color",
)


class AvatarSpec(BaseModel):
    """One selected value per attribute category.

    Created per build, mutated through AvatarBuilder and consumed by the
    composer. Optional parts are None when absent; their colors are always
    set so that switching a part on needs no extra color.
    """

    name: str

    head: Part
    skin_color: ColorValue
    nose_color: ColorValue

    eyes: Part
    eyes_color: ColorValue

    mouth: Part
    mouth_color: ColorValue

    accessory: Part | None = None
    accessory_color: ColorValue

    background_color: ColorValue | None = None
    background_secondary_color: ColorValue

    clothes: Part | None = None
    clothes_color: ColorValue
    clothes_secondary_color: ColorValue

    glasses: Part | None = None
    glasses_color: ColorValue

    facial_hair: Part | None = None
    facial_hair_color: ColorValue

    hair: Part | None = None
    hair_color: ColorValue

    def incompatibilities(self) -> list[tuple[str, Part | ColorValue]]:
        """List (field, value) pairs that do not fit the current head's group."""
        head_group = self.head.group
        found = []
        for field in GROUPED_FIELDS:
            value = getattr(self, field)
            if value is None:
                continue
            if value.group not in (TemplateGroup.COMMON, head_group):
                found.append((field, value))
        return found
