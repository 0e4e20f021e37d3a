"""Deterministic attribute selection from a seed string.

The seed is hashed with SHA-256 behind a fixed salt. Each attribute
category then reads one fixed byte of the digest and turns it into an index
with a small mixing function. The same seed always yields the same avatar,
and the mapping must stay stable: changing the salt, the byte assignment,
the mixing arithmetic or catalog order changes every existing avatar.
"""

import hashlib
from typing import Sequence, TypeVar

from ..core.models import AvatarSpec, Catalog, ColorValue, Part, TemplateGroup


T = TypeVar("T")

SALT = bytes([0x03, 0x4E, 0x85, 0x9D])

# Digest byte read by each category
HEAD = 0
ACCESSORY = 1
ACCESSORY_COLOR = 2
CLOTHES = 3
CLOTHES_COLOR = 4
CLOTHES_SECONDARY_COLOR = 5
BACKGROUND_COLOR = 6
BACKGROUND_SECONDARY_COLOR = 7
EYES = 8
EYES_COLOR = 9
GLASSES = 10
GLASSES_COLOR = 11
FACIAL_HAIR = 12
FACIAL_HAIR_COLOR = 13
HAIR = 14
HAIR_COLOR = 15
MOUTH = 16
MOUTH_COLOR = 17
SKIN_COLOR = 18
NOSE_COLOR = 19


def seed_digest(seed: str) -> bytes:
    """SHA-256 of the salt followed by the UTF-8 seed (32 bytes)."""
    digest = hashlib.sha256()
    digest.update(SALT)
    digest.update(seed.encode("utf-8"))
    return digest.digest()


def _signed(byte: int) -> int:
    return byte - 256 if byte > 127 else byte


def mix(byte: int) -> int:
    """Mixing hash over a signed byte value (-128..127).

    Python's >> on negative ints is an arithmetic shift, matching
    sign-extending 32-bit integer arithmetic for this input range.
    """
    return byte ^ (7 * byte) ^ (byte >> 4) ^ ((31 * byte) >> 2)


def pick(byte: int, candidates: Sequence[T]) -> T:
    """Choose a candidate from a digest byte.

    Args:
        byte: Digest byte, either unsigned (0..255) or signed (-128..127)
        candidates: Ordered, non-empty candidate list

    Returns:
        candidates[abs(mix(byte)) % len(candidates)]
    """
    if not candidates:
        raise ValueError("Cannot pick from an empty candidate list")
    value = mix(_signed(byte))
    return candidates[abs(value) % len(candidates)]


def compatible(entries: Sequence[T], group: TemplateGroup) -> list[T]:
    """Entries that are COMMON or belong to the given head group."""
    return [e for e in entries if e.group in (TemplateGroup.COMMON, group)]


def _without(options: list[ColorValue], chosen: ColorValue) -> list[ColorValue]:
    options.remove(chosen)
    return options


def derive_from_seed(name: str, catalog: Catalog) -> AvatarSpec:
    """Derive a complete, group-consistent avatar from a seed string.

    Args:
        name: Seed string, usually the user's name; also the avatar name
        catalog: Attribute catalog supplying the candidate lists

    Returns:
        Fully populated AvatarSpec
    """
    seed = seed_digest(name)

    head: Part = pick(seed[HEAD], catalog.heads)
    group = head.group

    # Five distinct colors, drawn in a fixed sequence
    colors = list(catalog.colors)
    accessory_color = pick(seed[ACCESSORY_COLOR], colors)
    colors = _without(colors, accessory_color)
    clothes_color = pick(seed[CLOTHES_COLOR], colors)
    colors = _without(colors, clothes_color)
    clothes_secondary_color = pick(seed[CLOTHES_SECONDARY_COLOR], colors)
    colors = _without(colors, clothes_secondary_color)
    background_color = pick(seed[BACKGROUND_COLOR], colors)
    colors = _without(colors, background_color)
    background_secondary_color = pick(seed[BACKGROUND_SECONDARY_COLOR], colors)

    skin_colors = list(catalog.skin_colors)
    skin_color = pick(seed[SKIN_COLOR], skin_colors)
    nose_color = pick(seed[NOSE_COLOR], _without(skin_colors, skin_color))

    return AvatarSpec(
        name=name,
        head=head,
        skin_color=skin_color,
        nose_color=nose_color,
        eyes=pick(seed[EYES], catalog.eyes),
        eyes_color=pick(seed[EYES_COLOR], catalog.eye_colors),
        mouth=pick(seed[MOUTH], catalog.mouths),
        mouth_color=pick(seed[MOUTH_COLOR], compatible(catalog.lip_colors, group)),
        accessory=pick(seed[ACCESSORY], compatible(catalog.accessories, group)),
        accessory_color=accessory_color,
        background_color=background_color,
        background_secondary_color=background_secondary_color,
        clothes=pick(seed[CLOTHES], compatible(catalog.clothes, group)),
        clothes_color=clothes_color,
        clothes_secondary_color=clothes_secondary_color,
        glasses=pick(seed[GLASSES], compatible(catalog.glasses, group)),
        glasses_color=pick(seed[GLASSES_COLOR], catalog.colors),
        facial_hair=pick(seed[FACIAL_HAIR], compatible(catalog.facial_hair, group)),
        facial_hair_color=pick(seed[FACIAL_HAIR_COLOR], catalog.hair_colors),
        hair=pick(seed[HAIR], compatible(catalog.hair, group)),
        hair_color=pick(seed[HAIR_COLOR], catalog.hair_colors),
    )
