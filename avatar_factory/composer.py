"""Avatar composition: render each selected part and assemble the SVG.

Parts are layered in a fixed order, later fragments drawing over earlier
ones: background, head, mouth, nose, eyes, hair, glasses, clothes,
accessory, facial hair.
"""

import base64

from .core.models import AvatarSpec
from .rendering.colors import color_bindings, darken
from .rendering.renderer import Binding, component, render
from .rendering.resources import (
    AVATAR_TEMPLATE,
    BACKGROUND_TEMPLATE,
    EYES_TEMPLATE,
    NOSE_TEMPLATE,
    AvatarResources,
    hair_wrapper_template,
)


EYES_SHADE_RATIO = 0.15


def _render_eyes(spec: AvatarSpec, resources: AvatarResources) -> str:
    color = spec.eyes_color.hex
    shade = darken(color, EYES_SHADE_RATIO)
    gradient_id = color.replace("#", "_")

    inner = color_bindings(
        color,
        secondaryColor=shade,
        gradientUrl=f"url(#{gradient_id})",
    )
    return render(
        resources.template(EYES_TEMPLATE),
        color_bindings(color, secondaryColor=shade, gradientId=gradient_id)
        + [component(resources.template(spec.eyes.template), inner)],
    )


def _render_hair(spec: AvatarSpec, resources: AvatarResources) -> str:
    color = spec.hair_color.hex
    inner = color_bindings(color)
    return render(
        resources.template(hair_wrapper_template(spec.hair.group)),
        color_bindings(color) + [component(resources.template(spec.hair.template), inner)],
    )


def render_components(spec: AvatarSpec, resources: AvatarResources) -> str:
    """Render every active part in layer order and concatenate the results."""
    fragments: list[str] = []

    if spec.background_color is not None:
        fragments.append(render(
            resources.template(BACKGROUND_TEMPLATE),
            color_bindings(
                spec.background_color.hex,
                secondaryColor=spec.background_secondary_color.hex,
            ),
        ))

    fragments.append(render(
        resources.template(spec.head.template),
        color_bindings(spec.skin_color.hex),
    ))
    fragments.append(render(
        resources.template(spec.mouth.template),
        color_bindings(spec.mouth_color.hex),
    ))
    fragments.append(render(
        resources.template(NOSE_TEMPLATE),
        color_bindings(spec.nose_color.hex),
    ))
    fragments.append(_render_eyes(spec, resources))

    if spec.hair is not None:
        fragments.append(_render_hair(spec, resources))

    if spec.glasses is not None:
        fragments.append(render(
            resources.template(spec.glasses.template),
            color_bindings(spec.glasses_color.hex),
        ))

    if spec.clothes is not None:
        fragments.append(render(
            resources.template(spec.clothes.template),
            color_bindings(
                spec.clothes_color.hex,
                secondaryColor=spec.clothes_secondary_color.hex,
            ),
        ))

    if spec.accessory is not None:
        fragments.append(render(
            resources.template(spec.accessory.template),
            color_bindings(spec.accessory_color.hex),
        ))

    if spec.facial_hair is not None:
        fragments.append(render(
            resources.template(spec.facial_hair.template),
            color_bindings(spec.facial_hair_color.hex),
        ))

    return "".join(fragments)


def compose(spec: AvatarSpec, resources: AvatarResources) -> str:
    """Build the SVG document for an avatar.

    The avatar name is inserted verbatim; escape untrusted names before
    building if the document is embedded in other markup.

    Args:
        spec: Selected attributes
        resources: Catalog and preloaded templates

    Returns:
        SVG markup
    """
    return render(
        resources.template(AVATAR_TEMPLATE),
        [
            Binding("name", spec.name),
            Binding("components", render_components(spec, resources)),
        ],
    )


def to_data_uri(svg: str) -> str:
    """Encode SVG markup as a base64 data URI for inline embedding."""
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"
