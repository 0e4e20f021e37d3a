"""Placeholder substitution for SVG fragment templates.

Templates contain `{{name}}` or `{{name(arg)}}` placeholders. Each
placeholder is replaced by the output of the first binding with a matching
name; placeholders without a binding are left untouched. There are no
conditionals, loops or escapes.
"""

from typing import Callable, Sequence


Producer = Callable[[str | None], str]

OPEN = "{{"
CLOSE = "}}"


class Binding:
    """A named value for template placeholders.

    The value is either a literal string or a function taking the
    placeholder argument (None when the placeholder has no argument)
    and returning the replacement text.
    """

    __slots__ = ("name", "_producer")

    def __init__(self, name: str, value: str | Producer) -> None:
        self.name = name
        if callable(value):
            self._producer = value
        else:
            self._producer = lambda _arg: value

    def produce(self, arg: str | None = None) -> str:
        return self._producer(arg)

    def __repr__(self) -> str:
        return f"Binding({self.name!r})"


def _find_binding(bindings: Sequence[Binding], name: str) -> Binding | None:
    for binding in bindings:
        if binding.name == name:
            return binding
    return None


def render(template: str, bindings: Sequence[Binding]) -> str:
    """Render a template against an ordered list of bindings.

    Args:
        template: Template text with {{...}} placeholders
        bindings: Bindings to resolve placeholders; first name match wins

    Returns:
        Rendered text
    """
    parts: list[str] = []
    current = 0

    while True:
        start = template.find(OPEN, current)
        if start == -1:
            break
        end = template.find(CLOSE, start)
        if end == -1:
            # Unterminated placeholder, the rest is literal
            break

        parts.append(template[current:start])

        arg_start = template.find("(", start)
        if arg_start != -1 and arg_start < end and template[end - 1] == ")":
            name = template[start + len(OPEN):arg_start]
            arg = template[arg_start + 1:end - 1]
        else:
            name = template[start + len(OPEN):end]
            arg = None

        binding = _find_binding(bindings, name)
        if binding is None:
            parts.append(template[start:end + len(CLOSE)])
        else:
            parts.append(binding.produce(arg))

        current = end + len(CLOSE)

    parts.append(template[current:])
    return "".join(parts)


def component(template: str, bindings: Sequence[Binding]) -> Binding:
    """Binding named 'component' that renders a nested template.

    The inner template is rendered with its own bindings each time the
    outer template references `{{component}}`.
    """
    return Binding("component", lambda _arg: render(template, bindings))
