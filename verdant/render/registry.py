# verdant/render/registry.py
"""
Renderer lookup.

The set of output formats is closed: one renderer class per OutputFormat,
keyed by its `plugin_name`. The table is checked once at import so that a
renderer whose name or extension disagrees with its format fails loudly
instead of writing mislabelled files.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Type, Union

from verdant.core.config import OutputFormat
from verdant.exceptions.config import UnknownFormatError
from verdant.render.base import Renderer
from verdant.render.plugins.classic import ClassicRenderer
from verdant.render.plugins.dense import DenseRenderer

REQUIRED_ATTRIBUTES = ("plugin_name", "extension", "section_lines", "reserved_lines", "render")


def check_renderers(renderers: Mapping[str, Type[Renderer]]) -> Dict[str, Type[Renderer]]:
    """
    Validate a format → renderer table.

    Raises:
        TypeError: If an entry lacks the renderer attributes, or its name or
            extension does not match the format it is registered under
    """
    for name, cls in renderers.items():
        missing = [a for a in REQUIRED_ATTRIBUTES if not hasattr(cls, a)]
        if missing:
            raise TypeError(f"Renderer {cls.__name__} is missing {', '.join(missing)}")
        if cls.plugin_name != name:
            raise TypeError(
                f"Renderer {cls.__name__} is named {cls.plugin_name!r}, registered as {name!r}"
            )
        expected = OutputFormat(name).extension
        if cls.extension != expected:
            raise TypeError(
                f"Renderer {cls.__name__} writes .{cls.extension}, format {name!r} needs .{expected}"
            )
    return dict(renderers)


RENDERERS: Dict[str, Type[Renderer]] = check_renderers(
    {
        OutputFormat.CLASSIC.value: ClassicRenderer,
        OutputFormat.DENSE.value: DenseRenderer,
    }
)


def available_formats() -> List[str]:
    return sorted(RENDERERS)


def get_renderer(output_format: Union[OutputFormat, str]) -> Renderer:
    """
    Instantiate the renderer for a format.

    Raises:
        UnknownFormatError: If no renderer handles that format
    """
    name = output_format.value if isinstance(output_format, OutputFormat) else output_format
    try:
        cls = RENDERERS[name]
    except KeyError:
        raise UnknownFormatError(
            f"Unknown output format {name!r}. Available: {available_formats()}"
        ) from None
    return cls()


__all__ = ["RENDERERS", "check_renderers", "available_formats", "get_renderer"]
