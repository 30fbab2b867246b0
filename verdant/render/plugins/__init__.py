# verdant/render/plugins/__init__.py
"""
Renderer implementations, one module per output format.

Each module defines one class with `plugin_name`, `extension`,
`reserved_lines(context)`, `section_lines` and
`render(chunks, context, names)`; verdant.render.registry maps formats to
them.
"""
