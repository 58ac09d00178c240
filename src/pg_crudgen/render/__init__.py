"""Source renderers for generated declarations."""

from pg_crudgen.render.rust import render_declaration, render_module

__all__ = [
    "render_declaration",
    "render_module",
]
