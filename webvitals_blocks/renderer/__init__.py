"""Renderers — markup sauvegardé + injection du srcset au rendu."""
from .html import save, serialize_block, serialize_hero_background
from .injector import build_background_script, render_hero_background

__all__ = [
    "save", "serialize_block", "serialize_hero_background",
    "build_background_script", "render_hero_background",
]
