"""
WebVitals Blocks — bloc Hero Background avec image de fond responsive.

Usage:
    >>> from webvitals_blocks import BlockRegistry, register_blocks, InMemoryMediaCatalog
    >>> registry = register_blocks(BlockRegistry())
    >>> html = registry.render_content(post_content, catalog)

Usage (resolver seul):
    >>> from webvitals_blocks import resolve_responsive_background
    >>> resolve_responsive_background(catalog, 42, ["medium", "large", "full"]).srcset
"""
__version__ = "1.0.0"

from .blocks import BLOCK_NAME, BlockAttributes, BlockDefinition, HeroBackgroundAttributes
from .editor import (
    MediaSelection, apply_patch, editor_controls, editor_preview_style, inner_blocks_template,
    remove_image, select_image, set_content_align, set_min_height, set_overlay_color,
    set_overlay_opacity,
)
from .media import (
    AttachmentMetadata, ImageSize, InMemoryMediaCatalog, MediaCatalog, ResponsiveBackground,
    RestMediaCatalog, SqlMediaCatalog, resolve_responsive_background,
)
from .plugin import HERO_BACKGROUND, register_blocks
from .registry import BlockRegistry
from .renderer import (
    build_background_script, render_hero_background, save, serialize_block,
    serialize_hero_background,
)

__all__ = [
    # blocs
    "BLOCK_NAME", "BlockAttributes", "BlockDefinition", "HeroBackgroundAttributes",
    # éditeur
    "MediaSelection", "apply_patch", "editor_controls", "editor_preview_style",
    "inner_blocks_template", "remove_image", "select_image", "set_content_align",
    "set_min_height", "set_overlay_color", "set_overlay_opacity",
    # médiathèque
    "AttachmentMetadata", "ImageSize", "InMemoryMediaCatalog", "MediaCatalog",
    "ResponsiveBackground", "RestMediaCatalog", "SqlMediaCatalog",
    "resolve_responsive_background",
    # registry + rendu
    "HERO_BACKGROUND", "register_blocks", "BlockRegistry",
    "build_background_script", "render_hero_background", "save", "serialize_block",
    "serialize_hero_background",
]
