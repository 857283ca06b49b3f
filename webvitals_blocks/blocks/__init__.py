"""
Blocs — exports publics.
"""
from .base import BlockAttributes, BlockDefinition, RenderCallback
from .hero_background import (
    BLOCK_NAME, BLOCK_TITLE, BLOCK_DESCRIPTION, MIN_HEIGHTS, CONTENT_ALIGNS,
    HeroBackgroundAttributes,
)

__all__ = [
    # Base
    "BlockAttributes", "BlockDefinition", "RenderCallback",
    # Hero Background
    "BLOCK_NAME", "BLOCK_TITLE", "BLOCK_DESCRIPTION", "MIN_HEIGHTS", "CONTENT_ALIGNS",
    "HeroBackgroundAttributes",
]
