"""
Composition root — enregistre les blocs du plugin dans un registry injecté.
"""
from .blocks.base import BlockDefinition
from .blocks.hero_background import BLOCK_DESCRIPTION, BLOCK_NAME, BLOCK_TITLE, HeroBackgroundAttributes
from .registry import BlockRegistry
from .renderer.injector import render_hero_background

HERO_BACKGROUND = BlockDefinition(
    name=BLOCK_NAME,
    title=BLOCK_TITLE,
    description=BLOCK_DESCRIPTION,
    category="design",
    attributes_model=HeroBackgroundAttributes,
    render_callback=render_hero_background,
)


def register_blocks(registry: BlockRegistry) -> BlockRegistry:
    """Enregistre tous les blocs du plugin (appelé une fois au démarrage)."""
    registry.register(HERO_BACKGROUND)
    return registry
