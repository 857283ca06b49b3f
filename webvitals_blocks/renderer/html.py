"""
Renderer HTML — markup sauvegardé du bloc Hero Background.

save()                    → <div> racine (data-bg-image-id / data-bg-image-url lus au rendu)
serialize_block()         → délimiteurs <!-- wp:… --> + attributs JSON + markup
serialize_hero_background → raccourci pour le bloc Hero Background
"""
import json
from html import escape
from typing import Dict, Union

from ..blocks.hero_background import BLOCK_NAME, HeroBackgroundAttributes
from ..media.resolver import clean_url

HERO_CLASS    = "hero-background-block"
IMAGE_CLASS   = "hero-background-image"
OVERLAY_CLASS = "hero-background-overlay"
CONTENT_CLASS = "hero-background-content"

AttributesLike = Union[HeroBackgroundAttributes, dict]


def _as_attributes(attributes: AttributesLike) -> HeroBackgroundAttributes:
    if isinstance(attributes, HeroBackgroundAttributes):
        return attributes
    return HeroBackgroundAttributes.model_validate(attributes or {})


def block_class_name(name: str) -> str:
    namespace, slug = name.split("/", 1)
    return f"wp-block-{namespace}-{slug}"


def format_number(value: float) -> str:
    """0.5 → "0.5", 1.0 → "1" (même rendu que le style inline de l'éditeur)."""
    return f"{value:g}"


def css_url(url: str) -> str:
    """url(...) CSS sûre dans un attribut style."""
    safe = clean_url(url).replace("'", "%27").replace("(", "%28").replace(")", "%29")
    return f"url({safe})" if safe else "none"


def style_attr(styles: Dict[str, str]) -> str:
    """{"min-height": "500px"} → ' style="min-height:500px"' (vide si aucun style)."""
    parts = [f"{prop}:{value}" for prop, value in styles.items() if value not in (None, "")]
    return f' style="{escape(";".join(parts))}"' if parts else ""


# ── Markup sauvegardé ───────────────────────────────────────────────────────

def save(attributes: AttributesLike, inner_html: str = "") -> str:
    """Markup statique du bloc, tel que persisté dans le contenu de la page."""
    a = _as_attributes(attributes)

    classes = [block_class_name(BLOCK_NAME), HERO_CLASS]
    root_style = style_attr({"min-height": a.min_height, "align-items": a.content_align})
    image_id   = str(a.background_image_id) if a.background_image_id else ""

    image_html = ""
    if a.background_image_url:
        image_style = style_attr({
            "background-image":    css_url(a.background_image_url),
            "background-size":     "cover",
            "background-position": "center",
        })
        image_html = (
            f'\n  <div class="{IMAGE_CLASS}"{image_style}'
            f' data-bg-image-id="{escape(image_id)}" role="img"'
            f' aria-label="{escape(a.background_image_alt)}"></div>'
        )

    overlay_html = ""
    if a.overlay_opacity > 0:
        overlay_style = style_attr({
            "background-color": a.overlay_color,
            "opacity":          format_number(a.overlay_opacity),
        })
        overlay_html = f'\n  <div class="{OVERLAY_CLASS}"{overlay_style}></div>'

    return (
        f'<div class="{" ".join(classes)}"{root_style}'
        f' data-bg-image-id="{escape(image_id)}"'
        f' data-bg-image-url="{escape(a.background_image_url)}">'
        f'{image_html}{overlay_html}\n'
        f'  <div class="{CONTENT_CLASS}">{inner_html}</div>\n'
        f'</div>'
    )


# ── Délimiteurs de bloc ─────────────────────────────────────────────────────

def serialize_attributes(attrs: dict) -> str:
    """JSON compact, sans séquence capable de fermer le commentaire HTML."""
    text = json.dumps(attrs, separators=(",", ":"), ensure_ascii=False)
    return (
        text.replace("--", "\\u002d\\u002d")
            .replace("<", "\\u003c")
            .replace(">", "\\u003e")
            .replace("&", "\\u0026")
    )


def serialize_block(name: str, attrs: dict, inner_html: str = "") -> str:
    attrs_json = f"{serialize_attributes(attrs)} " if attrs else ""
    if not inner_html:
        return f"<!-- wp:{name} {attrs_json}/-->"
    return f"<!-- wp:{name} {attrs_json}-->\n{inner_html}\n<!-- /wp:{name} -->"


def serialize_hero_background(attributes: AttributesLike, inner_html: str = "") -> str:
    a = _as_attributes(attributes)
    return serialize_block(BLOCK_NAME, a.to_block_json(), save(a, inner_html))
