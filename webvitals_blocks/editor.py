"""
Éditeur d'attributs — fonctions pures, sans état ni UI.

Chaque action de l'opérateur = un patch appliqué à un enregistrement immuable :
    apply_patch(attributes, {"minHeight": "600px"}) → nouveaux attributs validés
Les valeurs hors options / hors plage lèvent ValueError (ValidationError en hérite).
"""
import math
from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field, field_validator

from .blocks.hero_background import CONTENT_ALIGNS, MIN_HEIGHTS, HeroBackgroundAttributes
from .core.i18n import DEFAULT_LANG, i18n_resolve
from .renderer.html import css_url

AttributesLike = Union[HeroBackgroundAttributes, dict, None]

OPACITY_MIN  = 0.0
OPACITY_MAX  = 1.0
OPACITY_STEP = 0.1

# alias camelCase → nom de champ Python
_ALIASES = {
    field.alias: name
    for name, field in HeroBackgroundAttributes.model_fields.items()
    if field.alias
}


class MediaSelection(BaseModel):
    """Média choisi dans la médiathèque (id + url + alt)."""
    id: int = Field(..., gt=0)
    url: str = Field(..., min_length=1)
    alt: str = ""

    @field_validator("alt", mode="before")
    @classmethod
    def _none_alt(cls, v):
        return v or ""


def _as_attributes(attributes: AttributesLike) -> HeroBackgroundAttributes:
    if isinstance(attributes, HeroBackgroundAttributes):
        return attributes
    return HeroBackgroundAttributes.model_validate(attributes or {})


# ── Patch ───────────────────────────────────────────────────────────────────

def apply_patch(attributes: AttributesLike, patch: Dict[str, Any]) -> HeroBackgroundAttributes:
    """
    Applique une mise à jour partielle et renvoie un nouvel enregistrement.

    Args:
        attributes: Attributs courants (jamais modifiés)
        patch: Clés camelCase ou snake_case → nouvelles valeurs

    Returns:
        HeroBackgroundAttributes validés
    """
    current = _as_attributes(attributes)
    update = {}
    for key, value in (patch or {}).items():
        name = key if key in HeroBackgroundAttributes.model_fields else _ALIASES.get(key)
        if name is None:
            raise ValueError(f"Attribut inconnu : {key!r}")
        update[name] = value
    data = current.model_dump()
    data.update(update)
    return HeroBackgroundAttributes.model_validate(data)


# ── Actions de l'opérateur ──────────────────────────────────────────────────

def select_image(attributes: AttributesLike, media: Any) -> HeroBackgroundAttributes:
    """Les trois champs image sont mis à jour ensemble."""
    m = MediaSelection.model_validate(media, from_attributes=True)
    return apply_patch(attributes, {
        "backgroundImageId":  m.id,
        "backgroundImageUrl": m.url,
        "backgroundImageAlt": m.alt,
    })


def remove_image(attributes: AttributesLike) -> HeroBackgroundAttributes:
    return apply_patch(attributes, {
        "backgroundImageId":  0,
        "backgroundImageUrl": "",
        "backgroundImageAlt": "",
    })


def set_min_height(attributes: AttributesLike, value: str) -> HeroBackgroundAttributes:
    if value not in MIN_HEIGHTS:
        raise ValueError(f"minHeight invalide : {value!r} (attendu : {', '.join(MIN_HEIGHTS)})")
    return apply_patch(attributes, {"minHeight": value})


def set_content_align(attributes: AttributesLike, value: str) -> HeroBackgroundAttributes:
    if value not in CONTENT_ALIGNS:
        raise ValueError(f"contentAlign invalide : {value!r} (attendu : {', '.join(CONTENT_ALIGNS)})")
    return apply_patch(attributes, {"contentAlign": value})


def set_overlay_opacity(attributes: AttributesLike, value: float) -> HeroBackgroundAttributes:
    """Borné à [0, 1] et arrondi au pas de 0.1, comme le range control."""
    value = float(value)
    if math.isnan(value):
        raise ValueError("overlayOpacity invalide : NaN")
    value = min(max(value, OPACITY_MIN), OPACITY_MAX)
    return apply_patch(attributes, {"overlayOpacity": round(round(value / OPACITY_STEP) * OPACITY_STEP, 1)})


def set_overlay_color(attributes: AttributesLike, value: str) -> HeroBackgroundAttributes:
    return apply_patch(attributes, {"overlayColor": value})


# ── Description des contrôles ───────────────────────────────────────────────

def _t(key: str, lang: str) -> str:
    return i18n_resolve(f"@editor.{key}", lang)


def editor_controls(attributes: AttributesLike = None, lang: str = DEFAULT_LANG) -> List[dict]:
    """Panneaux de l'inspecteur (libellés localisés, options, valeurs courantes)."""
    a = _as_attributes(attributes)

    image_control = {
        "type": "media",
        "attribute": "backgroundImageId",
        "allowed_types": ["image"],
        "value": a.background_image_id,
        "button_label": _t("image.change" if a.has_image else "image.select", lang),
    }
    if a.has_image:
        image_control["remove_label"] = _t("image.remove", lang)

    return [
        {
            "key": "background",
            "title": _t("panels.background", lang),
            "controls": [image_control],
        },
        {
            "key": "layout",
            "title": _t("panels.layout", lang),
            "controls": [
                {
                    "type": "select",
                    "attribute": "minHeight",
                    "label": _t("min_height", lang),
                    "value": a.min_height,
                    "options": [{"label": v, "value": v} for v in MIN_HEIGHTS],
                },
                {
                    "type": "select",
                    "attribute": "contentAlign",
                    "label": _t("content_align.label", lang),
                    "value": a.content_align,
                    "options": [{"label": _t(f"content_align.{v}", lang), "value": v} for v in CONTENT_ALIGNS],
                },
            ],
        },
        {
            "key": "overlay",
            "title": _t("panels.overlay", lang),
            "controls": [
                {
                    "type": "range",
                    "attribute": "overlayOpacity",
                    "label": _t("overlay_opacity", lang),
                    "value": a.overlay_opacity,
                    "min": OPACITY_MIN,
                    "max": OPACITY_MAX,
                    "step": OPACITY_STEP,
                },
                {
                    "type": "color",
                    "attribute": "overlayColor",
                    "label": _t("overlay_color", lang),
                    "value": a.overlay_color,
                },
            ],
        },
    ]


def inner_blocks_template(lang: str = DEFAULT_LANG) -> List[list]:
    """Contenu initial proposé à l'insertion du bloc (titre + paragraphe)."""
    return [
        ["core/heading",   {"level": 1, "placeholder": _t("placeholders.heading", lang)}],
        ["core/paragraph", {"placeholder": _t("placeholders.description", lang)}],
    ]


def editor_preview_style(attributes: AttributesLike) -> Dict[str, str]:
    """Style inline du canvas de l'éditeur (l'image y est posée directement en fond)."""
    a = _as_attributes(attributes)
    return {
        "min-height":          a.min_height,
        "align-items":         a.content_align,
        "background-image":    css_url(a.background_image_url) if a.background_image_url else "none",
        "background-size":     "cover",
        "background-position": "center",
        "position":            "relative",
    }
