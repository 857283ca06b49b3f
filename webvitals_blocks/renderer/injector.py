"""
Injecteur au rendu — render callback du bloc Hero Background.

Si le bloc a une image de fond et que le resolver produit un srcset, un <script>
inline est ajouté au markup : il crée une image sonde (srcset/sizes/src), laisse le
navigateur choisir le candidat, puis copie img.currentSrc dans le background-image
de chaque .hero-background-image portant le même data-bg-image-id.
"""
import json
import logging
import os
from typing import Any, Optional, Sequence

from ..blocks.hero_background import HeroBackgroundAttributes
from ..media.base import MediaCatalog, ResponsiveBackground
from ..media.resolver import DEFAULT_SIZE_LABELS, resolve_responsive_background
from .html import IMAGE_CLASS

log = logging.getLogger(__name__)

SIZE_LABELS = tuple(
    s.strip()
    for s in os.getenv("WEBVITALS_SIZE_LABELS", ",".join(DEFAULT_SIZE_LABELS)).split(",")
    if s.strip()
)


def js_string(value: str) -> str:
    """Littéral JS sûr dans un <script> inline (pas de </script>, &, U+2028…)."""
    return (
        json.dumps(value or "")
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("'", "\\u0027")
    )


def background_image_id(attributes: Any) -> int:
    """backgroundImageId tolérant : dict brut ou modèle, valeur invalide → 0."""
    if isinstance(attributes, HeroBackgroundAttributes):
        return attributes.background_image_id
    raw = (attributes or {}).get("backgroundImageId", 0)
    try:
        image_id = int(raw)
    except (TypeError, ValueError):
        return 0
    return image_id if image_id > 0 else 0


def build_background_script(image_id: int, background: ResponsiveBackground) -> str:
    """Snippet autonome — rien ne s'exécute avant DOMContentLoaded."""
    return f"""<script>
(function() {{
  var bgImageId = {int(image_id)};
  var srcset = {js_string(background.srcset)};
  var sizes = {js_string(background.sizes)};
  var defaultSrc = {js_string(background.src)};

  function applyResponsiveBackground() {{
    var selector = ".{IMAGE_CLASS}[data-bg-image-id=\\"" + bgImageId + "\\"]";
    document.querySelectorAll(selector).forEach(function(element) {{
      var img = document.createElement("img");
      img.loading = "eager";
      img.addEventListener("load", function() {{
        element.style.backgroundImage = "url(" + img.currentSrc + ")";
      }}, {{ once: true }});
      img.sizes = sizes;
      img.srcset = srcset;
      img.src = defaultSrc;
    }});
  }}

  if (document.readyState === "loading") {{
    document.addEventListener("DOMContentLoaded", applyResponsiveBackground);
  }} else {{
    applyResponsiveBackground();
  }}
}})();
</script>"""


def render_hero_background(
    attributes: Any,
    content: str,
    catalog: MediaCatalog,
    size_labels: Optional[Sequence[str]] = None,
) -> str:
    """
    Render callback du bloc.

    Args:
        attributes: Attributs du bloc (dict du commentaire ou modèle)
        content: Markup sauvegardé
        catalog: Médiathèque
        size_labels: Tailles du srcset (défaut : WEBVITALS_SIZE_LABELS)

    Returns:
        content, suivi du script si un srcset a pu être calculé
    """
    image_id = background_image_id(attributes)
    if not image_id:
        return content

    background = resolve_responsive_background(
        catalog, image_id, SIZE_LABELS if size_labels is None else size_labels,
    )
    if not background.srcset:
        log.debug("Image %s : aucun candidat srcset, markup inchangé", image_id)
        return content

    return content + build_background_script(image_id, background)
