"""
Resolver background responsive — image_id + labels de taille → srcset / sizes / src.

Pipeline :
  catalog.get_url(id, "full")          → src (fallback)
  pour chaque label (ordre d'entrée) :
    catalog.get_url(id, label)         → url (sinon label ignoré)
    metadata.sizes[label].width        → largeur
    ou metadata.width si label == full
  "<url> <w>w" joints par ", "         → srcset

Ne lève jamais : un catalogue en erreur = "pas de donnée" pour cette taille.
"""
import logging
import re
from typing import Any, Callable, Optional, Sequence
from urllib.parse import urlsplit

from .base import AttachmentMetadata, MediaCatalog, ResponsiveBackground

log = logging.getLogger(__name__)

DEFAULT_SIZE_LABELS = ("medium", "large", "full")
FULL_SIZE           = "full"
VIEWPORT_SIZES      = "100vw"  # un hero occupe toujours la largeur du viewport

_ALLOWED_SCHEMES = ("http", "https")
_URL_STRIP_RE    = re.compile(r"[^a-zA-Z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\u0080-\uffff]")


def clean_url(url: Optional[str]) -> str:
    """
    Nettoie une URL avant insertion dans un srcset.
    Espaces encodés, caractères hors URL retirés, schémas autres que http(s) rejetés ("").
    """
    if not url:
        return ""
    url = url.strip().replace(" ", "%20")
    url = _URL_STRIP_RE.sub("", url)
    if not url:
        return ""
    scheme = urlsplit(url).scheme
    if scheme and scheme.lower() not in _ALLOWED_SCHEMES:
        log.warning("URL rejetée (schéma %r) : %s", scheme, url)
        return ""
    return url


def _lookup(call: Callable[..., Any], *args) -> Any:
    """Appel catalogue protégé : toute exception → None (journalisée)."""
    try:
        return call(*args)
    except Exception as e:
        log.warning("Lookup médiathèque échoué %s%r : %s", getattr(call, "__name__", call), args, e)
        return None


def _candidate_width(label: str, meta: Optional[AttachmentMetadata]) -> Optional[int]:
    if meta is None:
        return None
    width = meta.size_width(label)
    if width is None and label == FULL_SIZE:
        width = meta.width
    return width


def resolve_responsive_background(
    catalog: MediaCatalog,
    image_id: Optional[int],
    size_labels: Sequence[str] = DEFAULT_SIZE_LABELS,
) -> ResponsiveBackground:
    """
    Calcule le triplet srcset/sizes/src d'une image de fond.

    Args:
        catalog: Médiathèque (lecture seule)
        image_id: Identifiant d'attachment (0 / None = pas d'image)
        size_labels: Tailles à proposer, dans l'ordre du srcset

    Returns:
        ResponsiveBackground (vide si image_id vaut 0)
    """
    if not image_id:
        return ResponsiveBackground.empty()

    src  = clean_url(_lookup(catalog.get_url, image_id, FULL_SIZE))
    meta = _lookup(catalog.get_metadata, image_id)

    candidates = []
    for label in size_labels:
        url = clean_url(_lookup(catalog.get_url, image_id, label))
        if not url:
            log.debug("Image %s : pas d'URL pour %r", image_id, label)
            continue
        width = _candidate_width(label, meta)
        if width is None:
            log.debug("Image %s : largeur inconnue pour %r, candidat ignoré", image_id, label)
            continue
        candidates.append(f"{url} {width}w")

    return ResponsiveBackground(
        srcset=", ".join(candidates),
        sizes=VIEWPORT_SIZES,
        src=src,
    )
