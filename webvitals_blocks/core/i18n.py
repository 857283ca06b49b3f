"""
i18n — libellés de l'éditeur et des blocs.

Catalogues : webvitals_blocks/i18n/{lang}.json (arbre imbriqué).
    "@editor.panels.background" → "Background Settings"
    "Texte direct"              → "Texte direct"
Clé absente ou non terminale → "[missing:<clé>]".
"""
import json
import os
from pathlib import Path
from typing import Dict

DEFAULT_LANG = os.getenv("WEBVITALS_LANG", "en")

_I18N_DIR = Path(__file__).parent.parent / "i18n"
_CATALOGS: Dict[str, dict] = {}


def _catalog(lang: str) -> dict:
    # chargé à la première demande ; langue inconnue → catalogue vide
    if lang not in _CATALOGS:
        path = _I18N_DIR / f"{lang}.json"
        _CATALOGS[lang] = json.loads(path.read_text(encoding="utf-8")) if path.exists() else {}
    return _CATALOGS[lang]


def available_langs() -> list:
    return sorted(p.stem for p in _I18N_DIR.glob("*.json"))


def i18n_resolve(value: str, lang: str = DEFAULT_LANG) -> str:
    """Libellé localisé pour une clé "@a.b.c" ; tout autre texte est renvoyé tel quel."""
    if not value or not value.startswith("@"):
        return value

    key = value[1:]
    node = _catalog(lang)
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return f"[missing:{key}]"
        node = node[part]
    return f"[missing:{key}]" if isinstance(node, dict) else str(node)


def reload_cache():
    """Vide les catalogues chargés (tests, édition des JSON à chaud)."""
    _CATALOGS.clear()
