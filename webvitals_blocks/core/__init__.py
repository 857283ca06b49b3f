"""Core module pour webvitals_blocks."""
from .i18n import DEFAULT_LANG, available_langs, i18n_resolve, reload_cache

__all__ = [
    "DEFAULT_LANG",
    "available_langs",
    "i18n_resolve",
    "reload_cache",
]
