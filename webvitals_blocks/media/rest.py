"""
Catalogue REST — médiathèque d'un WordPress distant via /wp-json/wp/v2/media/{id}.
Erreurs réseau / HTTP / JSON → None (journalisé), jamais d'exception remontée.
Un document média n'est demandé qu'une fois par instance (une instance par requête).
"""
import logging
import os
from typing import Dict, Optional

import requests as http

from .base import AttachmentMetadata, ImageSize
from .resolver import FULL_SIZE

log = logging.getLogger(__name__)

MEDIA_API_TIMEOUT = float(os.getenv("WEBVITALS_MEDIA_API_TIMEOUT", "5"))


class RestMediaCatalog:
    """
    Usage:
        >>> catalog = RestMediaCatalog("https://example.org")
        >>> catalog.get_url(42, "large")
    """

    def __init__(self, base_url: str, timeout: float = MEDIA_API_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout  = timeout
        self._cache: Dict[int, Optional[dict]] = {}

    def _fetch(self, image_id: int) -> Optional[dict]:
        image_id = int(image_id)
        if image_id not in self._cache:
            self._cache[image_id] = self._request(image_id)
        return self._cache[image_id]

    def _request(self, image_id: int) -> Optional[dict]:
        url = f"{self.base_url}/wp-json/wp/v2/media/{image_id}"
        try:
            resp = http.get(url, timeout=self.timeout, headers={"Accept": "application/json"})
        except http.RequestException as exc:
            log.warning("Media API %s : %s", url, exc)
            return None
        if resp.status_code == 404:
            return None
        if resp.status_code != 200:
            log.warning("Media API %s : HTTP %s", url, resp.status_code)
            return None
        try:
            data = resp.json()
        except ValueError as exc:
            log.warning("Media API %s : JSON invalide (%s)", url, exc)
            return None
        return data if isinstance(data, dict) else None

    @staticmethod
    def _sizes(data: dict) -> Dict[str, dict]:
        # entrées mal formées ignorées
        details = data.get("media_details")
        sizes = details.get("sizes") if isinstance(details, dict) else None
        if not isinstance(sizes, dict):
            return {}
        return {label: s for label, s in sizes.items() if isinstance(s, dict)}

    def get_url(self, image_id: int, size: str) -> Optional[str]:
        data = self._fetch(image_id)
        if not data:
            return None
        entry = self._sizes(data).get(size)
        if entry and entry.get("source_url"):
            return entry["source_url"]
        if size == FULL_SIZE:
            return data.get("source_url") or None
        return None

    def get_metadata(self, image_id: int) -> Optional[AttachmentMetadata]:
        data = self._fetch(image_id)
        if not data:
            return None
        details = data.get("media_details")
        if not isinstance(details, dict):
            details = {}
        return AttachmentMetadata(
            width=details.get("width"),
            height=details.get("height"),
            file=details.get("file"),
            sizes={
                label: ImageSize(
                    width=s.get("width"),
                    height=s.get("height"),
                    file=s.get("file"),
                    url=s.get("source_url"),
                )
                for label, s in self._sizes(data).items()
            },
        )
