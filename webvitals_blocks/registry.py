"""
Registry des blocs — nom namespacé → BlockDefinition.
render_content() parcourt le contenu d'une page et remplace chaque bloc enregistré
par la sortie de son render callback. Les blocs inconnus restent tels quels.
"""
import json
import logging
import re
from typing import Any, Dict, List, Optional

from .blocks.base import BlockDefinition

log = logging.getLogger(__name__)

# <!-- wp:ns/name {"attrs"} --> inner <!-- /wp:ns/name -->   ou   <!-- wp:ns/name {"attrs"} /-->
_BLOCK_RE = re.compile(
    r"(?P<open><!--\s+wp:(?P<name>[a-z][a-z0-9_-]*/[a-z][a-z0-9_-]*)\s+"
    r"(?P<attrs>\{(?:(?!\}\s+/?-->).)*?\}\s+)?)"
    r"(?:/-->|-->(?P<inner>.*?)(?P<close><!--\s+/wp:(?P=name)\s+-->))",
    re.DOTALL,
)


def parse_block_attributes(raw: Optional[str]) -> dict:
    """JSON du commentaire de bloc → dict (invalide ou absent → {})."""
    if not raw:
        return {}
    try:
        attrs = json.loads(raw)
    except ValueError as e:
        log.warning("Attributs de bloc illisibles (%s) : %.80s", e, raw)
        return {}
    return attrs if isinstance(attrs, dict) else {}


class BlockRegistry:
    """
    Registry injectable (pas d'état global).

    Usage:
        >>> registry = BlockRegistry()
        >>> register_blocks(registry)
        >>> html = registry.render_content(post_content, catalog)
    """

    def __init__(self):
        self._blocks: Dict[str, BlockDefinition] = {}

    def register(self, definition: BlockDefinition) -> BlockDefinition:
        if definition.name in self._blocks:
            raise ValueError(f"Bloc déjà enregistré : {definition.name!r}")
        self._blocks[definition.name] = definition
        log.info("Bloc enregistré : %s", definition.name)
        return definition

    def get(self, name: str) -> Optional[BlockDefinition]:
        return self._blocks.get(name)

    def names(self) -> List[str]:
        return list(self._blocks)

    def __contains__(self, name: str) -> bool:
        return name in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def render(self, name: str, attributes: dict, content: str, catalog: Any) -> str:
        """Rend un bloc enregistré ; sans render callback, le markup sauvegardé est renvoyé."""
        definition = self._blocks.get(name)
        if definition is None:
            raise ValueError(f"Bloc inconnu : {name!r}. Registry : {self.names()}")
        if definition.render_callback is None:
            return content
        return definition.render_callback(attributes, content, catalog)

    def render_content(self, content: str, catalog: Any) -> str:
        """
        Rend tous les blocs enregistrés présents dans le contenu d'une page.
        Le contenu imbriqué est rendu avant le bloc qui le contient.
        Un bloc ne peut pas contenir un bloc du même nom.
        """
        if not content or "<!--" not in content:
            return content

        def replace(m: re.Match) -> str:
            name  = m.group("name")
            inner = self.render_content(m.group("inner") or "", catalog)
            if name not in self._blocks:
                if m.group("close") is None:
                    return m.group(0)
                return f'{m.group("open")}-->{inner}{m.group("close")}'
            attrs = parse_block_attributes(m.group("attrs"))
            return self.render(name, attrs, inner.strip("\n"), catalog)

        return _BLOCK_RE.sub(replace, content)
