"""
Bloc de base — attributs + définition d'un type de bloc.
Un type de bloc = nom namespacé + modèle d'attributs + render callback.
"""
from typing import Any, Callable, Optional, Type
from pydantic import BaseModel, ConfigDict, Field

from ..core.i18n import DEFAULT_LANG, i18n_resolve


class BlockAttributes(BaseModel):
    """Attributs persistés d'un bloc. Alias camelCase = format des commentaires de bloc."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_block_json(self) -> dict:
        """Attributs qui diffèrent des défauts, prêts pour le commentaire de bloc."""
        return self.model_dump(by_alias=True, exclude_defaults=True)


# render_callback(attributes: dict, content: str, catalog) -> str
RenderCallback = Callable[[dict, str, Any], str]


class BlockDefinition(BaseModel):
    """Type de bloc enregistrable dans un BlockRegistry."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9-]*/[a-z][a-z0-9-]*$")
    title: str
    description: str = ""
    category: str = "design"
    attributes_model: Type[BlockAttributes]
    render_callback: Optional[RenderCallback] = None

    def labels(self, lang: str = DEFAULT_LANG) -> dict:
        """Titre et description localisés (clés "@..." ou texte direct)."""
        return {
            "title":       i18n_resolve(self.title, lang),
            "description": i18n_resolve(self.description, lang),
        }

