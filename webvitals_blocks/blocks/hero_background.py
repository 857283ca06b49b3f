"""Bloc Hero Background — image de fond, overlay coloré, contenu imbriqué."""
from typing import Literal

from pydantic import Field, field_validator, model_validator

from .base import BlockAttributes

BLOCK_NAME        = "webvitals-blocks/hero-background"
BLOCK_TITLE       = "@block.hero_background.title"
BLOCK_DESCRIPTION = "@block.hero_background.description"

MIN_HEIGHTS    = ("300px", "400px", "500px", "600px", "100vh")
CONTENT_ALIGNS = ("flex-start", "center", "flex-end")

MinHeight    = Literal["300px", "400px", "500px", "600px", "100vh"]
ContentAlign = Literal["flex-start", "center", "flex-end"]

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"


class HeroBackgroundAttributes(BlockAttributes):
    background_image_id:  int          = Field(default=0, ge=0, alias="backgroundImageId")
    background_image_url: str          = Field(default="", alias="backgroundImageUrl")
    background_image_alt: str          = Field(default="", alias="backgroundImageAlt")
    min_height:           MinHeight    = Field(default="500px", alias="minHeight")
    content_align:        ContentAlign = Field(default="center", alias="contentAlign")
    overlay_opacity:      float        = Field(default=0.5, ge=0.0, le=1.0, alias="overlayOpacity")
    overlay_color:        str          = Field(default="#000000", pattern=HEX_COLOR_PATTERN, alias="overlayColor")

    @field_validator("background_image_id", mode="before")
    @classmethod
    def _empty_id_is_zero(cls, v):
        # L'éditeur sérialise parfois "" ou null pour "pas d'image"
        return 0 if v in (None, "") else v

    @field_validator("background_image_url", "background_image_alt", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return "" if v is None else v

    @model_validator(mode="after")
    def _no_url_without_image(self):
        if self.background_image_id == 0 and self.background_image_url:
            raise ValueError("backgroundImageUrl doit être vide quand backgroundImageId vaut 0")
        return self

    @property
    def has_image(self) -> bool:
        return self.background_image_id > 0
