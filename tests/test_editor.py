"""Tests éditeur — patchs immuables, actions opérateur, panneaux localisés."""
from types import SimpleNamespace

import pytest

from webvitals_blocks.blocks import HeroBackgroundAttributes
from webvitals_blocks.core.i18n import reload_cache
from webvitals_blocks.editor import (
    apply_patch, editor_controls, editor_preview_style, inner_blocks_template,
    remove_image, select_image, set_content_align, set_min_height,
    set_overlay_color, set_overlay_opacity,
)


def setup_function():
    reload_cache()


@pytest.fixture
def with_image():
    return HeroBackgroundAttributes(
        background_image_id=42,
        background_image_url="/up/hero.jpg",
        background_image_alt="Montagnes",
    )


# ── Défauts ───────────────────────────────────────────────────────────────────

def test_defaults():
    a = HeroBackgroundAttributes()
    assert a.background_image_id == 0
    assert a.background_image_url == ""
    assert a.min_height == "500px"
    assert a.content_align == "center"
    assert a.overlay_opacity == 0.5
    assert a.overlay_color == "#000000"
    assert not a.has_image


def test_aliases_accepted():
    a = HeroBackgroundAttributes.model_validate({"backgroundImageId": 3, "backgroundImageUrl": "/a.jpg"})
    assert a.background_image_id == 3
    assert a.model_dump(by_alias=True)["backgroundImageUrl"] == "/a.jpg"


def test_url_without_image_rejected():
    with pytest.raises(ValueError):
        HeroBackgroundAttributes(background_image_url="/orphan.jpg")


# ── apply_patch ───────────────────────────────────────────────────────────────

def test_apply_patch_returns_new_record():
    original = HeroBackgroundAttributes()
    updated  = apply_patch(original, {"minHeight": "600px"})
    assert updated.min_height == "600px"
    assert original.min_height == "500px"


def test_apply_patch_snake_case_key():
    assert apply_patch({}, {"content_align": "flex-end"}).content_align == "flex-end"


def test_apply_patch_unknown_key():
    with pytest.raises(ValueError, match="Attribut inconnu"):
        apply_patch({}, {"backgroundVideo": "x.mp4"})


def test_apply_patch_out_of_range():
    with pytest.raises(ValueError):
        apply_patch({}, {"overlayOpacity": 1.5})


# ── Image ─────────────────────────────────────────────────────────────────────

def test_select_image_sets_three_fields():
    a = select_image(None, {"id": 42, "url": "/up/hero.jpg", "alt": "Montagnes"})
    assert (a.background_image_id, a.background_image_url, a.background_image_alt) == (42, "/up/hero.jpg", "Montagnes")


def test_select_image_from_object_without_alt():
    a = select_image({}, SimpleNamespace(id=9, url="/up/x.jpg", alt=None))
    assert a.background_image_id == 9
    assert a.background_image_alt == ""


def test_select_image_requires_id():
    with pytest.raises(ValueError):
        select_image({}, {"id": 0, "url": "/up/x.jpg"})


def test_remove_image(with_image):
    a = remove_image(with_image)
    assert (a.background_image_id, a.background_image_url, a.background_image_alt) == (0, "", "")
    assert a.min_height == with_image.min_height


# ── Layout ────────────────────────────────────────────────────────────────────

def test_set_min_height():
    assert set_min_height({}, "100vh").min_height == "100vh"


def test_set_min_height_invalid():
    with pytest.raises(ValueError, match="minHeight"):
        set_min_height({}, "42px")


def test_set_content_align_invalid():
    with pytest.raises(ValueError, match="contentAlign"):
        set_content_align({}, "stretch")


# ── Overlay ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("value, expected", [(1.7, 1.0), (-0.3, 0.0), (0.42, 0.4), (0.66, 0.7), (0, 0.0)])
def test_set_overlay_opacity_clamped_and_stepped(value, expected):
    assert set_overlay_opacity({}, value).overlay_opacity == expected


def test_set_overlay_opacity_nan():
    with pytest.raises(ValueError):
        set_overlay_opacity({}, float("nan"))


def test_set_overlay_color():
    assert set_overlay_color({}, "#ff0000").overlay_color == "#ff0000"


def test_set_overlay_color_invalid():
    with pytest.raises(ValueError):
        set_overlay_color({}, "red; background:url(x)")


# ── Panneaux ──────────────────────────────────────────────────────────────────

def test_editor_controls_panels():
    panels = editor_controls(lang="en")
    assert [p["title"] for p in panels] == ["Background Settings", "Layout Settings", "Overlay Settings"]


def test_editor_controls_select_image_label():
    media = editor_controls(lang="en")[0]["controls"][0]
    assert media["button_label"] == "Select Image"
    assert "remove_label" not in media


def test_editor_controls_change_and_remove(with_image):
    media = editor_controls(with_image, lang="en")[0]["controls"][0]
    assert media["button_label"] == "Change Image"
    assert media["remove_label"] == "Remove Image"
    assert media["value"] == 42


def test_editor_controls_options():
    layout = editor_controls(lang="en")[1]["controls"]
    assert [o["value"] for o in layout[0]["options"]] == ["300px", "400px", "500px", "600px", "100vh"]
    assert [o["label"] for o in layout[1]["options"]] == ["Top", "Center", "Bottom"]
    opacity = editor_controls(lang="en")[2]["controls"][0]
    assert (opacity["min"], opacity["max"], opacity["step"]) == (0.0, 1.0, 0.1)


def test_editor_controls_french():
    assert editor_controls(lang="fr")[0]["title"] == "Image de fond"


def test_inner_blocks_template():
    template = inner_blocks_template("en")
    assert template[0] == ["core/heading", {"level": 1, "placeholder": "Add heading…"}]
    assert template[1][0] == "core/paragraph"


# ── Preview ───────────────────────────────────────────────────────────────────

def test_preview_style_without_image():
    style = editor_preview_style({})
    assert style["background-image"] == "none"
    assert style["position"] == "relative"


def test_preview_style_with_image(with_image):
    style = editor_preview_style(with_image)
    assert style["background-image"] == "url(/up/hero.jpg)"
    assert style["min-height"] == "500px"
