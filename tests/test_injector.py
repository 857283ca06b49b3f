"""Tests injecteur — gating sur l'image, script inline, échappement."""
import pytest

from webvitals_blocks.blocks import HeroBackgroundAttributes
from webvitals_blocks.media import ImageSize, InMemoryMediaCatalog, ResponsiveBackground
from webvitals_blocks.renderer.injector import (
    background_image_id, build_background_script, js_string, render_hero_background,
)

MARKUP = '<div class="hero-background-block" data-bg-image-id="42"></div>'


@pytest.fixture
def catalog():
    c = InMemoryMediaCatalog()
    c.add(42, url="url_f", width=1600, sizes={
        "medium": ImageSize(url="url_m", width=400),
        "large":  ImageSize(url="url_l", width=800),
    })
    c.add(7, url="url_full")
    return c


# ── Gating ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("attrs", [{}, {"backgroundImageId": 0}, {"backgroundImageId": ""}, {"backgroundImageId": None}])
def test_no_image_returns_markup_unchanged(catalog, attrs):
    assert render_hero_background(attrs, MARKUP, catalog) is MARKUP


def test_empty_srcset_returns_markup_unchanged(catalog):
    assert render_hero_background({"backgroundImageId": 7}, MARKUP, catalog) == MARKUP


def test_unknown_image_returns_markup_unchanged(catalog):
    assert render_hero_background({"backgroundImageId": 999}, MARKUP, catalog) == MARKUP


def test_script_appended(catalog):
    html = render_hero_background({"backgroundImageId": 42}, MARKUP, catalog)
    assert html.startswith(MARKUP)
    assert "<script>" in html
    assert "var bgImageId = 42;" in html
    assert 'var srcset = "url_m 400w, url_l 800w, url_f 1600w";' in html
    assert 'var sizes = "100vw";' in html
    assert 'var defaultSrc = "url_f";' in html


def test_script_targets_matching_image_layer(catalog):
    html = render_hero_background({"backgroundImageId": 42}, MARKUP, catalog)
    assert '".hero-background-image[data-bg-image-id=\\"" + bgImageId' in html
    assert "img.currentSrc" in html
    assert "DOMContentLoaded" in html


def test_model_attributes_accepted(catalog):
    attrs = HeroBackgroundAttributes(background_image_id=42, background_image_url="url_f")
    assert "<script>" in render_hero_background(attrs, MARKUP, catalog)


def test_size_labels_override(catalog):
    html = render_hero_background({"backgroundImageId": 42}, MARKUP, catalog, size_labels=["large"])
    assert 'var srcset = "url_l 800w";' in html


def test_empty_size_labels_returns_markup_unchanged(catalog):
    assert render_hero_background({"backgroundImageId": 42}, MARKUP, catalog, size_labels=[]) == MARKUP


# ── background_image_id ───────────────────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [(42, 42), ("42", 42), ("abc", 0), (-3, 0), (None, 0)])
def test_background_image_id_is_lenient(raw, expected):
    assert background_image_id({"backgroundImageId": raw}) == expected


# ── Échappement ───────────────────────────────────────────────────────────────

def test_js_string_escapes_script_breakers():
    assert js_string("</script><b>&") == '"\\u003c/script\\u003e\\u003cb\\u003e\\u0026"'


def test_js_string_escapes_quotes_and_line_separators():
    assert js_string('a"b') == '"a\\"b"'
    assert js_string("'") == '"\\u0027"'
    assert js_string("\u2028") == '"\\u2028"'


def test_script_cannot_be_closed_early():
    bg = ResponsiveBackground(srcset="x.jpg 1w", sizes="100vw", src="</script><script>alert(1)//")
    script = build_background_script(42, bg)
    assert script.count("</script>") == 1
    assert script.endswith("</script>")
