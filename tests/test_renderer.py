"""Tests markup sauvegardé — data-attributes, calques image/overlay, délimiteurs de bloc."""
import json

import pytest

from webvitals_blocks.blocks import HeroBackgroundAttributes
from webvitals_blocks.renderer.html import (
    save, serialize_attributes, serialize_block, serialize_hero_background,
)


@pytest.fixture
def attrs():
    return HeroBackgroundAttributes(
        background_image_id=42,
        background_image_url="/up/hero.jpg",
        background_image_alt="Montagnes",
    )


# ── save ──────────────────────────────────────────────────────────────────────

def test_save_root_element(attrs):
    html = save(attrs, "<h1>Titre</h1>")
    assert html.startswith('<div class="wp-block-webvitals-blocks-hero-background hero-background-block"')
    assert 'style="min-height:500px;align-items:center"' in html
    assert 'data-bg-image-url="/up/hero.jpg"' in html
    assert html.count('data-bg-image-id="42"') == 2


def test_save_image_layer(attrs):
    html = save(attrs)
    assert 'class="hero-background-image"' in html
    assert "background-image:url(/up/hero.jpg);background-size:cover;background-position:center" in html
    assert 'role="img" aria-label="Montagnes"' in html


def test_save_overlay_layer(attrs):
    html = save(attrs)
    assert '<div class="hero-background-overlay" style="background-color:#000000;opacity:0.5"></div>' in html


def test_save_content_wrapper(attrs):
    assert '<div class="hero-background-content"><h1>Titre</h1></div>' in save(attrs, "<h1>Titre</h1>")


def test_save_without_image():
    html = save(HeroBackgroundAttributes())
    assert 'data-bg-image-id=""' in html
    assert 'data-bg-image-url=""' in html
    assert "hero-background-image" not in html


def test_save_without_overlay(attrs):
    html = save(attrs.model_copy(update={"overlay_opacity": 0.0}))
    assert "hero-background-overlay" not in html


def test_save_full_opacity_formatting(attrs):
    assert "opacity:1\"" in save(attrs.model_copy(update={"overlay_opacity": 1.0}))


def test_save_escapes_alt():
    a = HeroBackgroundAttributes(background_image_id=1, background_image_url="/a.jpg", background_image_alt='Vue "mer" & <ciel>')
    assert 'aria-label="Vue &quot;mer&quot; &amp; &lt;ciel&gt;"' in save(a)


def test_save_accepts_block_json():
    html = save({"backgroundImageId": 42, "backgroundImageUrl": "/up/hero.jpg", "minHeight": "100vh"})
    assert "min-height:100vh" in html


# ── Délimiteurs ───────────────────────────────────────────────────────────────

def test_serialize_hero_background(attrs):
    block = serialize_hero_background(attrs, "<p>x</p>")
    first_line = block.split("\n", 1)[0]
    assert first_line == (
        '<!-- wp:webvitals-blocks/hero-background '
        '{"backgroundImageId":42,"backgroundImageUrl":"/up/hero.jpg","backgroundImageAlt":"Montagnes"} -->'
    )
    assert block.endswith("\n<!-- /wp:webvitals-blocks/hero-background -->")
    assert save(attrs, "<p>x</p>") in block


def test_serialize_defaults_omitted():
    block = serialize_hero_background(HeroBackgroundAttributes())
    assert block.startswith("<!-- wp:webvitals-blocks/hero-background -->\n")


def test_serialize_attributes_cannot_close_comment():
    text = serialize_attributes({"a": "x--><b>&"})
    assert text == '{"a":"x\\u002d\\u002d\\u003e\\u003cb\\u003e\\u0026"}'
    assert json.loads(text) == {"a": "x--><b>&"}


def test_serialize_void_block():
    assert serialize_block("acme/spacer", {}) == "<!-- wp:acme/spacer /-->"
    assert serialize_block("acme/spacer", {"h": 2}) == '<!-- wp:acme/spacer {"h":2} /-->'
