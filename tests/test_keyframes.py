"""Tests for the shared family table: tokens, keyframes, custom properties."""
import pytest

from animkit.animation.keyframes import (
    CLASS_TOKENS,
    FAMILIES,
    animation_shorthand,
    class_token,
    css_number,
    custom_properties,
    is_family_property,
    keyframe_steps,
    keyframes_name,
    preview_stylesheet,
    render_keyframes,
)
from animkit.animation.schema import AnimationConfig


def _config(**overrides) -> AnimationConfig:
    data = {"type": "fade", "duration": 1, "delay": 0, "easing": "ease"}
    data.update(overrides)
    return AnimationConfig(**data)


@pytest.mark.parametrize(
    "value,expected",
    [(1.0, "1"), (0.6, "0.6"), (0, "0"), (-0.0, "0"), (-50, "-50"), (0.25, "0.25")],
)
def test_css_number(value, expected):
    assert css_number(value) == expected


@pytest.mark.parametrize(
    "overrides,token,name",
    [
        ({"type": "fade"}, "fade-in", "fadeIn"),
        ({"type": "slide"}, "slide-in-right", "slideInRight"),
        ({"type": "slide", "distance": 50}, "slide-in-right", "slideInRight"),
        ({"type": "slide", "distance": -50}, "slide-in-left", "slideInLeft"),
        ({"type": "slide", "distance": 20, "axis": "y"}, "slide-in-bottom", "slideInBottom"),
        ({"type": "slide", "distance": -20, "axis": "y"}, "slide-in-top", "slideInTop"),
        ({"type": "scale"}, "scale-in", "scaleIn"),
        ({"type": "rotate"}, "rotate-in", "rotateIn"),
        ({"type": "bounce", "distance": -40}, "bounce-in", "bounceIn"),
    ],
)
def test_class_token_and_keyframes_name(overrides, token, name):
    config = _config(**overrides)
    assert class_token(config) == token
    assert keyframes_name(config) == name


def test_class_tokens_cover_every_family_token():
    assert set(CLASS_TOKENS) == {
        "fade-in", "slide-in-left", "slide-in-right", "slide-in-top",
        "slide-in-bottom", "scale-in", "rotate-in", "bounce-in",
    }


def test_family_property_names():
    assert is_family_property("--slide-distance")
    assert is_family_property("--fade-opacity-start")
    assert not is_family_property("color")
    assert not is_family_property("--brand-color")


def test_unknown_type_resolves_to_nothing():
    config = AnimationConfig.model_construct(type="spin", duration=1, delay=0, easing="ease")
    assert class_token(config) is None
    assert keyframes_name(config) is None
    assert keyframe_steps(config) == []
    assert render_keyframes(config) == ""
    assert animation_shorthand(config) is None
    assert custom_properties(config) == {}


class TestKeyframeSteps:
    def test_fade_defaults_to_full_fade_in(self):
        assert keyframe_steps(_config()) == [("0%", {"opacity": "0"}), ("100%", {"opacity": "1"})]

    def test_slide_keeps_sign_in_keyframes(self):
        steps = keyframe_steps(_config(type="slide", distance=-30))
        assert steps[0] == ("0%", {"transform": "translateX(-30px)"})
        assert steps[-1] == ("100%", {"transform": "translateX(0)"})

    def test_slide_on_y_axis(self):
        steps = keyframe_steps(_config(type="slide", axis="y"))
        assert steps[0][1]["transform"] == "translateY(50px)"

    def test_scale_interpolates_to_one(self):
        steps = keyframe_steps(_config(type="scale", scale=0.5))
        assert [s[1]["transform"] for s in steps] == ["scale(0.5)", "scale(1)"]

    def test_rotate_range(self):
        steps = keyframe_steps(_config(type="rotate", degrees={"start": 45, "end": 90}))
        assert [s[1]["transform"] for s in steps] == ["rotate(45deg)", "rotate(90deg)"]

    def test_bounce_uses_distance_magnitude(self):
        steps = keyframe_steps(_config(type="bounce", distance=-40))
        assert [s[0] for s in steps] == ["0%", "50%", "100%"]
        assert steps[1][1]["transform"] == "translateY(-40px)"


def test_render_keyframes_block():
    assert render_keyframes(_config(type="rotate", degrees=180)) == (
        "@keyframes rotateIn {\n"
        "  0% { transform: rotate(0deg); }\n"
        "  100% { transform: rotate(180deg); }\n"
        "}"
    )


def test_animation_shorthand_uses_literal_values():
    config = _config(type="bounce", duration=0.6, delay=0.25, easing="ease-in")
    assert animation_shorthand(config) == "bounceIn 0.6s ease-in 0.25s both"


class TestCustomProperties:
    def test_timing_written_for_every_family(self):
        props = custom_properties(_config(type="scale", duration=2, delay=0.5, easing="linear"))
        for family in FAMILIES:
            assert props[f"--{family}-duration"] == "2s"
            assert props[f"--{family}-delay"] == "0.5s"
            assert props[f"--{family}-easing"] == "linear"

    def test_type_specific_values_only_when_present(self):
        props = custom_properties(_config(type="fade"))
        assert "--fade-opacity-start" not in props
        props = custom_properties(_config(type="fade", opacity={"start": 0.2, "end": 0.9}))
        assert props["--fade-opacity-start"] == "0.2"
        assert props["--fade-opacity-end"] == "0.9"

    def test_irrelevant_fields_ignored(self):
        props = custom_properties(_config(type="fade", distance=80, scale=2, degrees=45))
        assert not any(k in props for k in ("--slide-distance", "--scale-from", "--rotate-end", "--bounce-height"))

    def test_distance_is_absolute(self):
        assert custom_properties(_config(type="slide", distance=-50))["--slide-distance"] == "50px"
        assert custom_properties(_config(type="bounce", distance=-40))["--bounce-height"] == "40px"

    def test_units(self):
        assert custom_properties(_config(type="rotate", degrees=90))["--rotate-end"] == "90deg"
        assert custom_properties(_config(type="scale", scale=0.75))["--scale-from"] == "0.75"


def test_preview_stylesheet_declares_every_token_with_default_fallbacks():
    css = preview_stylesheet()
    for token in ("fade-in", "slide-in-left", "slide-in-right", "slide-in-top",
                  "slide-in-bottom", "scale-in", "rotate-in", "bounce-in"):
        assert f".{token} {{" in css
    assert "var(--slide-distance, 50px)" in css
    assert "var(--bounce-height, 50px)" in css
    assert "var(--scale-from, 0.8)" in css
    assert "var(--rotate-end, 360deg)" in css
    assert "var(--fade-duration, 0.5s)" in css
