"""Animation family definitions shared by the preview binder and the exporters.

Every consumer asks this module for class tokens, keyframe steps and custom
properties, so the live preview and the exported code cannot drift apart.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from animkit.animation.schema import (
    DEFAULT_DELAY,
    DEFAULT_DISTANCE,
    DEFAULT_DURATION,
    DEFAULT_EASING,
    DEFAULT_OPACITY_END,
    DEFAULT_OPACITY_START,
    DEFAULT_SCALE,
    DEFAULT_DEGREES,
    AnimationConfig,
    AnimationType,
)

FAMILIES: Tuple[str, ...] = tuple(t.value for t in AnimationType)

# Shared by the preview stylesheet and both exporters.
ANIMATION_FILL_MODE = "both"

KeyframeStep = Tuple[str, Dict[str, str]]

_SLIDE_SIDES = {
    ("x", False): "right",
    ("x", True): "left",
    ("y", False): "bottom",
    ("y", True): "top",
}

# Every class token any config can put on an element.
CLASS_TOKENS: Tuple[str, ...] = tuple(
    f"slide-in-{side}" if name == AnimationType.SLIDE.value else f"{name}-in"
    for name in FAMILIES
    for side in (_SLIDE_SIDES.values() if name == AnimationType.SLIDE.value else (None,))
)

_PROPERTY_PREFIXES = tuple(f"--{name}-" for name in FAMILIES)


def is_family_property(name: str) -> bool:
    """True for inline custom properties owned by an animation family."""
    return name.startswith(_PROPERTY_PREFIXES)


def css_number(value: float) -> str:
    """Shortest stable text for a number: 1.0 -> "1", 0.60 -> "0.6"."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


def seconds(value: float) -> str:
    return f"{css_number(value)}s"


def pixels(value: float) -> str:
    return f"{css_number(value)}px"


def degrees(value: float) -> str:
    return f"{css_number(value)}deg"


def family_of(config: AnimationConfig) -> Optional[AnimationType]:
    """Return the active family, or None for a type outside the closed enum."""
    try:
        return AnimationType(config.type_name)
    except ValueError:
        return None


def _slide_side(config: AnimationConfig) -> str:
    return _SLIDE_SIDES[(config.resolved_axis(), config.resolved_distance() < 0)]


def class_token(config: AnimationConfig) -> Optional[str]:
    family = family_of(config)
    if family is None:
        return None
    if family is AnimationType.SLIDE:
        return f"slide-in-{_slide_side(config)}"
    return f"{family.value}-in"


def keyframes_name(config: AnimationConfig) -> Optional[str]:
    family = family_of(config)
    if family is None:
        return None
    if family is AnimationType.SLIDE:
        return "slideIn" + _slide_side(config).capitalize()
    return f"{family.value}In"


def keyframe_steps(config: AnimationConfig) -> List[KeyframeStep]:
    """Literal keyframe steps with every default already filled in."""
    family = family_of(config)
    if family is AnimationType.FADE:
        opacity = config.resolved_opacity()
        return [
            ("0%", {"opacity": css_number(opacity.start)}),
            ("100%", {"opacity": css_number(opacity.end)}),
        ]
    if family is AnimationType.SLIDE:
        distance = config.resolved_distance()
        axis = config.resolved_axis().upper()
        return [
            ("0%", {"transform": f"translate{axis}({pixels(distance)})"}),
            ("100%", {"transform": f"translate{axis}(0)"}),
        ]
    if family is AnimationType.SCALE:
        return [
            ("0%", {"transform": f"scale({css_number(config.resolved_scale())})"}),
            ("100%", {"transform": "scale(1)"}),
        ]
    if family is AnimationType.ROTATE:
        rotation = config.resolved_degrees()
        return [
            ("0%", {"transform": f"rotate({degrees(rotation.start)})"}),
            ("100%", {"transform": f"rotate({degrees(rotation.end)})"}),
        ]
    if family is AnimationType.BOUNCE:
        height = abs(config.resolved_distance())
        return [
            ("0%", {"transform": "translateY(0)"}),
            ("50%", {"transform": f"translateY({pixels(-height)})"}),
            ("100%", {"transform": "translateY(0)"}),
        ]
    return []


def _format_step(offset: str, properties: Dict[str, str]) -> str:
    body = " ".join(f"{name}: {value};" for name, value in properties.items())
    return f"  {offset} {{ {body} }}"


def render_keyframes(config: AnimationConfig) -> str:
    """Render the `@keyframes` block for a config, or "" for an unknown type."""
    name = keyframes_name(config)
    if name is None:
        return ""
    lines = [f"@keyframes {name} {{"]
    lines.extend(_format_step(offset, props) for offset, props in keyframe_steps(config))
    lines.append("}")
    return "\n".join(lines)


def animation_shorthand(config: AnimationConfig) -> Optional[str]:
    """`animation` shorthand with literal timing values."""
    name = keyframes_name(config)
    if name is None:
        return None
    return " ".join(
        [name, seconds(config.duration), config.easing, seconds(config.delay), ANIMATION_FILL_MODE]
    )


def custom_properties(config: AnimationConfig) -> Dict[str, str]:
    """Inline custom properties the preview stylesheet reads.

    Timing is written for all five families so the stylesheet never has to
    branch; type-specific values only when the field is present.
    """
    family = family_of(config)
    if family is None:
        return {}

    props: Dict[str, str] = {}
    for name in FAMILIES:
        props[f"--{name}-duration"] = seconds(config.duration)
    for name in FAMILIES:
        props[f"--{name}-delay"] = seconds(config.delay)
    for name in FAMILIES:
        props[f"--{name}-easing"] = config.easing

    if family is AnimationType.FADE and config.opacity is not None:
        props["--fade-opacity-start"] = css_number(config.opacity.start)
        props["--fade-opacity-end"] = css_number(config.opacity.end)
    elif family is AnimationType.SLIDE and config.distance is not None:
        props["--slide-distance"] = pixels(abs(config.distance))
    elif family is AnimationType.SCALE and config.scale is not None:
        props["--scale-from"] = css_number(config.scale)
    elif family is AnimationType.ROTATE and config.degrees is not None:
        props["--rotate-start"] = degrees(config.degrees.start)
        props["--rotate-end"] = degrees(config.degrees.end)
    elif family is AnimationType.BOUNCE and config.distance is not None:
        props["--bounce-height"] = pixels(abs(config.distance))
    return props


def _preview_rule(token: str, name: str, family: str) -> str:
    return (
        f".{token} {{ animation: {name} "
        f"var(--{family}-duration, {seconds(DEFAULT_DURATION)}) "
        f"var(--{family}-easing, {DEFAULT_EASING}) "
        f"var(--{family}-delay, {seconds(DEFAULT_DELAY)}) {ANIMATION_FILL_MODE}; }}"
    )


def preview_stylesheet() -> str:
    """Pre-declared animation families driven by the binder's custom properties.

    Fallbacks are the model defaults, so an absent optional field previews
    exactly like the exported code.
    """
    slide = f"var(--slide-distance, {pixels(DEFAULT_DISTANCE)})"
    bounce = f"var(--bounce-height, {pixels(DEFAULT_DISTANCE)})"
    lines: List[str] = [
        "/* Preview animation families */",
        _preview_rule("fade-in", "fadeIn", "fade"),
        "@keyframes fadeIn {",
        f"  0% {{ opacity: var(--fade-opacity-start, {css_number(DEFAULT_OPACITY_START)}); }}",
        f"  100% {{ opacity: var(--fade-opacity-end, {css_number(DEFAULT_OPACITY_END)}); }}",
        "}",
    ]
    for side, axis, sign in (("right", "X", ""), ("left", "X", "-1 * "), ("bottom", "Y", ""), ("top", "Y", "-1 * ")):
        name = "slideIn" + side.capitalize()
        start = f"calc({sign}{slide})" if sign else slide
        lines.extend(
            [
                _preview_rule(f"slide-in-{side}", name, "slide"),
                f"@keyframes {name} {{",
                f"  0% {{ transform: translate{axis}({start}); }}",
                f"  100% {{ transform: translate{axis}(0); }}",
                "}",
            ]
        )
    lines.extend(
        [
            _preview_rule("scale-in", "scaleIn", "scale"),
            "@keyframes scaleIn {",
            f"  0% {{ transform: scale(var(--scale-from, {css_number(DEFAULT_SCALE)})); }}",
            "  100% { transform: scale(1); }",
            "}",
            _preview_rule("rotate-in", "rotateIn", "rotate"),
            "@keyframes rotateIn {",
            f"  0% {{ transform: rotate(var(--rotate-start, {degrees(0)})); }}",
            f"  100% {{ transform: rotate(var(--rotate-end, {degrees(DEFAULT_DEGREES)})); }}",
            "}",
            _preview_rule("bounce-in", "bounceIn", "bounce"),
            "@keyframes bounceIn {",
            "  0% { transform: translateY(0); }",
            f"  50% {{ transform: translateY(calc(-1 * {bounce})); }}",
            "  100% { transform: translateY(0); }",
            "}",
        ]
    )
    return "\n".join(lines)
