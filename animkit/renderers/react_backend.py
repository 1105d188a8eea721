"""React export backends.

Both emit a snapshot of one config: literal timing, easing and parameters,
no runtime parameterization, ready to paste into a consuming project.
"""
from __future__ import annotations

from typing import List

from animkit.animation.keyframes import animation_shorthand, css_number, render_keyframes
from animkit.animation.schema import AnimationConfig, AnimationType
from animkit.renderers.base import require_family


def _config_literal(config: AnimationConfig, family: AnimationType) -> List[str]:
    """Body lines of the exported config object, defaults filled in."""
    lines = [
        f"type: '{family.value}',",
        f"duration: {css_number(config.duration)},",
        f"delay: {css_number(config.delay)},",
        f"easing: '{config.easing}',",
    ]
    if family is AnimationType.FADE:
        opacity = config.resolved_opacity()
        lines.append(f"opacity: {{ start: {css_number(opacity.start)}, end: {css_number(opacity.end)} }},")
    elif family is AnimationType.SLIDE:
        lines.append(f"distance: {css_number(config.resolved_distance())},")
        lines.append(f"axis: '{config.resolved_axis()}',")
    elif family is AnimationType.SCALE:
        lines.append(f"scale: {css_number(config.resolved_scale())},")
    elif family is AnimationType.ROTATE:
        rotation = config.resolved_degrees()
        lines.append(f"degrees: {{ start: {css_number(rotation.start)}, end: {css_number(rotation.end)} }},")
    elif family is AnimationType.BOUNCE:
        lines.append(f"distance: {css_number(config.resolved_distance())},")
    return lines


def _preamble(config: AnimationConfig, family: AnimationType, heading: str) -> List[str]:
    name = " ".join((config.name or "").split())
    lines = ["import React from 'react';", ""]
    lines.append(f"// {heading}: {name}" if name else f"// {heading}")
    lines.append(f"export const {family.value}AnimationConfig = {{")
    lines.extend(f"  {line}" for line in _config_literal(config, family))
    lines.append("};")
    lines.append("")
    lines.append(f"const {family.value}Keyframes = `{render_keyframes(config)}`;")
    lines.append("")
    return lines


def generate_react(config: AnimationConfig) -> str:
    """Return a functional component that animates its single child."""
    family = require_family(config)
    component = f"{family.value.capitalize()}Animation"
    lines = _preamble(config, family, f"{family.value} animation snapshot")
    lines.extend(
        [
            f"export const {component} = ({{ children }}) => {{",
            "  const child = React.Children.only(children);",
            "  return (",
            "    <>",
            f"      <style>{{{family.value}Keyframes}}</style>",
            "      {React.cloneElement(child, {",
            f"        style: {{ ...child.props.style, animation: '{animation_shorthand(config)}' }},",
            "      })}",
            "    </>",
            "  );",
            "};",
            "",
            "// Usage:",
            f"// <{component}>",
            "//   <p>This content will be animated!</p>",
            f"// </{component}>",
        ]
    )
    return "\n".join(lines) + "\n"


def generate_hoc(config: AnimationConfig) -> str:
    """Return a higher-order component that adds the animation to any component."""
    family = require_family(config)
    hoc = f"with{family.value.capitalize()}Animation"
    lines = _preamble(config, family, f"{family.value} animation HOC")
    lines.extend(
        [
            f"export function {hoc}(WrappedComponent) {{",
            "  const Animated = React.forwardRef((props, ref) => (",
            "    <>",
            f"      <style>{{{family.value}Keyframes}}</style>",
            "      <WrappedComponent",
            "        {...props}",
            "        ref={ref}",
            f"        style={{{{ ...props.style, animation: '{animation_shorthand(config)}' }}}}",
            "      />",
            "    </>",
            "  ));",
            "  const wrappedName = WrappedComponent.displayName || WrappedComponent.name || 'Component';",
            f"  Animated.displayName = `{hoc}(${{wrappedName}})`;",
            "  return Animated;",
            "}",
            "",
            "// Usage:",
            f"// const AnimatedCard = {hoc}(Card);",
        ]
    )
    return "\n".join(lines) + "\n"
