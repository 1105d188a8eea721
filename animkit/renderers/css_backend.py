"""CSS export backend: one class rule plus one `@keyframes` block."""
from __future__ import annotations

from animkit.animation.keyframes import animation_shorthand, render_keyframes
from animkit.animation.schema import AnimationConfig
from animkit.renderers.base import require_family

EXPORT_CLASS_NAME = "animated-element"


def generate_css(config: AnimationConfig) -> str:
    """Return a standalone stylesheet fragment for `config`.

    Timing and easing are literal; keyframe steps carry the type-specific
    parameters with defaults filled exactly as the preview fills them.
    """
    family = require_family(config)
    lines = [
        f"/* {family.value} animation */",
        f".{EXPORT_CLASS_NAME} {{",
        f"  animation: {animation_shorthand(config)};",
        "}",
        "",
        render_keyframes(config),
    ]
    return "\n".join(lines) + "\n"
