"""Animation model, family definitions and the live preview binder."""

from animkit.animation.schema import (
    AnimationConfig,
    AnimationType,
    ConfigLoadError,
    DegreeRange,
    EasingFunction,
    OpacityRange,
    DEFAULT_ANIMATION_CONFIG,
    DEFAULT_DISTANCE,
    config_from_payload,
)
from animkit.animation.element import StyledElement
from animkit.animation.binder import BinderState, PreviewBinder, bind
from animkit.animation.preview import render_preview_html

__all__ = [
    "AnimationConfig",
    "AnimationType",
    "ConfigLoadError",
    "DegreeRange",
    "EasingFunction",
    "OpacityRange",
    "DEFAULT_ANIMATION_CONFIG",
    "DEFAULT_DISTANCE",
    "config_from_payload",
    "StyledElement",
    "BinderState",
    "PreviewBinder",
    "bind",
    "render_preview_html",
]
