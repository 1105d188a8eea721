"""Shared pieces of the code export backends."""
from __future__ import annotations

from animkit.animation.keyframes import family_of
from animkit.animation.schema import AnimationConfig, AnimationType


class UnsupportedAnimationTypeError(ValueError):
    """Raised when a config names a type outside the supported families."""

    def __init__(self, animation_type: str):
        super().__init__(f"Unsupported animation type: {animation_type}")
        self.animation_type = animation_type


def require_family(config: AnimationConfig) -> AnimationType:
    family = family_of(config)
    if family is None:
        raise UnsupportedAnimationTypeError(config.type_name)
    return family
