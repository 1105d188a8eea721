"""Live preview binder.

Applies an `AnimationConfig` to a target element without wrapping it: one
class token selects a pre-declared animation family and inline custom
properties feed it the config's values. The binder is a small state machine
that owns those bindings and always releases them before applying new ones.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from animkit.animation.element import StyledElement
from animkit.animation.keyframes import (
    CLASS_TOKENS,
    class_token,
    custom_properties,
    is_family_property,
    keyframes_name,
)
from animkit.animation.schema import AnimationConfig

logger = logging.getLogger(__name__)

ANIMATION_KEY_ATTR = "data-animation-key"
PLAY_STATE_PROPERTY = "animation-play-state"
ANIMATION_START_EVENT = "animationstart"


class BinderState(str, Enum):
    UNBOUND = "unbound"
    BOUND = "bound"
    RUNNING = "running"
    PAUSED = "paused"


class PreviewBinder:
    """Owns the class token and custom properties written to one element.

    Usable as a context manager; leaving the block unbinds.
    """

    def __init__(self) -> None:
        self.state = BinderState.UNBOUND
        self.config: Optional[AnimationConfig] = None
        self.element: Optional[StyledElement] = None
        # Bumped by replay(); part of the re-trigger key stamped on the element.
        self.key = 0
        self._token: Optional[str] = None

    def __enter__(self) -> "PreviewBinder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unbind()

    @property
    def class_token(self) -> Optional[str]:
        return self._token

    def bind(self, config: AnimationConfig, element: Optional[StyledElement]) -> "PreviewBinder":
        """Apply `config` to `element`; a missing element releases and does nothing."""
        if element is None:
            logger.debug("No preview element to bind to")
            self.unbind()
            return self

        if (
            element is self.element
            and config == self.config
            and self.state in (BinderState.RUNNING, BinderState.PAUSED)
        ):
            return self

        if element is not self.element:
            self._release()
            self.element = element
        self.config = config
        self._apply()
        return self

    def replay(self) -> None:
        """Restart the animation from the beginning."""
        if self.state not in (BinderState.RUNNING, BinderState.PAUSED):
            logger.debug(f"replay ignored in state {self.state.value}")
            return
        self.key += 1
        self._apply()

    def pause(self) -> None:
        if self.state is not BinderState.RUNNING:
            logger.debug(f"pause ignored in state {self.state.value}")
            return
        self.element.set_property(PLAY_STATE_PROPERTY, "paused")
        self.state = BinderState.PAUSED

    def resume(self) -> None:
        if self.state is not BinderState.PAUSED:
            logger.debug(f"resume ignored in state {self.state.value}")
            return
        self.element.set_property(PLAY_STATE_PROPERTY, "running")
        self.state = BinderState.RUNNING

    def unbind(self) -> None:
        self._release()
        self.element = None
        self.config = None
        self.state = BinderState.UNBOUND

    def _apply(self) -> None:
        self._clear()
        token = class_token(self.config)
        if token is None:
            logger.warning(f"Unsupported animation type {self.config.type_name!r}; preview disabled")
            self.state = BinderState.BOUND
            return

        element = self.element
        element.add_class(token)
        self._token = token
        props = custom_properties(self.config)
        for name, value in props.items():
            element.set_property(name, value)
        element.set_attribute(ANIMATION_KEY_ATTR, str(self.key))
        self.state = BinderState.RUNNING
        logger.debug(f"Bound {token} with {len(props)} properties (key={self.key})")
        element.dispatch_event(
            ANIMATION_START_EVENT,
            {"animationName": keyframes_name(self.config), "key": self.key},
        )

    def _clear(self) -> None:
        # Removes every family token and property, including ones left by
        # another binder on the same element.
        element = self.element
        if element is None:
            return
        for token in CLASS_TOKENS:
            element.remove_class(token)
        for name in [n for n in element.style if is_family_property(n)]:
            element.remove_property(name)
        element.remove_property(PLAY_STATE_PROPERTY)
        element.remove_attribute(ANIMATION_KEY_ATTR)
        self._token = None

    def _release(self) -> None:
        if self.element is not None:
            self._clear()


def bind(config: AnimationConfig, element: Optional[StyledElement]) -> PreviewBinder:
    """Bind `config` to `element` and return the controls."""
    return PreviewBinder().bind(config, element)
