"""Animation configuration model.

A single `AnimationConfig` drives the live preview binder and every export
backend. Defaults for optional fields live here and nowhere else, so a
partially specified config previews and exports identically.
"""
from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator


class AnimationType(str, Enum):
    """Animation families supported by the engine."""
    FADE = "fade"
    SLIDE = "slide"
    SCALE = "scale"
    ROTATE = "rotate"
    BOUNCE = "bounce"


class EasingFunction(str, Enum):
    """Named CSS easing curves."""
    LINEAR = "linear"
    EASE = "ease"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"


ELASTIC_EASING = "cubic-bezier(0.175, 0.885, 0.32, 1.275)"

NAMED_EASINGS = {e.value for e in EasingFunction}
CUBIC_BEZIER_RE = re.compile(
    r"^cubic-bezier\(\s*(-?\d*\.?\d+)\s*,\s*(-?\d*\.?\d+)\s*,\s*(-?\d*\.?\d+)\s*,\s*(-?\d*\.?\d+)\s*\)$"
)

DEFAULT_DURATION = 0.5
DEFAULT_DELAY = 0.0
DEFAULT_EASING = EasingFunction.EASE_OUT.value
DEFAULT_OPACITY_START = 0.0
DEFAULT_OPACITY_END = 1.0
# Slide offset and bounce height share one magnitude.
DEFAULT_DISTANCE = 50.0
DEFAULT_AXIS = "x"
DEFAULT_SCALE = 0.8
DEFAULT_DEGREES = 360.0


class ConfigLoadError(ValueError):
    """Raised when a persisted configuration payload cannot be turned into a config."""


class OpacityRange(BaseModel):
    start: float = Field(..., ge=0, le=1)
    end: float = Field(..., ge=0, le=1)

    model_config = {"frozen": True, "allow_inf_nan": False}


class DegreeRange(BaseModel):
    start: float = 0.0
    end: float

    model_config = {"frozen": True, "allow_inf_nan": False}


class AnimationConfig(BaseModel):
    type: AnimationType
    duration: float = Field(..., gt=0)
    delay: float = Field(..., ge=0)
    easing: str
    opacity: Optional[OpacityRange] = None
    distance: Optional[float] = None
    axis: Optional[Literal["x", "y"]] = None
    scale: Optional[float] = Field(default=None, gt=0)
    degrees: Optional[DegreeRange] = None
    name: Optional[str] = None
    description: Optional[str] = None

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "allow_inf_nan": False,
    }

    @field_validator("easing")
    @classmethod
    def _check_easing(cls, value: str) -> str:
        token = value.strip()
        if token in NAMED_EASINGS:
            return token
        match = CUBIC_BEZIER_RE.match(token)
        if match:
            return "cubic-bezier(" + ", ".join(match.groups()) + ")"
        raise ValueError(f"Unsupported easing: {value!r}")

    @field_validator("degrees", mode="before")
    @classmethod
    def _normalize_degrees(cls, value: Any) -> Any:
        # A bare angle is the end of a rotation that starts at zero.
        if isinstance(value, bool):
            raise ValueError("degrees must be a number or a {start, end} range")
        if isinstance(value, (int, float)):
            return {"start": 0.0, "end": value}
        return value

    @property
    def type_name(self) -> str:
        """Raw type value; tolerates configs built without validation."""
        return str(getattr(self.type, "value", self.type))

    def resolved_opacity(self) -> OpacityRange:
        if self.opacity is None:
            return OpacityRange(start=DEFAULT_OPACITY_START, end=DEFAULT_OPACITY_END)
        return self.opacity

    def resolved_distance(self) -> float:
        return DEFAULT_DISTANCE if self.distance is None else self.distance

    def resolved_axis(self) -> str:
        return self.axis or DEFAULT_AXIS

    def resolved_scale(self) -> float:
        return DEFAULT_SCALE if self.scale is None else self.scale

    def resolved_degrees(self) -> DegreeRange:
        if self.degrees is None:
            return DegreeRange(start=0.0, end=DEFAULT_DEGREES)
        return self.degrees

    def to_payload(self) -> Dict[str, Any]:
        """JSON-safe dict in the shape the storage collaborator persists."""
        return self.model_dump(mode="json", exclude_none=True)


DEFAULT_ANIMATION_CONFIG = AnimationConfig(
    type=AnimationType.FADE,
    duration=DEFAULT_DURATION,
    delay=DEFAULT_DELAY,
    easing=DEFAULT_EASING,
)

_REQUIRED_FIELDS = ("type", "duration", "delay", "easing")


def config_from_payload(payload: Union[str, bytes, Dict[str, Any]]) -> AnimationConfig:
    """Rebuild a config from persisted data.

    Missing required fields fall back to `DEFAULT_ANIMATION_CONFIG`; optional
    fields stay absent so the shared defaults apply downstream.
    """
    if isinstance(payload, (str, bytes)):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(f"Invalid configuration data: {exc}") from exc
    else:
        data = payload

    if not isinstance(data, dict):
        raise ConfigLoadError("Configuration data must be a JSON object")

    merged = DEFAULT_ANIMATION_CONFIG.model_dump(mode="json", include=set(_REQUIRED_FIELDS))
    merged.update({k: v for k, v in data.items() if v is not None})
    try:
        return AnimationConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid configuration data: {exc.error_count()} error(s)") from exc
