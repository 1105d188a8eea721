"""Backend router: pick an export backend by name and run it."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from animkit.animation.schema import AnimationConfig
from animkit.renderers.base import UnsupportedAnimationTypeError
from animkit.renderers.css_backend import generate_css
from animkit.renderers.react_backend import generate_hoc, generate_react

logger = logging.getLogger(__name__)

BACKENDS: Dict[str, Callable[[AnimationConfig], str]] = {
    "react": generate_react,
    "css": generate_css,
    "hoc": generate_hoc,
}

_ALIASES = {
    "jsx": "react",
    "component": "react",
    "stylesheet": "css",
}


class UnknownBackendError(ValueError):
    """Raised when an export backend name is not registered."""


@dataclass(frozen=True)
class ExportResult:
    backend: str
    text: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_backend(backend: str | None) -> str:
    token = (backend or "").strip().lower()
    token = _ALIASES.get(token, token)
    if token not in BACKENDS:
        raise UnknownBackendError(f"Unknown export type: {backend}")
    return token


def generate(config: AnimationConfig, backend: str) -> str:
    """Run the named backend; raises on an unknown backend or animation type."""
    return BACKENDS[normalize_backend(backend)](config)


def render_export(config: AnimationConfig, backend: str) -> ExportResult:
    """Like `generate`, but returns failures as an error signal instead of text."""
    try:
        name = normalize_backend(backend)
    except UnknownBackendError as exc:
        logger.warning(str(exc))
        return ExportResult(backend=str(backend), text="", error=str(exc))

    try:
        text = BACKENDS[name](config)
    except UnsupportedAnimationTypeError as exc:
        logger.warning(f"Export to {name} skipped: {exc}")
        return ExportResult(backend=name, text="", error=str(exc))
    return ExportResult(backend=name, text=text)
