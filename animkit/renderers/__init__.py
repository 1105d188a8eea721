"""Code export backends."""

from animkit.renderers.base import UnsupportedAnimationTypeError
from animkit.renderers.css_backend import generate_css
from animkit.renderers.react_backend import generate_hoc, generate_react
from animkit.renderers.router import (
    BACKENDS,
    ExportResult,
    UnknownBackendError,
    generate,
    normalize_backend,
    render_export,
)

__all__ = [
    "UnsupportedAnimationTypeError",
    "generate_css",
    "generate_react",
    "generate_hoc",
    "BACKENDS",
    "ExportResult",
    "UnknownBackendError",
    "generate",
    "normalize_backend",
    "render_export",
]
