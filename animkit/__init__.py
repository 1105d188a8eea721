"""animkit: one animation config, a live preview binder and code export backends."""

__version__ = "0.1.0"
