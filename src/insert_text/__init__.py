"""Line-addressed text file editor behind the ``it`` command."""

__all__ = [
    "adapters",
    "buffer",
    "operations",
    "runtime",
    "config",
    "errors",
    "runner",
    "cli",
]

__version__ = "1.0.0"
