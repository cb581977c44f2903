"""Line buffer with incremental syntax highlighting for terminal editors."""

__all__ = [
    "adapters",
    "buffer",
    "clusters",
    "highlight",
    "runtime",
]

__version__ = "0.1.0"
