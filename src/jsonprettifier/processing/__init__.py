"""Public API surface for jsonprettifier.processing."""
__all__ = [
    "comment_stripper",
]
