"""Public API surface for langpack.processing."""
__all__ = [
    "conditions",
    "placeholder_resolver",
    "segmenter",
    "string_pool",
]
