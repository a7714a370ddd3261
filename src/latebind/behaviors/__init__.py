"""Behaviors - builders for customization callables."""

from latebind.behaviors.ops import compose, identity, log_through, prefix, suffix, tap

__all__ = [
    "identity",
    "prefix",
    "suffix",
    "tap",
    "log_through",
    "compose",
]
