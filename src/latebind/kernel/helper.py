"""Helper - shared computation with a single customization point."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from latebind.kernel.message import Customization, Message, base_message

V = TypeVar("V")
M = TypeVar("M")


def build_message(value: str, customize: Customization) -> Message:
    """Build the base message for ``value`` and hand it to ``customize``.

    The callable is invoked exactly once and its return value is passed
    through unchanged. Errors raised by it propagate as-is.

    Args:
        value: Input the base message is formatted from
        customize: Caller-supplied callable applied to the base message

    Returns:
        Whatever ``customize`` returns
    """
    return customize(base_message(value))


def make_helper(base: Callable[[V], M]) -> Callable[[V, Callable[[M], M]], M]:
    """Turn a base computation into a helper with the same compute-then-apply shape.

    Args:
        base: Function computing the value handed to the customization

    Returns:
        New helper taking ``(value, customize)``
    """
    def helper(value: V, customize: Callable[[M], M]) -> M:
        return customize(base(value))

    helper.__name__ = f"helper_for_{getattr(base, '__name__', 'base')}"
    return helper
