"""Customization builders: identity, prefix, suffix, tap, log_through, compose."""

# Builders satisfy the following laws:
#
# 1. Identity: build_message(m, identity) == base_message(m)
#    The helper with a pass-through customization is the base computation
#
# 2. Composition is associative: compose(f, compose(g, h)) == compose(compose(f, g), h)
#    Grouping of chained customizations does not matter
#
# 3. Tap is transparent: tap(effect)(m) == m
#    Effects observe the message, never change it


from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from latebind.kernel.message import Customization, Emission, Message
from latebind.kernel.ports import SinkPort
from latebind.kernel.trace import LoggingSink

logger = logging.getLogger(__name__)


def identity(message: Message) -> Message:
    """Pass-through customization."""
    return message


def _require_text(text: Any, builder: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"{builder}() expects str, got {type(text).__name__}")
    return text


def prefix(text: str) -> Customization:
    """Build a customization that puts ``text`` in front of the message.

    Args:
        text: String to prepend, used verbatim (include any separator)

    Returns:
        Customization producing ``text + message``
    """
    head = _require_text(text, "prefix")

    def _prefix(message: Message) -> Message:
        return head + message

    return _prefix


def suffix(text: str) -> Customization:
    """Build a customization that appends ``text`` to the message."""
    tail = _require_text(text, "suffix")

    def _suffix(message: Message) -> Message:
        return message + tail

    return _suffix


def tap(effect: Callable[[Message], Any]) -> Customization:
    """Build a customization that runs ``effect`` and passes the message through.

    The effect's return value is ignored. Errors raised by the effect
    propagate to the caller.
    """
    if not callable(effect):
        raise TypeError(f"tap() expects a callable, got {type(effect).__name__}")

    def _tap(message: Message) -> Message:
        effect(message)
        return message

    return _tap


def log_through(sink: SinkPort | None = None, label: str = "") -> Customization:
    """Build a customization that reports the message to ``sink`` and returns it unchanged.

    Args:
        sink: Destination for the emission; defaults to a LoggingSink
        label: Tag attached to every emission from this customization

    Returns:
        Customization with a single observable side effect
    """
    target = sink if sink is not None else LoggingSink()
    tag = _require_text(label, "log_through")

    def _send(message: Message) -> None:
        target.send(Emission(label=tag, value=message))

    return tap(_send)


def compose(*fns: Customization) -> Customization:
    """Compose customizations from right to left.

    ``compose(f, g)(m) == f(g(m))``; ``compose()`` is the identity.
    """
    for fn in fns:
        if not callable(fn):
            raise TypeError(f"compose() expects callables, got {type(fn).__name__}")
    if not fns:
        return identity

    def _composed(message: Message) -> Message:
        for fn in reversed(fns):
            message = fn(message)
        return message

    logger.debug("composed %d customizations", len(fns))
    return _composed
