"""Call sites - each supplies its own customization to the helper."""

from __future__ import annotations

from latebind.behaviors import log_through, prefix
from latebind.kernel import SinkPort, build_message


def really(value: str = "awesome") -> str:
    """Prefix the base message with "really "."""
    return build_message(value, prefix("really "))


def logged(value: str = "cool", sink: SinkPort | None = None) -> str:
    """Report the base message to ``sink`` and return it unchanged."""
    return build_message(value, log_through(sink, label="logged"))


def mega(value: str = "rad") -> str:
    return build_message(value, prefix("mega "))
