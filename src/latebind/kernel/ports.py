"""Port protocols for effect sinks."""

from __future__ import annotations

from typing import Protocol

from latebind.kernel.message import Emission


class SinkPort(Protocol):
    """Destination for emissions produced by side-effecting customizations."""

    def send(self, entry: Emission) -> None:
        """Deliver one emission."""
        ...
