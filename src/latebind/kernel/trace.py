"""Effect sinks - where side-effecting customizations report what they saw.

Sinks are infrastructure: they observe messages, never change them.
"""

from __future__ import annotations

import logging

from latebind.kernel.message import Emission, Message


class RecordingSink:
    """In-memory sink that keeps every emission in arrival order."""

    def __init__(self) -> None:
        self._emissions: list[Emission] = []

    @property
    def emissions(self) -> tuple[Emission, ...]:
        return tuple(self._emissions)

    def send(self, entry: Emission) -> None:
        self._emissions.append(entry)

    def values(self) -> list[Message]:
        """Emitted message values, oldest first."""
        return [e.value for e in self._emissions]

    def clear(self) -> None:
        self._emissions.clear()


class LoggingSink:
    """Sink that forwards emissions to a stdlib logger.

    The log message is the emitted value itself; the label travels in
    ``extra`` as ``emission_label``.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger("latebind")
        self.level = level

    def send(self, entry: Emission) -> None:
        self.logger.log(self.level, "%s", entry.value, extra={"emission_label": entry.label})
