"""Kernel layer - the Helper and the abstractions around it."""

from latebind.kernel.helper import build_message, make_helper
from latebind.kernel.message import (
    DEFAULT_CONFIG,
    Customization,
    Emission,
    HelperConfig,
    Message,
    base_message,
)
from latebind.kernel.ports import SinkPort
from latebind.kernel.trace import LoggingSink, RecordingSink

__all__ = [
    "build_message",
    "make_helper",
    "base_message",
    "Message",
    "Customization",
    "HelperConfig",
    "DEFAULT_CONFIG",
    # Sinks
    "SinkPort",
    "Emission",
    "RecordingSink",
    "LoggingSink",
]
