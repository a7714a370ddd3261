from .behaviors import compose, identity, log_through, prefix, suffix, tap
from .call_sites import logged, mega, really
from .kernel import (
    DEFAULT_CONFIG,
    Customization,
    Emission,
    HelperConfig,
    LoggingSink,
    Message,
    RecordingSink,
    SinkPort,
    base_message,
    build_message,
    make_helper,
)

__all__ = [
    # Helper
    "build_message",
    "make_helper",
    "base_message",
    "Message",
    "Customization",
    "HelperConfig",
    "DEFAULT_CONFIG",
    # Behaviors
    "identity",
    "prefix",
    "suffix",
    "tap",
    "log_through",
    "compose",
    # Sinks
    "SinkPort",
    "Emission",
    "RecordingSink",
    "LoggingSink",
    # Call sites
    "really",
    "logged",
    "mega",
]
