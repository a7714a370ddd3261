"""Message types and the fixed base computation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

Message = str

Customization = Callable[[Message], Message]


class Emission(BaseModel):
    """A message observed by a side-effecting customization."""

    model_config = ConfigDict(frozen=True)

    label: str = ""
    value: Message


@dataclass(frozen=True)
class HelperConfig:
    intensifier: str = "super"


DEFAULT_CONFIG = HelperConfig()


def base_message(value: str, config: HelperConfig = DEFAULT_CONFIG) -> Message:
    """Format the base message for ``value``.

    >>> base_message("awesome")
    'super awesome'
    """
    return f"{config.intensifier} {value}"
