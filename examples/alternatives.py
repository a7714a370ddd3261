"""Three ways to share "super {value}" between callers.

Only the last one lets a new caller arrive without touching shared code.
"""

from __future__ import annotations

import logging

from latebind import build_message, log_through, prefix

logger = logging.getLogger("alternatives")


# 1. Duplication: every caller repeats the base computation.
def really_duplicated(value: str) -> str:
    return "really " + f"super {value}"


def mega_duplicated(value: str) -> str:
    return "mega " + f"super {value}"


# 2. Caller flag: the helper branches on who called it and must grow
#    a new branch for every new caller.
def build_message_flagged(value: str, caller: str) -> str:
    base = f"super {value}"
    if caller == "really":
        return "really " + base
    if caller == "logged":
        logger.info(base)
        return base
    if caller == "mega":
        return "mega " + base
    raise ValueError(f"unknown caller: {caller}")


# 3. Function value: the helper has one extension point and no idea who called.
def really_injected(value: str) -> str:
    return build_message(value, prefix("really "))


def logged_injected(value: str) -> str:
    return build_message(value, log_through())


def mega_injected(value: str) -> str:
    return build_message(value, prefix("mega "))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    rows = [
        ("duplicated", really_duplicated("awesome"), mega_duplicated("rad")),
        ("flagged", build_message_flagged("awesome", "really"), build_message_flagged("rad", "mega")),
        ("injected", really_injected("awesome"), mega_injected("rad")),
    ]
    for name, first, second in rows:
        print(f"{name:>10}: {first!r}, {second!r}")

    build_message_flagged("cool", "logged")
    logged_injected("cool")
