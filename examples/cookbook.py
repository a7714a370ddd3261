from __future__ import annotations

import logging

from latebind import RecordingSink, logged, mega, really


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print(really())
    print(logged())

    sink = RecordingSink()
    logged("cool", sink=sink)
    print(f"recorded: {sink.values()}")

    print(mega())


if __name__ == "__main__":
    main()
