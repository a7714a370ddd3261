import logging

import pytest
from pydantic import ValidationError

from latebind.kernel import Emission, LoggingSink, RecordingSink


def test_emission_is_immutable() -> None:
    emission = Emission(label="x", value="super cool")

    with pytest.raises(ValidationError):
        emission.value = "mutated"  # type: ignore[misc]


def test_recording_sink_keeps_order() -> None:
    sink = RecordingSink()
    sink.send(Emission(value="one"))
    sink.send(Emission(label="b", value="two"))

    assert sink.values() == ["one", "two"]
    assert sink.emissions[1].label == "b"

    sink.clear()
    assert sink.emissions == ()


def test_logging_sink_uses_given_logger_and_level(caplog: pytest.LogCaptureFixture) -> None:
    sink = LoggingSink(logging.getLogger("latebind.tests"), level=logging.WARNING)

    with caplog.at_level(logging.WARNING, logger="latebind.tests"):
        sink.send(Emission(label="site", value="super cool"))

    (record,) = caplog.records
    assert record.name == "latebind.tests"
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "super cool"
    assert record.emission_label == "site"


def test_logging_sink_default_logger() -> None:
    assert LoggingSink().logger.name == "latebind"
