import logging

import pytest

from latebind.behaviors import prefix
from latebind.call_sites import logged, mega, really
from latebind.kernel import RecordingSink, build_message
from fakes import RaisingSink, SinkFailed


def test_really_prefixes_base_message() -> None:
    assert really() == "really super awesome"
    assert really("neat") == "really super neat"


def test_logged_returns_base_message_and_emits_it() -> None:
    sink = RecordingSink()

    assert logged(sink=sink) == "super cool"
    assert sink.values() == ["super cool"]
    assert sink.emissions[0].label == "logged"


def test_logged_default_sink_writes_log(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="latebind"):
        result = logged("cool")

    assert result == "super cool"
    assert [r.getMessage() for r in caplog.records] == ["super cool"]


def test_mega_prefixes_base_message() -> None:
    assert mega() == "mega super rad"


def test_changing_one_customization_leaves_other_site_alone() -> None:
    customizations = {"first": prefix("really "), "second": prefix("mega ")}

    def first_site(value: str) -> str:
        return build_message(value, customizations["first"])

    def second_site(value: str) -> str:
        return build_message(value, customizations["second"])

    before = second_site("rad")
    assert first_site("awesome") == "really super awesome"

    customizations["first"] = prefix("giga ")

    assert first_site("awesome") == "giga super awesome"
    assert second_site("rad") == before == "mega super rad"


def test_new_call_site_needs_no_helper_change() -> None:
    def shouting(value: str) -> str:
        return build_message(value, str.upper)

    assert shouting("loud") == "SUPER LOUD"
    assert really() == "really super awesome"


def test_logged_sink_error_reaches_caller() -> None:
    with pytest.raises(SinkFailed) as excinfo:
        logged(sink=RaisingSink())

    assert excinfo.value.args == ("super cool",)
