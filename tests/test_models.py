"""Tests for result models, options and exceptions."""

from __future__ import annotations

import pytest

from projdiff.core.exceptions import (
    CannotFindError,
    ComparatorError,
    ConfigurationError,
    GenericError,
    handle_exception,
)
from projdiff.core.models import (
    ComparatorParameters,
    CompareDetails,
    CompareError,
    DifferentValue,
    Format,
    Mode,
    Option,
)


def test_details_without_differences_are_same():
    assert CompareDetails(tag="targets").same() is True
    assert CompareDetails(tag="targets", description="only text").same() is True


@pytest.mark.parametrize("kwargs", [
    {"only_in_first": ["a"]},
    {"only_in_second": ["b"]},
    {"different_values": [DifferentValue("K", "1", "2")]},
])
def test_details_with_any_difference_are_not_same(kwargs):
    assert CompareDetails(tag="targets", **kwargs).same() is False


def test_different_value_uses_nil_for_missing():
    value = DifferentValue("KEY", None, 5)

    assert value.first == "nil"
    assert value.second == "5"


def test_compare_error_requires_errors():
    with pytest.raises(ValueError):
        CompareError(tag="settings")


def test_compare_error_is_never_same():
    error = CompareError(tag="settings", errors=[GenericError("a"), GenericError(""), GenericError("b")])

    assert error.same() is False
    assert error.description == "- a\n- b"


def test_option_filter_keeps_available_order():
    option = Option.only("Release", "Debug")

    assert option.filter(["Debug", "Beta", "Release"], "configuration") == ["Debug", "Release"]
    assert option.contains("Debug")
    assert not option.contains("Beta")


def test_option_filter_missing_name():
    with pytest.raises(CannotFindError) as exc_info:
        Option.only("Widget").filter(["App"], "target")

    assert exc_info.value.details == {"kind": "target", "value": "Widget"}
    assert exc_info.value.code == "CANNOT_FIND"


def test_option_all():
    option = Option.all()

    assert option.is_all
    assert option.filter(["a", "b"], "target") == ["a", "b"]
    assert option.contains("anything")


def test_parameters_from_names():
    parameters = ComparatorParameters.from_names(targets=["App"])

    assert parameters.targets == Option.only("App")
    assert parameters.configurations.is_all


def test_mode_from_config():
    mode = Mode.from_config({
        "output": {"format": "Markdown", "verbose": True},
        "comparison": {"differences_only": True},
    })

    assert mode == Mode(format=Format.MARKDOWN, verbose=True, differences_only=True)


def test_error_string_and_description():
    error = ComparatorError("bad element", tag="sources")

    assert str(error) == "[COMPARATOR_ERROR] bad element"
    assert error.description == "bad element"
    assert error.to_dict()["details"] == {"tag": "sources"}


def test_generic_error_wrap():
    error = GenericError.wrap(KeyError("x"))

    assert error.details == {"exception_type": "KeyError"}


def test_handle_foreign_exception():
    assert handle_exception(RuntimeError("boom")) == {
        "error": "boom",
        "code": "UNKNOWN_ERROR",
        "details": {"exception_type": "RuntimeError"},
    }


@pytest.mark.parametrize("config", [
    {"output": {"verbose": "false"}},
    {"comparison": {"differences_only": 0}},
    {"comparison": {"continue_after_error": "yes"}},
])
def test_mode_from_config_rejects_non_bool_flags(config):
    with pytest.raises(ConfigurationError):
        Mode.from_config(config)
