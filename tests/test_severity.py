import pytest

from plogpy.severity import Severity, severity_from_string, severity_to_string


@pytest.mark.parametrize(
    "severity, name",
    [
        (Severity.FATAL, "FATAL"),
        (Severity.ERROR, "ERROR"),
        (Severity.WARNING, "WARN"),
        (Severity.INFO, "INFO"),
        (Severity.DEBUG, "DEBUG"),
        (Severity.VERBOSE, "VERB"),
        (Severity.NONE, "NONE"),
    ],
)
def test_severity_to_string(severity, name):
    assert severity_to_string(severity) == name


def test_unknown_value_is_none():
    assert severity_to_string(42) == "NONE"


def test_ordering_follows_verbosity():
    names = [severity_to_string(s) for s in sorted(Severity)]
    assert names == ["NONE", "FATAL", "ERROR", "WARN", "INFO", "DEBUG", "VERB"]
    assert (
        severity_from_string("F")
        < severity_from_string("E")
        < severity_from_string("W")
        < severity_from_string("I")
    )


@pytest.mark.parametrize("severity", list(Severity))
def test_round_trip_through_name(severity):
    assert severity_from_string(severity_to_string(severity)) is severity


@pytest.mark.parametrize("severity", [s for s in Severity if s is not Severity.NONE])
def test_from_string_is_case_insensitive(severity):
    name = severity_to_string(severity)
    assert severity_from_string(name.lower()) is severity


def test_from_string_uses_first_letter_only():
    assert severity_from_string("warning") is Severity.WARNING
    assert severity_from_string("Verbose") is Severity.VERBOSE


@pytest.mark.parametrize("text", ["", "x", "NONE", "?"])
def test_from_string_unknown_is_none(text):
    assert severity_from_string(text) is Severity.NONE