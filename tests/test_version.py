"""Tests for server version parsing and ordering."""

import pytest

from maasapi.errors import NotValidError
from maasapi.version import TWO_DOT_OH, Version


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2", Version(2, 0, 0)),
        ("2.0", Version(2, 0, 0)),
        ("2.1.9", Version(2, 1, 9)),
        (" 1.9.0 ", Version(1, 9, 0)),
    ],
)
def test_parse(text, expected):
    assert Version.parse(text) == expected


def test_parse_passes_versions_through():
    assert Version.parse(TWO_DOT_OH) is TWO_DOT_OH


@pytest.mark.parametrize("text", ["", "2.x", "2.0.0.1", "-1.0", "two", "2.\u00b2"])
def test_parse_rejects_malformed(text):
    with pytest.raises(NotValidError):
        Version.parse(text)


def test_parse_rejects_non_string():
    with pytest.raises(NotValidError):
        Version.parse(2.0)


def test_ordering_is_dotted_precedence():
    assert Version.parse("1.9.0") < TWO_DOT_OH < Version.parse("2.0.1") < Version.parse("2.10")
    assert sorted([Version(2, 1), Version(1, 9), Version(2, 0, 5)]) == [
        Version(1, 9),
        Version(2, 0, 5),
        Version(2, 1),
    ]


def test_str():
    assert str(Version.parse("2.0")) == "2.0.0"
