import pytest
from knxdpt.literal import parse_int_literal


@pytest.mark.parametrize("text, expected", [
    ("0", 0), ("7", 7), ("31", 31), ("-1", -1), ("+12", 12),
    ("0x1F", 31), ("0XfF", 255), ("#08", 8), ("-0x10", -16),
    ("010", 8), ("00", 0), ("-07", -7),
])
def test_literals(text, expected):
    assert parse_int_literal(text) == expected


@pytest.mark.parametrize("text", [
    "", "08", "0x", "#", "1 1", " 1", "1_0", "0b1", "--1", "0x-1", "true", "1.0", "٣",
])
def test_not_literals(text):
    with pytest.raises(ValueError):
        parse_int_literal(text)
