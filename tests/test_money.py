import pytest

from utils.money import parse_amount


@pytest.mark.parametrize("raw, expected", [
    ("1,250.00", 1250.0),
    ("(12.50)", -12.5),
    ("-€40", -40.0),
    ("$9.999", 10.0),
    ("£ 3", 3.0),
    (-7.25, -7.25),
])
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "()"])
def test_parse_amount_rejects_garbage(raw):
    with pytest.raises(ValueError):
        parse_amount(raw)
