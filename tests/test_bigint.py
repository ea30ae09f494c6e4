import json
import sys

import pytest

from primval.internals.errors import DecodeError
from primval.semantics.bigint import big_int_of_json, big_int_to_json, compare_big_int, show_big_int

SAMPLES = [0, 1, -1, 255, -128, 2**63 - 1, 2**64, -(2**127), 2**128 - 1, 2**200, -(2**200)]


@pytest.mark.parametrize("n", SAMPLES)
def test_round_trip(n):
    assert big_int_of_json(big_int_to_json(n)) == n


@pytest.mark.parametrize("n", SAMPLES)
def test_round_trip_through_json_text(n):
    text = json.dumps(big_int_to_json(n))
    assert big_int_of_json(json.loads(text)) == n


def test_encoding_is_always_a_string():
    assert big_int_to_json(5) == "5"
    assert big_int_to_json(-5) == "-5"
    assert isinstance(big_int_to_json(2**200), str)


def test_decodes_native_json_integer():
    assert big_int_of_json(42) == 42
    assert big_int_of_json(-7) == -7


def test_thirty_digit_literal_scenario():
    decoded = big_int_of_json(json.loads("123456789012345678901234567890"))
    assert decoded == 123456789012345678901234567890
    assert big_int_to_json(decoded) == "123456789012345678901234567890"


@pytest.mark.parametrize("literal, expected", [
    ("0", 0),
    ("-42", -42),
    ("+42", 42),
    ("007", 7),
    ("1606938044258990275541962092341162602522202993782792835301376", 2**200),
])
def test_decodes_string_literals(literal, expected):
    assert big_int_of_json(literal) == expected


@pytest.mark.parametrize("bad", [True, False, None, 1.5, 1.0, [], [1], {}, {"value": 1},
                                 "", "abc", "1.5", "1e3", " 12", "1_000", "--1"])
def test_decode_failure(bad):
    with pytest.raises(DecodeError) as exc_info:
        big_int_of_json(bad)
    assert str(exc_info.value) == "not an integer or an integer literal"
    assert exc_info.value.code == "CE4001"


def test_decode_failure_records_path():
    with pytest.raises(DecodeError) as exc_info:
        big_int_of_json(None, "$[3].Scalar.value")
    assert exc_info.value.path == "$[3].Scalar.value"


def test_show_is_canonical_decimal():
    assert show_big_int(0) == "0"
    assert show_big_int(-15) == "-15"
    assert show_big_int(big_int_of_json("000120")) == "120"
    assert show_big_int(2**70) == "1180591620717411303424"


@pytest.mark.parametrize("a, b, expected", [
    (1, 2, -1), (2, 1, 1), (3, 3, 0),
    (-(2**200), 2**200, -1), (2**200, 2**200 - 1, 1),
])
def test_compare(a, b, expected):
    assert compare_big_int(a, b) == expected


HUGE = 10**5000


@pytest.mark.parametrize("n", [HUGE, -HUGE, HUGE + 1], ids=["10**5000", "-10**5000", "10**5000+1"])
def test_round_trip_past_the_int_digit_limit(n):
    encoded = big_int_to_json(n)
    assert len(encoded.lstrip("-")) >= 5001
    assert big_int_of_json(encoded) == n
    assert big_int_of_json(json.loads(json.dumps(encoded))) == n


def test_decodes_five_thousand_digit_literal():
    literal = "9" * 5000
    assert big_int_of_json(literal) == 10**5000 - 1
    assert show_big_int(10**5000 - 1) == literal


def test_digit_limit_is_restored():
    limit = sys.get_int_max_str_digits()
    big_int_of_json("1" * 5000)
    show_big_int(HUGE)
    assert sys.get_int_max_str_digits() == limit
