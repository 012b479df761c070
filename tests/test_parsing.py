import pytest

from pushswap.parsing import (
    InputError,
    format_list,
    has_double_sign,
    has_duplicates,
    has_valid_characters,
    is_well_formed,
    parse_arguments,
    parse_int,
    split_words,
)


def test_split_words_skips_repeated_separators():
    assert split_words("1 2  3", " ") == ["1", "2", "3"]


def test_split_words_skips_leading_tab():
    assert split_words("\t5 6", " ") == ["5", "6"]


def test_split_words_empty():
    assert split_words("", " ") == []
    assert split_words("    ", " ") == []


def test_split_words_trailing_tab_gives_empty_word():
    assert split_words("5 \t", " ") == ["5", ""]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  +7", 7),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
    ],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_int_out_of_range(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_has_valid_characters():
    assert has_valid_characters("1 -2 +3") is True
    assert has_valid_characters("1a") is False
    assert has_valid_characters("1.5") is False


def test_has_double_sign():
    assert has_double_sign(["--1"]) is True
    assert has_double_sign(["1", "++2"]) is True
    assert has_double_sign(["-1", "+2"]) is False
    assert has_double_sign(["+-1"]) is False


@pytest.mark.parametrize("word", ["-5", "+5", "5", "123"])
def test_is_well_formed_accepts(word):
    assert is_well_formed(word) is True


@pytest.mark.parametrize("word", ["5-", "-", "+", "--5", "1+2"])
def test_is_well_formed_rejects(word):
    assert is_well_formed(word) is False


def test_has_duplicates():
    assert has_duplicates([1, 2, 1]) is True
    assert has_duplicates([1, 2, 3]) is False


def test_format_list():
    assert format_list([1, 2]) == "1 -> 2 -> NULL\n"
    assert format_list([]) == "NULL\n"


def test_parse_arguments_single_string():
    assert parse_arguments(["3 2 1"]) == [3, 2, 1]


def test_parse_arguments_many():
    assert parse_arguments(["3", "2", "1"]) == [3, 2, 1]
    assert parse_arguments(["3 4", "-2"]) == [3, 4, -2]


def test_parse_arguments_empty():
    assert parse_arguments([]) == []


def test_single_string_allows_one_minus_per_word():
    assert parse_arguments(["-1 -2"]) == [-1, -2]


def test_single_string_has_no_length_limit():
    assert parse_arguments(["000000000001 5"]) == [1, 5]


@pytest.mark.parametrize(
    "args",
    [
        [""],
        ["   "],
        ["a"],
        ["1", "x"],
        ["1", "1"],
        ["1 1"],
        ["2147483648"],
        ["1", "-2147483649"],
        ["1", "000000000001"],
        ["--1", "2"],
        ["-1 -2", "3"],
        ["1", ""],
        ["1", "   "],
        ["5-"],
        ["-"],
    ],
)
def test_parse_arguments_errors(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["1", "1"])