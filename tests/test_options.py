import pytest

from sansrpg.options import (
    MissingOptionsFile,
    OptionsError,
    check_params,
    find_line,
    format_number,
    load_volume,
    option_value,
    parse_number,
    read_options,
    split_words,
    validate_options,
)


def test_split_words_on_newlines():
    assert split_words("volume=50\n") == ["volume=50"]


def test_split_words_keeps_spaces_and_breaks_on_tabs():
    assert split_words("a b\tc\n\nd") == ["a b", "c", "d"]


def test_split_words_stops_at_nul():
    assert split_words("one\ntwo\0three") == ["one", "two"]


def test_split_words_empty():
    assert split_words("\n\n") == []


@pytest.mark.parametrize("value", [0, 7, 50, 100, 12345])
def test_number_round_trip(value):
    assert parse_number(format_number(value)) == value


def test_parse_empty_is_zero():
    assert parse_number("") == 0


def test_format_zero():
    assert format_number(0) == "0"


def test_format_negative_is_empty():
    assert format_number(-5) == ""


def test_find_line_prefix_match():
    lines = ["speed=3", "volume=40"]
    assert find_line(lines, "volume=") == 1


def test_find_line_missing():
    assert find_line(["speed=3"], "volume=") is None


def test_option_value_reads_after_equals():
    assert option_value(["x=1", "volume=42"], "volume=") == 42


def test_option_value_falls_back_to_first_line():
    assert option_value(["speed=7"], "volume=") == 7


def test_option_value_without_equals_is_zero():
    assert option_value(["volume"], "volume") == 0


def test_option_value_empty_raises():
    with pytest.raises(OptionsError):
        option_value([], "volume=")


def test_check_params_in_range():
    assert check_params(["volume=100"], "volume=") == 100


@pytest.mark.parametrize("text", ["volume=101", "volume=-1"])
def test_check_params_out_of_range(text):
    with pytest.raises(OptionsError) as info:
        check_params([text], "volume=")
    assert info.value.report == ""


def test_read_options(tmp_path):
    path = tmp_path / "options.txt"
    path.write_text("volume=30\nother=1\n")
    assert read_options(path) == ["volume=30", "other=1"]


def test_read_options_only_reads_limit(tmp_path):
    path = tmp_path / "options.txt"
    path.write_text("a" * 250 + "\nvolume=30\n")
    lines = read_options(path)
    assert find_line(lines, "volume=") is None


def test_read_options_missing(tmp_path):
    with pytest.raises(MissingOptionsFile) as info:
        read_options(tmp_path / "absent.txt")
    assert "Impossible to find file" in info.value.report


def test_validate_options(tmp_path):
    path = tmp_path / "options.txt"
    path.write_text("volume=75\n")
    assert validate_options(path) == 75


def test_validate_options_missing_key(tmp_path):
    path = tmp_path / "options.txt"
    path.write_text("speed=3\n")
    with pytest.raises(OptionsError) as info:
        validate_options(path)
    assert "Syntax error in file" in info.value.report


def test_validate_options_out_of_range(tmp_path):
    path = tmp_path / "options.txt"
    path.write_text("volume=200\n")
    with pytest.raises(OptionsError):
        validate_options(path)


def test_load_volume(tmp_path):
    path = tmp_path / "options.txt"
    path.write_text("volume=60\n")
    assert load_volume(path) == 60