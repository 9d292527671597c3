import pytest

from referee.utils import (
    hex_dump,
    parse_binint,
    parse_boolean,
    parse_decint,
    parse_hexint,
    parse_integer,
    parse_number,
    parse_octint,
    parse_string,
)


@pytest.mark.parametrize("value", [0, 1, 7, 123456, 2**40 + 3])
def test_integer_round_trips(value):
    assert parse_binint(format(value, "b")) == value
    assert parse_octint(format(value, "o")) == value
    assert parse_decint(str(value)) == value
    assert parse_hexint(format(value, "x")) == value
    assert parse_hexint(format(value, "X")) == value


def test_negative_and_signed():
    assert parse_decint("-42") == -42
    assert parse_decint("+42") == 42
    assert parse_decint("  42") == 42


def test_hex_accepts_prefix():
    assert parse_hexint("0x1f") == parse_hexint("1f")


def test_empty_integer_is_zero():
    assert parse_decint("") == 0


@pytest.mark.parametrize("text", ["12a", "abc", "1_000", "42 ", "0x"])
def test_integer_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_decint(text) if text != "0x" else parse_hexint(text)


def test_binary_rejects_other_digits():
    with pytest.raises(ValueError):
        parse_binint("102")


def test_integer_limits():
    with pytest.raises(ValueError):
        parse_decint(str(2**63 - 1))
    with pytest.raises(ValueError):
        parse_decint(str(-(2**63)))
    assert parse_integer(str(2**63 - 2), 10) == 2**63 - 2


@pytest.mark.parametrize("value", [0.5, 1.25, -3.0, 1e10, 2.5e-3])
def test_number_round_trips(value):
    assert parse_number(repr(value)) == value


def test_number_hex_float():
    assert parse_number((1.5).hex()) == 1.5


def test_number_errors():
    with pytest.raises(ValueError):
        parse_number("1.0x")
    with pytest.raises(ValueError):
        parse_number("1e999")
    with pytest.raises(ValueError):
        parse_number("inf")


def test_parse_string():
    assert parse_string('"hello"') == "hello"
    assert parse_string('""') == ""
    with pytest.raises(ValueError):
        parse_string("")


def test_parse_boolean():
    assert parse_boolean("true") is True
    assert parse_boolean("false") is False
    with pytest.raises(ValueError):
        parse_boolean("True")


def test_hex_dump_full_line():
    data = bytes(range(0x41, 0x41 + 16))
    out = hex_dump(data)
    lines = out.split("\n")
    assert out.startswith("\n")
    assert lines[1].startswith(f"{0:04x}: ")
    assert lines[1].endswith(" | " + data.decode())


def test_hex_dump_partial_line_alignment():
    full = hex_dump(b"x" * 16).split("\n")[1]
    short = hex_dump(b"xy").split("\n")[1]
    assert len(short) - len("xy") == len(full) - 16
    assert short.endswith(" | xy")


def test_hex_dump_non_printable():
    out = hex_dump(b"\x00a")
    assert out.split("\n")[1].endswith(" | .a")
    assert f"{ord('a'):02x} " in out


def test_hex_dump_line_count():
    out = hex_dump(b"z" * 33)
    assert len(out.strip("\n").split("\n")) == 3
    assert f"{32:04x}: " in out