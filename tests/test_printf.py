import io

import pytest

from pipex.libft.printf import FormatError, dprintf, format_string, printf


def test_plain_text_is_unchanged():
    assert format_string("hello world") == "hello world"


def test_decimal_round_trip():
    for n in (0, 7, -7, 123456, -2147483648, 2147483647):
        assert int(format_string("%d", n)) == n
        assert format_string("%i", n) == format_string("%d", n)


def test_hex_round_trip():
    for n in (0, 1, 15, 16, 255, 4096, 0xDEADBEEF):
        assert int(format_string("%x", n), 16) == n
        assert format_string("%X", n) == format_string("%x", n).upper()


def test_unsigned_wraps_negative():
    assert format_string("%u", -1) == "4294967295"
    assert int(format_string("%x", -1), 16) == 0xFFFFFFFF


def test_string_and_null_string():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


def test_char_from_int_and_str():
    assert format_string("%c%c", 65, "b") == "Ab"


def test_percent_and_trailing_percent():
    assert format_string("100%%") == "100%"
    assert format_string("abc%") == "abc%"


def test_pointer():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 255) == "0xff"


def test_unknown_conversion_raises():
    with pytest.raises(FormatError):
        format_string("%q", 1)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_string("%d %d", 1)


def test_missing_format_raises():
    with pytest.raises(FormatError):
        format_string(None)


def test_dprintf_writes_and_counts():
    stream = io.StringIO()
    count = dprintf(stream, "%s=%d", "x", 5)
    assert stream.getvalue() == "x=5"
    assert count == len(stream.getvalue())


def test_printf_writes_to_stdout(capsys):
    count = printf("%s!", "hi")
    out = capsys.readouterr().out
    assert out == "hi!"
    assert count == len(out)