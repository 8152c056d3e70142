import pytest

from pipex.args import count_args, quotes_balanced, split_args


def test_simple_split():
    assert split_args("ls -la") == ["ls", "-la"]


def test_extra_spaces_ignored():
    assert split_args("  ls   -l  ") == ["ls", "-l"]


def test_single_quoted_word_keeps_spaces():
    assert split_args("grep 'hello world'") == ["grep", "hello world"]


def test_awk_program():
    assert split_args("awk '{print $1}'") == ["awk", "{print $1}"]


def test_double_quotes_hold_single_quote():
    assert split_args('echo "it\'s"') == ["echo", "it's"]


def test_escaped_quote_inside_quotes():
    assert split_args(r"echo 'a\'b'") == ["echo", "a'b"]


def test_quoted_part_joins_word():
    assert split_args("tr a'b c'd") == ["tr", "ab cd"]


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_rejected(text):
    with pytest.raises(ValueError):
        split_args(text)


def test_none_rejected():
    with pytest.raises(ValueError):
        split_args(None)


def test_unbalanced_rejected():
    assert not quotes_balanced("'a' \"b")
    with pytest.raises(ValueError):
        split_args("'a' \"b")


def test_balanced_quotes():
    assert quotes_balanced("'a' \"b\" 'c'") is True
    assert quotes_balanced("plain words") is True


def test_count_args_simple():
    assert count_args("ls -la") == 2
    assert count_args("") == 0
    assert count_args("   ") == 0


@pytest.mark.parametrize(
    "text",
    ["ls -la", "  a  b  c ", "grep 'x y' z", "'quoted first' arg", 'cut -d " " -f1'],
)
def test_count_is_upper_bound(text):
    words = split_args(text)
    assert count_args(text) >= len(words)
    assert all(" " not in w for w in words if "'" not in text and '"' not in text)


def test_spaces_only_inside_quoted_words():
    words = split_args('cut -d " " -f1')
    assert words == ["cut", "-d", " ", "-f1"]