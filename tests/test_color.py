from pipex.libft import color


def test_single_code_sequence():
    assert color.sequence(color.RED_FG) == "\x1b[31m"


def test_combined_codes_are_joined():
    seq = color.sequence(color.BOLD, color.GREEN_FG, color.BLACK_BG)
    assert seq == (
        color.CLR
        + color.BOLD
        + color.CLR_AND
        + color.GREEN_FG
        + color.CLR_AND
        + color.BLACK_BG
        + color.CLR_END
    )


def test_sequence_structure():
    seq = color.sequence(color.UNDERLINE, color.CYAN_BG)
    assert seq.startswith(color.CLR)
    assert seq.endswith(color.CLR_END)
    assert seq[len(color.CLR):-len(color.CLR_END)].split(color.CLR_AND) == [
        color.UNDERLINE,
        color.CYAN_BG,
    ]


def test_colorize_wraps_and_resets():
    out = color.colorize("text", color.ITALIC, color.BLUE_FG)
    assert out == color.sequence(color.ITALIC, color.BLUE_FG) + "text" + color.CLR_RESET
    assert out.endswith("\x1b[0m")


def test_colorize_preserves_text():
    text = "pipex"
    out = color.colorize(text, color.YELLOW_FG)
    prefix = color.sequence(color.YELLOW_FG)
    assert out[len(prefix):-len(color.CLR_RESET)] == text