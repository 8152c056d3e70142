import pytest

from pipex.cli import main


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("apple\nberry\navocado\n")
    return path


@pytest.mark.parametrize(
    "argv",
    [[], ["a"], ["a", "b", "c"], ["a", "b", "c", "d", "e"]],
)
def test_wrong_argument_count_returns_one(argv):
    assert main(argv) == 1


def test_cat_cat_copies_file(infile, tmp_path):
    out = tmp_path / "out.txt"
    status = main([str(infile), "cat", "cat", str(out)])
    assert status == 0
    assert out.read_text() == infile.read_text()


def test_grep_filters_lines(infile, tmp_path):
    out = tmp_path / "out.txt"
    status = main([str(infile), "cat", "grep berry", str(out)])
    assert status == 0
    assert out.read_text() == "berry\n"


def test_quoted_argument_is_one_word(infile, tmp_path):
    out = tmp_path / "out.txt"
    status = main([str(infile), "cat", "sh -c 'exit 3'", str(out)])
    assert status == 3


def test_missing_infile_still_runs_second_command(tmp_path, capsys):
    out = tmp_path / "out.txt"
    status = main([str(tmp_path / "missing.txt"), "cat", "cat", str(out)])
    assert status == 0
    assert out.read_text() == ""
    assert "pipex:" in capsys.readouterr().err


def test_unknown_last_command_is_127(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    status = main([str(infile), "cat", "nosuchcommand_pipex", str(out)])
    assert status == 127
    assert "pipex: command not found: nosuchcommand_pipex" in capsys.readouterr().err


def test_missing_absolute_command_reports_no_such_file(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    missing = str(tmp_path / "nowhere" / "tool")
    status = main([str(infile), "cat", missing, str(out)])
    assert status == 127
    assert f"pipex: no such file or directory: {missing}" in capsys.readouterr().err


@pytest.mark.parametrize("bad", ["", "   "])
def test_blank_command_fails(infile, tmp_path, bad):
    out = tmp_path / "out.txt"
    assert main([str(infile), bad, "cat", str(out)]) == 1
    assert not out.exists()


def test_without_path_bare_names_are_not_found(infile, tmp_path, monkeypatch):
    monkeypatch.delenv("PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(out)]) == 127


def test_output_file_is_truncated(infile, tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("old content that is much longer than the result\n" * 5)
    status = main([str(infile), "cat", "grep apple", str(out)])
    assert status == 0
    assert out.read_text() == "apple\n"