import pytest
from typer.testing import CliRunner

from arcanus.cli import app
from arcanus.config import config
from arcanus.storage import read_list


runner = CliRunner()


def _last_line(output: str) -> str:
    return output.strip().splitlines()[-1]


def test_password_command_default_length():
    result = runner.invoke(app, ["password"])
    assert result.exit_code == 0
    assert len(_last_line(result.output)) == 16


def test_password_command_explicit_length():
    result = runner.invoke(app, ["password", "--length", "40"])
    assert result.exit_code == 0
    assert len(_last_line(result.output)) == 40


def test_password_command_invalid_length():
    result = runner.invoke(app, ["password", "--length", "8"])
    assert result.exit_code == 1
    assert "between 16 and 64" in result.output


def test_seeded_fast_source_is_reproducible():
    first = runner.invoke(app, ["--source", "fast", "--seed", "7", "password"])
    second = runner.invoke(app, ["--source", "fast", "--seed", "7", "password"])
    assert first.exit_code == 0
    assert first.output == second.output


@pytest.mark.parametrize(
    ("args", "expected_length"),
    [(["word"], 13), (["word", "20"], 20), (["numbers"], 4), (["special"], 1)],
)
def test_fragment_commands(args, expected_length):
    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert len(_last_line(result.output)) == expected_length


def test_word_command_invalid_length():
    result = runner.invoke(app, ["word", "5"])
    assert result.exit_code == 1


def test_entropy_command():
    result = runner.invoke(app, ["entropy", "HokiTiwoYaloM83#"])
    assert result.exit_code == 0
    assert "97 bits - Strong" in result.output


def test_entropy_command_too_short():
    result = runner.invoke(app, ["entropy", "toka"])
    assert result.exit_code == 1


def test_list_command_saves_and_reads(tmp_path):
    path = tmp_path / "list.txt"

    result = runner.invoke(app, ["list", "--count", "20", "--save", str(path)])
    assert result.exit_code == 0
    passwords = read_list(path)
    assert len(passwords) == 20

    result = runner.invoke(app, ["read", str(path)])
    assert result.exit_code == 0
    assert result.output.split() == passwords


def test_list_command_invalid_count():
    result = runner.invoke(app, ["list", "--count", "3"])
    assert result.exit_code == 1
    assert "between 16 and 255" in result.output


def test_read_command_missing_file(tmp_path):
    result = runner.invoke(app, ["read", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "cannot read file" in result.output


def test_demo_command(tmp_path, monkeypatch):
    path = tmp_path / "passwords.txt"
    monkeypatch.setattr(config, "passwords_file_path", path)

    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert "File read ok" in result.output
    assert len(read_list(path)) == 32
