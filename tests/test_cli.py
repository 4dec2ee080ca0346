from pathlib import Path

import pytest

from solong.cli import main

VALID_MAP = "1111111\n1P0C0E1\n1111111"


def _write(directory: Path, name: str, text: str) -> str:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return str(path)


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Check to parameters!\n"


def test_wrong_extension(tmp_path, capsys):
    path = _write(tmp_path, "map.txt", VALID_MAP)
    assert main([path]) == 1
    assert capsys.readouterr().out == "Your map's extension should be '.ber'"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out == "Check to map path!"


def test_invalid_wall(tmp_path, capsys):
    path = _write(tmp_path, "map.ber", "1111111\n1P0C0E1\n1111101")
    assert main([path]) == 1
    assert capsys.readouterr().out == "Invalid Map WALL!"


def test_map_too_wide(tmp_path, capsys):
    width = 41
    middle = "1P" + "0" * (width - 5) + "CE1"
    text = "\n".join(["1" * width, middle, "1" * width])
    path = _write(tmp_path, "wide.ber", text)
    assert main([path]) == 1
    assert capsys.readouterr().out == "The map size is so big!"


def test_missing_images(tmp_path, capsys, monkeypatch):
    path = _write(tmp_path, "map.ber", VALID_MAP)
    monkeypatch.chdir(tmp_path)
    assert main([path]) == 1
    assert capsys.readouterr().out == "IMG file cannot be found"


def test_reads_sys_argv_when_none(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["so_long"])
    assert main() == 1
    assert capsys.readouterr().out == "Check to parameters!\n"