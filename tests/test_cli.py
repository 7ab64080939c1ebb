from pathlib import Path

import pytest

from hackvmc.cli import file_extension, file_prefix, main, output_path
from hackvmc.codegen import translate_lines

PROGRAM = "push constant 7\npush local 2\nadd\npop argument 1\n"


def test_file_extension():
    assert file_extension("prog.vm") == "vm"


def test_file_extension_missing():
    assert file_extension("noext") == ""


def test_file_prefix_keeps_dot():
    assert file_prefix("prog.vm") == "prog."


def test_file_prefix_without_dot_raises():
    with pytest.raises(ValueError):
        file_prefix("noext")


def test_output_path_beside_source():
    assert output_path(Path("dir") / "prog.vm") == Path("dir") / "prog.asm"


def test_main_writes_default_output(tmp_path):
    source = tmp_path / "prog.vm"
    source.write_text(PROGRAM)
    assert main([str(source)]) == 0
    written = (tmp_path / "prog.asm").read_text()
    assert written == translate_lines(PROGRAM.splitlines(keepends=True))


def test_main_writes_given_destination(tmp_path):
    source = tmp_path / "prog.vm"
    source.write_text(PROGRAM)
    destination = tmp_path / "out.asm"
    destination.write_text("stale")
    assert main([str(source), str(destination)]) == 0
    assert destination.read_text() == translate_lines(PROGRAM.splitlines())


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Please provide a vm file" in capsys.readouterr().err


def test_main_missing_source_fails(tmp_path):
    assert main([str(tmp_path / "absent.vm")]) == 1


def test_main_wrong_source_extension_fails(tmp_path):
    source = tmp_path / "prog.txt"
    source.write_text(PROGRAM)
    assert main([str(source)]) == 1
    assert not (tmp_path / "prog.asm").exists()


def test_main_missing_destination_fails(tmp_path):
    source = tmp_path / "prog.vm"
    source.write_text(PROGRAM)
    assert main([str(source), str(tmp_path / "absent.asm")]) == 1


def test_main_wrong_destination_extension_fails(tmp_path):
    source = tmp_path / "prog.vm"
    source.write_text(PROGRAM)
    destination = tmp_path / "out.txt"
    destination.write_text("")
    assert main([str(source), str(destination)]) == 1
    assert destination.read_text() == ""


def test_main_reports_translation_error(tmp_path, capsys):
    source = tmp_path / "bad.vm"
    source.write_text("pop constant 3\n")
    assert main([str(source)]) == 1
    assert "Cannot pop a constant" in capsys.readouterr().err