import pytest

from fancy_writer.cli import main


def test_interpol(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["interpol", "LoadModule %module modules/%file.so", "module=mime_module", "file=mod_mime"]) == 0
    assert capsys.readouterr().out == "LoadModule mime_module modules/mod_mime.so\n"


def test_interpol_keeps_escaped_percent(capsys: pytest.CaptureFixture[str]) -> None:
    main(["interpol", "%%speed %color", "color=brown"])
    assert capsys.readouterr().out == "%speed brown\n"


def test_interpol_rejects_malformed_value(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as info:
        main(["interpol", "%a", "oops"])
    assert info.value.code == 2
    assert "key=value" in capsys.readouterr().err


def test_enum(capsys: pytest.CaptureFixture[str]) -> None:
    main(["enum", "1", "2", "3", "--separator", ";", "--quote", "'"])
    assert capsys.readouterr().out == "'1';'2';'3'\n"


def test_line_with_comment_and_indent(capsys: pytest.CaptureFixture[str]) -> None:
    main(["line", "a", "b", "--comment", "//", "--indent", "2"])
    assert capsys.readouterr().out == "//   a\n//   b\n"


def test_line_without_text(capsys: pytest.CaptureFixture[str]) -> None:
    main(["line", "--comment", "#", "--no-space"])
    assert capsys.readouterr().out == "#\n"


def test_verbose_flag_keeps_stdout_clean(capsys: pytest.CaptureFixture[str]) -> None:
    main(["-vv", "enum", "x"])
    captured = capsys.readouterr()
    assert captured.out == "x\n"
