import json

import pytest

from ditawiki import cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda level=None: calls.append(level))
    return calls


def test_convert(corpus_dir, tmp_path, capsys, no_logging_setup):
    out = tmp_path / "out"
    assert cli.main(["-v", "convert", str(corpus_dir), "-o", str(out), "--workers", "2"]) == 0

    assert json.loads((out / "beta.json").read_text(encoding="utf-8"))["title"] == "Beta"
    captured = capsys.readouterr()
    assert "2 page(s) written" in captured.out
    assert no_logging_setup == [cli.logging.DEBUG]


def test_convert_reports_diagnostics(corpus_dir, tmp_path, capsys):
    (corpus_dir / "c.xml").write_text(
        "<topic id='c'><title>Gamma</title><body><p><xref href='gone.xml'/></p></body></topic>",
        encoding="utf-8",
    )
    (corpus_dir / "d.xml").write_text("<topic id='d'><title>Alpha</title><body/></topic>", encoding="utf-8")

    assert cli.main(["convert", str(corpus_dir), "-o", str(tmp_path / "out")]) == 0
    err = capsys.readouterr().err
    assert "gamma: did not find topic gone.xml" in err
    assert 'mapping: clashing title "Alpha" in "d.xml" and "a.xml"' in err


def test_strict_load_error(corpus_dir, tmp_path, capsys):
    (corpus_dir / "broken.xml").write_text("<topic>", encoding="utf-8")
    assert cli.main(["convert", str(corpus_dir), "-o", str(tmp_path / "out"), "--strict"]) == 2
    assert "error:" in capsys.readouterr().err


def test_map(corpus_dir, capsys):
    assert cli.main(["map", str(corpus_dir)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["a.xml\talpha\tAlpha", "sub/b.xml\tbeta\tBeta"]


def test_requires_command():
    with pytest.raises(SystemExit):
        cli.main([])
