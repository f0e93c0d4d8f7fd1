import json

from bmfont_atlas.core.parser import parse_bmfont
from bmfont_atlas.main import main


def test_info(font_path, capsys):
    assert main(["info", str(font_path)]) == 0
    out = capsys.readouterr().out
    assert "Test (32pt)" in out
    assert "Line height: 40" in out
    assert "0: test.png" in out
    assert "Glyphs:      4" in out


def test_export(font_path, tmp_path, capsys):
    out_dir = tmp_path / "export"
    assert main(["export", str(font_path), "-o", str(out_dir)]) == 0
    data = json.loads((out_dir / "metadata.json").read_text(encoding="utf-8"))
    assert data["info"]["face"] == "Test"


def test_verify_ok(font_path, capsys):
    assert main(["verify", str(font_path)]) == 0
    assert "OK" in capsys.readouterr().out


def test_verify_reports_errors(font_path, capsys):
    (font_path.parent / "test.png").unlink()
    assert main(["verify", str(font_path)]) == 1
    assert "[error]" in capsys.readouterr().out


def test_measure(font_path, capsys):
    assert main(["measure", str(font_path), "AV"]) == 0
    assert capsys.readouterr().out.strip() == "19 x 40"


def test_measure_scaled_without_kerning(font_path, capsys):
    assert main(["measure", str(font_path), "AV", "--scale", "2", "--no-kerning"]) == 0
    assert capsys.readouterr().out.strip() == "42 x 80"


def test_format_round_trip(font_path, tmp_path):
    out = tmp_path / "normalized.fnt"
    assert main(["format", str(font_path), "-o", str(out)]) == 0
    assert parse_bmfont(str(out)) == parse_bmfont(str(font_path))


def test_missing_file(tmp_path, capsys):
    assert main(["info", str(tmp_path / "nope.fnt")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_parse_error(tmp_path, capsys):
    path = tmp_path / "bad.fnt"
    path.write_text('info face="unterminated\n', encoding="utf-8")
    assert main(["info", str(path)]) == 1
    assert "Failed to parse" in capsys.readouterr().err


def test_log_file(font_path, tmp_path):
    log = tmp_path / "run.log"
    assert main(["--log-file", str(log), "export", str(font_path), "-o", str(tmp_path / "x")]) == 0
    assert "Exported metadata" in log.read_text(encoding="utf-8")


def test_format_bare_value_with_quote(tmp_path, capsys):
    path = tmp_path / "quote.fnt"
    path.write_text('info face=a"b size=1\n', encoding="utf-8")
    assert main(["format", str(path)]) == 0
    assert capsys.readouterr().out.startswith('info face=a"b size=1 ')


def test_format_unwritable_value(tmp_path, capsys, monkeypatch):
    path = tmp_path / "plain.fnt"
    path.write_text('info face="x"\n', encoding="utf-8")

    def reject(meta):
        raise ValueError("not representable")

    monkeypatch.setattr("bmfont_atlas.main.format_bmfont", reject)
    assert main(["format", str(path)]) == 1
    assert "Cannot write" in capsys.readouterr().err
