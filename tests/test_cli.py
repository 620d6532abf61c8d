import json
from pathlib import Path

import pytest

from linkrisk import cli, config

FIXTURE = Path(__file__).resolve().parent / "fixtures" / "sample_urls.csv"


def test_scan_json_output(capsys):
    cli.main(["scan", "http://go0gle.com", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["verdict"] == "UNSAFE"
    assert data["safePercent"] == 5


def test_scan_text_output(capsys):
    cli.main(["scan", "https://www.google.com"])
    out = capsys.readouterr().out
    assert "SAFE" in out
    assert "Safety Score: 100%" in out
    assert "Reasons: none" in out


def test_scan_strict_rejects_non_url(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["scan", "not a url", "--strict"])
    assert exc.value.code == 2
    assert "[REJECTED]" in capsys.readouterr().out


def test_scan_strict_from_config(monkeypatch):
    monkeypatch.setattr(config, "STRICT_INPUT", True)
    with pytest.raises(SystemExit) as exc:
        cli.main(["scan", "go0gle"])
    assert exc.value.code == 2


def test_batch_summary(capsys, tmp_path):
    out_csv = tmp_path / "scored.csv"
    cli.main(["batch", str(FIXTURE), "--output", str(out_csv)])
    out = capsys.readouterr().out
    assert "Scored 4 URLs" in out
    assert "| UNSAFE | 2 | 50.0 |" in out
    assert out_csv.exists()


def test_batch_json(capsys):
    cli.main(["batch", str(FIXTURE), "--json"])
    rows = json.loads(capsys.readouterr().out)
    assert [r["verdict"] for r in rows] == ["SAFE", "UNSAFE", "SUSPICIOUS", "UNSAFE"]


def test_batch_missing_file_exits_with_error(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["batch", str(tmp_path / "missing.csv")])
    assert exc.value.code == 1
    assert "[ERROR]" in capsys.readouterr().out
