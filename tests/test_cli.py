import csv
import json
from pathlib import Path

from typer.testing import CliRunner

from phishcheck.cli.app import cli

runner = CliRunner()
ENV = {"LOG_LEVEL": "WARNING", "PHISHCHECK_DEBUG": "0"}

URGENT_SHORTLINK = (
    "URGENT: verify your password immediately at http://bit.ly/abc "
    "or your account will be closed"
)


def _invoke(args, **kw):
    env = dict(ENV, **kw.pop("env", {}))
    return runner.invoke(cli, args, env=env, **kw)


def test_analyze_json():
    res = _invoke(["analyze", "--json", URGENT_SHORTLINK])
    assert res.exit_code == 0, res.output
    data = json.loads(res.stdout)
    assert data["score"] == 66
    assert data["verdict"] == "Medium"
    assert data["linksFound"] == 1


def test_analyze_stdin():
    res = _invoke(["analyze", "--json"], input="Hi, lunch tomorrow at noon?")
    assert res.exit_code == 0, res.output
    data = json.loads(res.stdout)
    assert data["score"] == 0
    assert data["verdict"] == "Low"


def test_analyze_empty_is_no_input_state():
    res = _invoke(["analyze", "--json"], input="   \n")
    assert res.exit_code == 0, res.output
    data = json.loads(res.stdout)
    assert data["verdict"] == "—"
    assert data["reasons"] == ["Paste a message above to analyze."]


def test_analyze_rich_output():
    res = _invoke(["analyze", URGENT_SHORTLINK])
    assert res.exit_code == 0, res.output
    assert "Medium" in res.stdout
    assert "Link + credential request combo" in res.stdout


def test_analyze_file(tmp_path: Path):
    p = tmp_path / "msg.txt"
    p.write_text(URGENT_SHORTLINK, encoding="utf-8")
    res = _invoke(["analyze", "--json", "--file", str(p)])
    assert res.exit_code == 0, res.output
    assert json.loads(res.stdout)["score"] == 66


def test_analyze_missing_file(tmp_path: Path):
    res = _invoke(["analyze", "--file", str(tmp_path / "nope.txt")])
    assert res.exit_code == 2


def test_analyze_input_limit():
    res = _invoke(["analyze", "x" * 50], env={"PHISHCHECK_MAX_INPUT_CHARS": "10"})
    assert res.exit_code == 2


def test_batch(tmp_path: Path):
    src = tmp_path / "in.csv"
    with src.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["id", "text"])
        w.writerow(["m1", URGENT_SHORTLINK])
        w.writerow(["m2", ""])
        w.writerow(["", "Hi, lunch tomorrow at noon?"])
    out = tmp_path / "out" / "scored.csv"
    res = _invoke(["batch", "--input", str(src), "--out", str(out)])
    assert res.exit_code == 0, res.output
    with out.open("r", encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["source"] for r in rows] == ["m1", "in.csv:3"]
    assert rows[0]["score"] == "66"
    assert rows[1]["verdict"] == "Low"


def test_batch_missing_column(tmp_path: Path):
    src = tmp_path / "in.csv"
    src.write_text("id,body\nm1,hello\n", encoding="utf-8")
    res = _invoke(["batch", "--input", str(src), "--out", str(tmp_path / "o.csv")])
    assert res.exit_code == 2


def test_signals_and_version():
    res = _invoke(["signals"])
    assert res.exit_code == 0, res.output
    assert "link_mismatch" in res.stdout
    res = _invoke(["version"])
    assert res.exit_code == 0, res.output
    assert "phishcheck" in res.stdout


def test_batch_skips_oversized_rows(tmp_path: Path):
    src = tmp_path / "in.csv"
    with src.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["id", "text"])
        w.writerow(["big", "x" * 500])
        w.writerow(["ok", "Hi, lunch tomorrow at noon?"])
    out = tmp_path / "scored.csv"
    res = _invoke(["batch", "--input", str(src), "--out", str(out)],
                  env={"PHISHCHECK_MAX_INPUT_CHARS": "100"})
    assert res.exit_code == 0, res.output
    with out.open("r", encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["source"] for r in rows] == ["ok"]
