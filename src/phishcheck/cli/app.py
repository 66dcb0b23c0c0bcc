from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import load_config
from ..core.logging_config import setup_logging
from ..detection.signals import SIGNALS
from ..keywords import COMBO_BONUS, MANY_LINKS_BONUS, MULTI_LINKS_BONUS
from ..report import InputTooLargeError, build_view, check_input_size, no_input_view, render_result
from ..scoring import analyze
from .scan import score_csv

cli = typer.Typer(add_completion=False, help="phishcheck: heuristic phishing message scoring")
console = Console()


@cli.callback()
def _setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="DEBUG logging"),
) -> None:
    cfg = load_config()
    setup_logging("DEBUG" if verbose else cfg.effective_log_level, cfg.log_json)


@cli.command("version", help="Print the tool version.")
def version() -> None:
    from importlib.metadata import version as dist_version, PackageNotFoundError
    try:
        v = dist_version("phishcheck")
    except PackageNotFoundError:
        from ..version import __version__ as v
    console.print(f"phishcheck {v}")


@cli.command("signals", help="List the signal registry and bonus rules.")
def signals() -> None:
    t = Table(title="Signals")
    t.add_column("key")
    t.add_column("weight", justify="right")
    t.add_column("label")
    for s in SIGNALS:
        t.add_row(s.key, str(s.weight), s.label)
    for min_links, bonus, reason in (MULTI_LINKS_BONUS, MANY_LINKS_BONUS, COMBO_BONUS):
        t.add_row("bonus", str(bonus), f"{reason} (links >= {min_links})")
    console.print(t)


def _read_text(text: Optional[str], file: Optional[Path]) -> str:
    if text is not None and file is not None:
        raise typer.BadParameter("Give TEXT or --file, not both")
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise typer.BadParameter(f"File not found: {file}", param_hint="--file")
    if text is not None:
        return text
    return typer.get_text_stream("stdin").read()


@cli.command("analyze", help="Score one message (TEXT, --file or stdin).")
def analyze_cmd(
    text: Optional[str] = typer.Argument(None, help="Message text; read from stdin when omitted"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the message from a file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    reasons: Optional[int] = typer.Option(None, "--reasons", min=1, help="Max reasons shown"),
) -> None:
    cfg = load_config()
    raw = _read_text(text, file)
    limit = reasons or cfg.reasons_limit

    if as_json:
        if not raw.strip():
            typer.echo(json.dumps(asdict(no_input_view()), ensure_ascii=False))
            return
        try:
            check_input_size(raw, cfg.max_input_chars)
        except InputTooLargeError as e:
            raise typer.BadParameter(str(e))
        typer.echo(json.dumps(analyze(raw).to_dict(), ensure_ascii=False))
        return

    try:
        view = build_view(raw, reasons_limit=limit, max_input_chars=cfg.max_input_chars)
    except InputTooLargeError as e:
        raise typer.BadParameter(str(e))
    render_result(view, console)


@cli.command("batch", help="Score every message of a CSV and write a results CSV.")
def batch(
    inputs: Path = typer.Option(..., "--input", "-i", help="CSV with a text column (and optional id)"),
    out: Path = typer.Option(Path("./out/phishcheck_scored.csv"), "--out", "-o", help="Output CSV"),
    column: str = typer.Option("text", "--column", "-c", help="Name of the text column"),
) -> None:
    cfg = load_config()
    try:
        rows = score_csv(inputs, out, column=column, max_input_chars=cfg.max_input_chars)
    except FileNotFoundError:
        raise typer.BadParameter(f"File not found: {inputs}", param_hint="--input")
    except KeyError:
        raise typer.BadParameter(f"Column '{column}' not in {inputs}", param_hint="--column")
    high = sum(1 for r in rows if r["verdict"] == "High")
    console.print(f"OK: {len(rows)} messages ({high} High) → {out}")


def main() -> None:
    cli()


if __name__ == "__main__":
    cli()
