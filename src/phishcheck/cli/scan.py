# src/phishcheck/cli/scan.py
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..report import InputTooLargeError, check_input_size, result_row
from ..scoring import analyze

log = logging.getLogger(__name__)

RESULT_HEADER = ["source", "score", "verdict", "confidence", "hits", "links_found", "reasons"]

# ─── Małe utilsy ────────────────────────────────────────────────────────────────

def write_csv(path: Path, rows: List[Dict]) -> Path:
    """Zapis listy dict do CSV z nagłówkiem wyników."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=RESULT_HEADER)
        w.writeheader()
        w.writerows(rows)
    return path


def read_messages(path: Path, column: str = "text") -> List[Dict[str, str]]:
    """
    Wiadomości z CSV: kolumna `column` z tekstem, opcjonalnie `id` jako źródło.
    Brak pliku -> FileNotFoundError, brak kolumny -> KeyError.
    """
    with path.open("r", encoding="utf-8", newline="") as f:
        rd = csv.DictReader(f)
        if column not in (rd.fieldnames or []):
            raise KeyError(column)
        out = []
        for i, row in enumerate(rd, start=1):
            source = (row.get("id") or "").strip() or f"{path.name}:{i}"
            out.append({"source": source, "text": row.get(column) or ""})
    return out

# ─── Batch ─────────────────────────────────────────────────────────────────────

def score_messages(messages: List[Dict[str, str]], max_input_chars: Optional[int] = None) -> List[Dict]:
    """
    Scoring wiadomości po kolei. Puste i za długie wiersze są pomijane
    (nie trafiają do silnika), reszta batcha leci dalej.
    """
    rows: List[Dict] = []
    for m in messages:
        text = m["text"]
        if not text.strip():
            log.info("skip empty message", extra={"source": m["source"], "reason": "empty"})
            continue
        try:
            check_input_size(text, max_input_chars)
        except InputTooLargeError as e:
            log.warning("skip oversized message: %s", e, extra={"source": m["source"], "reason": "too_large"})
            continue
        res = analyze(text)
        log.debug("scored %s", m["source"], extra={
            "source": m["source"], "verdict": res.verdict.value, "score": res.score,
            "hits": res.hits, "links_found": res.links_found,
        })
        rows.append(result_row(m["source"], res))
    return rows


def score_csv(in_path: Path, out_path: Path, column: str = "text",
              max_input_chars: Optional[int] = None) -> List[Dict]:
    rows = score_messages(read_messages(in_path, column), max_input_chars)
    write_csv(out_path, rows)
    log.info("batch: %s rows -> %s", len(rows), out_path)
    return rows
