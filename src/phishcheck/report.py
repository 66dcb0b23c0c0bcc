from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .detection.links import describe_links
from .keywords import NO_SIGNALS_REASON
from .scoring import AnalysisResult, analyze

NO_INPUT_REASON = "Paste a message above to analyze."
PLACEHOLDER = "—"
DEFAULT_REASONS_LIMIT = 9

VERDICT_BADGES = {
    "Low": "Low ✅",
    "Medium": "Medium ⚡",
    "High": "High ⚠️",
}

_VERDICT_STYLES = {"Low": "green", "Medium": "yellow", "High": "bold red"}


class PhishcheckError(Exception):
    pass


class InputTooLargeError(PhishcheckError):
    def __init__(self, length: int, limit: int):
        super().__init__(f"Input has {length} characters, limit is {limit}")
        self.length = length
        self.limit = limit


@dataclass(frozen=True)
class ResultView:
    """Display strings for one analysis (or the empty "no input" state)."""

    score: int
    verdict: str
    reasons: List[str]
    confidence: str
    hits: str
    links_found: str
    links: List[str] = field(default_factory=list)


def verdict_badge(verdict) -> str:
    key = getattr(verdict, "value", verdict)
    return VERDICT_BADGES.get(key, key)


def display_reasons(reasons: Iterable[str], limit: int = DEFAULT_REASONS_LIMIT) -> List[str]:
    shown = list(reasons)[:max(limit, 1)]
    return shown or [NO_SIGNALS_REASON]


def no_input_view() -> ResultView:
    return ResultView(
        score=0,
        verdict=PLACEHOLDER,
        reasons=[NO_INPUT_REASON],
        confidence=PLACEHOLDER,
        hits="0",
        links_found="0",
    )


def check_input_size(text: str, limit: Optional[int]) -> None:
    if limit is not None and limit > 0 and len(text) > limit:
        raise InputTooLargeError(len(text), limit)


def view_from_result(result: AnalysisResult, reasons_limit: int = DEFAULT_REASONS_LIMIT) -> ResultView:
    return ResultView(
        score=result.score,
        verdict=result.verdict.value,
        reasons=display_reasons(result.reasons, reasons_limit),
        confidence=f"{result.confidence}%",
        hits=str(result.hits),
        links_found=str(result.links_found),
        links=list(result.links),
    )


def build_view(text: Optional[str], reasons_limit: int = DEFAULT_REASONS_LIMIT,
               max_input_chars: Optional[int] = None) -> ResultView:
    """Whitespace-only input never reaches the engine."""
    raw = text or ""
    if not raw.strip():
        return no_input_view()
    check_input_size(raw, max_input_chars)
    return view_from_result(analyze(raw), reasons_limit)


def render_result(view: ResultView, console: Console, show_links: bool = True) -> None:
    style = _VERDICT_STYLES.get(view.verdict, "dim")
    head = Table.grid(padding=(0, 2))
    head.add_row("Risk score", f"[bold]{view.score}[/bold]/100")
    head.add_row("Verdict", f"[{style}]{verdict_badge(view.verdict)}[/{style}]")
    head.add_row("Confidence", view.confidence)
    head.add_row("Signals hit", view.hits)
    head.add_row("Links found", view.links_found)
    console.print(Panel(head, title="Phishing check", expand=False))

    console.print("[bold]Why[/bold]")
    for r in view.reasons:
        console.print(f"  • {r}")

    if show_links and view.links:
        t = Table(title="Links", show_lines=False)
        t.add_column("url", overflow="fold")
        t.add_column("domain")
        t.add_column("shortener")
        t.add_column("suspicious")
        for lr in describe_links(view.links):
            t.add_row(escape(lr.url), escape(lr.registered_domain) or PLACEHOLDER,
                      "yes" if lr.shortener else "no",
                      "yes" if lr.suspicious else "no")
        console.print(t)


def result_row(source: str, result: AnalysisResult) -> Dict:
    """Flat row for CSV export."""
    return {
        "source": source,
        "score": result.score,
        "verdict": result.verdict.value,
        "confidence": result.confidence,
        "hits": result.hits,
        "links_found": result.links_found,
        "reasons": " | ".join(result.reasons),
    }
