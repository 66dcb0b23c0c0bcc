from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from ..keywords import ALL_CAPS_MIN_LEN, MISSPELLINGS, SIGNAL_PATTERNS, WEIRD_CHARS_MAX
from .links import domain_looks_suspicious, is_shortener


@dataclass(frozen=True)
class Signal:
    key: str
    weight: int
    label: str


# kolejność = kolejność powodów w wyniku
SIGNALS: Tuple[Signal, ...] = (
    Signal("urgency", 14, "Urgency / pressure language"),
    Signal("credential", 18, "Asks for passwords / codes / login"),
    Signal("money", 16, "Payment / gift cards / crypto request"),
    Signal("impersonation", 14, "Impersonation language (bank, IRS, support)"),
    Signal("shortlink", 12, "Shortened or obfuscated link"),
    Signal("link_mismatch", 16, "Suspicious link or misleading domain"),
    Signal("threat", 12, "Threats: account closed / legal action"),
    Signal("weird_format", 8, "Odd formatting (ALL CAPS / many symbols)"),
    Signal("typos", 10, "Suspicious spelling patterns / typos"),
    Signal("attachments", 10, "Mentions attachments or opening files"),
)

_PHRASE_RES = {key: re.compile(pat, re.I) for key, pat in SIGNAL_PATTERNS.items()}
_WHITESPACE_RE = re.compile(r"\s+")
_WEIRD_CHAR_RE = re.compile(r"[^a-zA-Z0-9\s]")
_REPEATED_PUNCT_RE = re.compile(r"([!?.,])\1{2,}")
_RANDOM_CAPS_RE = re.compile(r"[a-z][A-Z][a-z]")
_MISSPELL_RE = re.compile(r"\b(" + "|".join(map(re.escape, MISSPELLINGS)) + r")\b", re.I)


def normalize_for_check(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text.lower()).strip()


def count_weird_chars(text: str) -> int:
    return len(_WEIRD_CHAR_RE.findall(text))


def has_typos_like_patterns(text: str) -> bool:
    # powtórzona interpunkcja, losowe wielkie litery, typowe literówki
    return bool(
        _REPEATED_PUNCT_RE.search(text)
        or _RANDOM_CAPS_RE.search(text)
        or _MISSPELL_RE.search(text)
    )


def has_weird_format(text: str) -> bool:
    if count_weird_chars(text) > WEIRD_CHARS_MAX:
        return True
    return text == text.upper() and len(text) > ALL_CAPS_MIN_LEN


def _phrase(key: str) -> Callable[[str, str, Sequence[str]], bool]:
    rx = _PHRASE_RES[key]
    return lambda raw, norm, links: bool(rx.search(norm))


# (raw, normalized, links) -> bool
DETECTORS: Dict[str, Callable[[str, str, Sequence[str]], bool]] = {
    "urgency": _phrase("urgency"),
    "credential": _phrase("credential"),
    "money": _phrase("money"),
    "impersonation": _phrase("impersonation"),
    "shortlink": lambda raw, norm, links: any(is_shortener(u) for u in links),
    "link_mismatch": lambda raw, norm, links: any(domain_looks_suspicious(u) for u in links),
    "threat": _phrase("threat"),
    "weird_format": lambda raw, norm, links: has_weird_format(raw),
    "typos": lambda raw, norm, links: has_typos_like_patterns(raw),
    "attachments": _phrase("attachments"),
}


def evaluate_signals(text: str, links: Sequence[str]) -> Dict[str, bool]:
    norm = normalize_for_check(text)
    return {s.key: DETECTORS[s.key](text, norm, links) for s in SIGNALS}


def fired(checks: Dict[str, bool]) -> List[Signal]:
    return [s for s in SIGNALS if checks.get(s.key)]
