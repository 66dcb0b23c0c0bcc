from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from .detection.links import extract_links
from .detection.signals import evaluate_signals, fired
from .keywords import (
    COMBO_BONUS,
    DEFAULT_MIN_SCORE_HIGH,
    DEFAULT_MIN_SCORE_MEDIUM,
    MANY_LINKS_BONUS,
    MULTI_LINKS_BONUS,
    NO_SIGNALS_REASON,
)

log = logging.getLogger(__name__)

CONFIDENCE_MIN = 55
CONFIDENCE_MAX = 92


class Verdict(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class AnalysisResult:
    score: int
    verdict: Verdict
    reasons: Tuple[str, ...]
    confidence: int
    hits: int
    links_found: int
    links: Tuple[str, ...] = field(default=())
    signals: Tuple[str, ...] = field(default=())

    def to_dict(self) -> Dict:
        return {
            "score": self.score,
            "verdict": self.verdict.value,
            "reasons": list(self.reasons),
            "confidence": self.confidence,
            "hits": self.hits,
            "linksFound": self.links_found,
            "links": list(self.links),
            "signals": list(self.signals),
        }


def clamp(n, lo, hi):
    return max(lo, min(hi, n))


def verdict_for(score: int) -> Verdict:
    if score >= DEFAULT_MIN_SCORE_HIGH:
        return Verdict.HIGH
    if score >= DEFAULT_MIN_SCORE_MEDIUM:
        return Verdict.MEDIUM
    return Verdict.LOW


def confidence_for(hits: int, text_length: int) -> int:
    """More signals and longer text raise confidence a little."""
    length_boost = clamp(text_length // 120, 0, 4)
    return clamp(CONFIDENCE_MIN + hits * 6 + length_boost * 3, CONFIDENCE_MIN, CONFIDENCE_MAX)


def analyze(text: str) -> AnalysisResult:
    """
    Score `text` for phishing signals.

    Registry signals add their weights in registry order, then the link bonuses
    (>=2 links, >=4 links, link + credential request) add theirs. Both link
    count bonuses stack.
    """
    raw = text or ""
    links = extract_links(raw)
    links_found = len(links)
    checks = evaluate_signals(raw, links)

    score = 0
    hits = 0
    reasons: List[str] = []
    hit_signals = fired(checks)
    for s in hit_signals:
        score += s.weight
        hits += 1
        reasons.append(s.label)

    for min_links, bonus, reason in (MULTI_LINKS_BONUS, MANY_LINKS_BONUS):
        if links_found >= min_links:
            score += bonus
            hits += 1
            reasons.append(reason)

    min_links, bonus, reason = COMBO_BONUS
    if checks["credential"] and links_found >= min_links:
        score += bonus
        hits += 1
        reasons.append(reason)

    score = clamp(int(round(score)), 0, 100)
    confidence = confidence_for(hits, len(raw))
    verdict = verdict_for(score)

    unique_reasons = list(dict.fromkeys(reasons)) or [NO_SIGNALS_REASON]

    log.debug("analyze: score=%s verdict=%s hits=%s links=%s signals=%s",
              score, verdict.value, hits, links_found, ",".join(s.key for s in hit_signals))

    return AnalysisResult(
        score=score,
        verdict=verdict,
        reasons=tuple(unique_reasons),
        confidence=confidence,
        hits=hits,
        links_found=links_found,
        links=tuple(links),
        signals=tuple(s.key for s in hit_signals),
    )
