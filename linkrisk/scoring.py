# linkrisk/scoring.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple

from .normalizer import normalize
from .rules_engine import CATALOGUE, Rule, RuleCategory

logger = logging.getLogger("linkrisk.scoring")

MAX_SCORE = 100
SUSPICIOUS_BELOW = 80   # safe_percent < 80 => at least SUSPICIOUS
UNSAFE_BELOW = 50       # safe_percent < 50 => UNSAFE


class Verdict(str, Enum):
    SAFE = "SAFE"
    SUSPICIOUS = "SUSPICIOUS"
    UNSAFE = "UNSAFE"


@dataclass(frozen=True)
class Finding:
    message: str
    category: RuleCategory
    weight: int


@dataclass(frozen=True)
class AnalysisResult:
    score: int                      # 0..100, higher is riskier
    safe_percent: int               # 100 - score
    verdict: Verdict
    findings: Tuple[Finding, ...]

    @property
    def messages(self) -> List[str]:
        return [f.message for f in self.findings]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "safePercent": self.safe_percent,
            "verdict": self.verdict.value,
            "findings": self.messages,
        }


def verdict_for(safe_percent: int) -> Verdict:
    verdict = Verdict.SAFE
    if safe_percent < SUSPICIOUS_BELOW:
        verdict = Verdict.SUSPICIOUS
    if safe_percent < UNSAFE_BELOW:
        verdict = Verdict.UNSAFE
    return verdict


def analyze(url: str, rules: Tuple[Rule, ...] = CATALOGUE) -> AnalysisResult:
    """Score ``url`` against every rule and return the verdict with its findings.

    Each matching rule adds its full weight; the total is capped at 100.
    Any string (empty, malformed, non-ASCII) yields a result, never an error.
    """
    if not isinstance(url, str):
        raise TypeError(f"analyze() expects str, got {type(url).__name__}")

    inp = normalize(url)
    risk = 0
    findings: List[Finding] = []
    for rule in rules:
        if rule.matches(inp):
            risk += rule.weight
            findings.append(Finding(rule.message, rule.category, rule.weight))
            logger.debug("rule fired: %s (+%d) %s", rule.category.value, rule.weight, rule.message)

    score = min(MAX_SCORE, risk)
    safe_percent = max(0, MAX_SCORE - score)
    verdict = verdict_for(safe_percent)
    logger.debug("analyzed %r: raw=%d score=%d verdict=%s", inp.host, risk, score, verdict.value)
    return AnalysisResult(
        score=score,
        safe_percent=safe_percent,
        verdict=verdict,
        findings=tuple(findings),
    )
