import numpy as np
from pathlib import Path

from .scoring import Verdict

VERDICT_BADGES = {
    Verdict.SAFE: "✅",
    Verdict.SUSPICIOUS: "⚠️",
    Verdict.UNSAFE: "❌",
}


def sanitize_for_json(obj):
    """
    Convert non-JSON-serializable objects into safe Python types
    """
    if isinstance(obj, dict):
        return {k: sanitize_for_json(v) for k, v in obj.items()}

    if isinstance(obj, list):
        return [sanitize_for_json(v) for v in obj]

    if isinstance(obj, tuple):
        return [sanitize_for_json(v) for v in obj]

    if isinstance(obj, np.generic):
        return obj.item()

    if isinstance(obj, Path):
        return str(obj)

    return obj


def verdict_badge(verdict) -> str:
    """Emoji for a verdict (enum member or its string value); empty for anything else."""
    for v, badge in VERDICT_BADGES.items():
        if verdict == v or verdict == v.value:
            return badge
    return ""


def meter_color(safe_percent: int) -> str:
    """Colour of the safety meter: green >= 80, yellow >= 50, red below."""
    if safe_percent >= 80:
        return "#2ecc71"
    if safe_percent >= 50:
        return "#f1c40f"
    return "#e74c3c"
