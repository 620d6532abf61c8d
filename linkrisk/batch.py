# linkrisk/batch.py
"""Score a whole list of URLs (CSV column or text file) with pandas."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .config import URL_COLUMNS
from .scoring import Verdict, analyze

logger = logging.getLogger("linkrisk.batch")

RESULT_COLUMNS = ["score", "safe_percent", "verdict", "findings"]


def detect_url_column(df: pd.DataFrame) -> Optional[str]:
    """Return the first column whose name looks like a URL column."""
    for c in df.columns:
        if str(c).strip().lower() in URL_COLUMNS:
            return c
    return None


def load_urls(path: Union[str, Path]) -> pd.DataFrame:
    """Read a CSV, or a plain text file with one URL per line, into a DataFrame."""
    p = Path(path)
    if p.suffix.lower() == ".csv":
        return pd.read_csv(p, dtype=str, keep_default_na=False)
    lines = [ln.strip() for ln in p.read_text(encoding="utf-8").splitlines()]
    return pd.DataFrame({"url": [ln for ln in lines if ln and not ln.startswith("#")]})


def score_frame(df: pd.DataFrame, url_column: Optional[str] = None) -> pd.DataFrame:
    """Return a copy of ``df`` with score / safe_percent / verdict / findings columns."""
    col = url_column or detect_url_column(df)
    if col is None or col not in df.columns:
        raise ValueError(f"no URL column found (expected one of {', '.join(URL_COLUMNS)})")

    out = df.copy()
    results = [analyze("" if pd.isna(u) else str(u)) for u in out[col]]
    out["score"] = [r.score for r in results]
    out["safe_percent"] = [r.safe_percent for r in results]
    out["verdict"] = [r.verdict.value for r in results]
    out["findings"] = [" | ".join(r.messages) for r in results]
    logger.info("scored %d urls from column %r", len(out), col)
    return out


def verdict_summary(scored: pd.DataFrame) -> pd.DataFrame:
    """Count rows per verdict (every verdict listed, zero when absent)."""
    order = [v.value for v in Verdict]
    counts = scored["verdict"].value_counts().reindex(order, fill_value=0)
    total = int(counts.sum())
    summary = pd.DataFrame({"verdict": order, "count": counts.values})
    summary["percent"] = (summary["count"] / total * 100).round(1) if total else 0.0
    return summary


def summary_markdown(summary: pd.DataFrame) -> str:
    rows = ["| verdict | count | percent |", "|---|---:|---:|"]
    for _, r in summary.iterrows():
        rows.append(f"| {r['verdict']} | {int(r['count'])} | {float(r['percent']):.1f} |")
    return "\n".join(rows)


def score_file(path: Union[str, Path], url_column: Optional[str] = None,
               output: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    df = load_urls(path)
    scored = score_frame(df, url_column)
    if output:
        scored.to_csv(output, index=False)
        logger.info("wrote scored rows to %s", output)
    return scored
