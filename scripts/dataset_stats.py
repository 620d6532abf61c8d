"""Score every CSV dataset with linkrisk and produce a summary CSV + markdown table.

Usage: python scripts/dataset_stats.py [datasets_dir]

Creates: 'dataset_verdict_stats.csv' in the current directory and prints a markdown table.
"""
from pathlib import Path
import sys

import pandas as pd

from linkrisk.batch import detect_url_column, score_frame

PHISHING_LABELS = ("phish", "phishing", "malicious", "malware", "bad", "1")


def detect_label_column(df: pd.DataFrame):
    """Return a label column name, or None when the dataset is unlabelled."""
    common = {"label", "class", "status", "target", "type", "is_phish", "phishing"}
    for c in df.columns:
        if str(c).lower() in common:
            return c
    return None


def phishing_mask(series: pd.Series) -> pd.Series:
    text = series.astype(str).str.strip().str.lower()
    return text.isin(PHISHING_LABELS) | text.str.contains("phish", na=False)


def main():
    datasets_dir = Path(sys.argv[1] if len(sys.argv) > 1 else "datasets")
    if not datasets_dir.is_dir():
        print(f"Error: '{datasets_dir}/' directory not found.")
        sys.exit(1)

    csv_files = sorted(datasets_dir.glob("*.csv"))
    if not csv_files:
        print(f"No CSV files found in '{datasets_dir}/'.")
        sys.exit(0)

    results = []
    for p in csv_files:
        try:
            df = pd.read_csv(p, dtype=str, keep_default_na=False, on_bad_lines="skip")
        except Exception as e:
            print(f"[WARN] Failed to read {p}: {e}")
            continue

        if detect_url_column(df) is None:
            print(f"[WARN] {p.name}: no url column, skipped")
            continue

        scored = score_frame(df)
        counts = scored["verdict"].value_counts()
        row = {
            "filename": p.name,
            "total_rows": int(len(scored)),
            "safe": int(counts.get("SAFE", 0)),
            "suspicious": int(counts.get("SUSPICIOUS", 0)),
            "unsafe": int(counts.get("UNSAFE", 0)),
            "mean_score": round(float(scored["score"].mean()), 2) if len(scored) else 0.0,
            "flag_rate_on_phishing": None,
        }

        # share of rows labelled phishing that were not judged SAFE
        label_col = detect_label_column(df)
        if label_col is not None:
            mask = phishing_mask(scored[label_col])
            if mask.any():
                flagged = (scored.loc[mask, "verdict"] != "SAFE").mean()
                row["flag_rate_on_phishing"] = round(float(flagged) * 100, 1)
        results.append(row)

    out_path = Path("dataset_verdict_stats.csv")
    pd.DataFrame(results).to_csv(out_path, index=False)

    md_lines = [
        "| filename | rows | safe | suspicious | unsafe | mean score | flagged phishing % |",
        "|---|---:|---:|---:|---:|---:|---:|",
    ]
    for r in results:
        rate = r["flag_rate_on_phishing"]
        md_lines.append(
            "| {} | {} | {} | {} | {} | {} | {} |".format(
                r["filename"], r["total_rows"], r["safe"], r["suspicious"], r["unsafe"],
                r["mean_score"], rate if rate is not None else "n/a",
            )
        )
    print("\n".join(md_lines))
    print(f"\nSaved summary to: {out_path}")


if __name__ == "__main__":
    main()
