"""
Benchmark reporting for jaro-winkler-bytes.

Turns raw timing samples into a results table and writes the table and a
summary to disk.
"""

import logging
from pathlib import Path
from typing import Dict, List, Any
import numpy as np
import pandas as pd
import yaml

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "case", "implementation", "flipped", "score",
    "best_us", "median_us", "mean_us", "calls"
]


def summarize_timings(samples: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    Build the results table from raw timing samples.

    Each sample holds ``case``, ``implementation``, ``flipped``, ``score``,
    ``number`` (calls per repeat) and ``timings`` (seconds per repeat).

    Args:
        samples: Raw timing samples

    Returns:
        DataFrame with one row per sample and per-call times in microseconds
    """
    rows = []

    for sample in samples:
        per_call_us = np.asarray(sample["timings"], dtype=float) / sample["number"] * 1e6
        rows.append({
            "case": sample["case"],
            "implementation": sample["implementation"],
            "flipped": sample["flipped"],
            "score": sample["score"],
            "best_us": float(np.min(per_call_us)),
            "median_us": float(np.median(per_call_us)),
            "mean_us": float(np.mean(per_call_us)),
            "calls": sample["number"] * len(per_call_us)
        })

    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def build_summary(results_df: pd.DataFrame) -> Dict[str, Any]:
    """
    Summarize a results table per implementation.

    Args:
        results_df: Table produced by summarize_timings

    Returns:
        Dictionary with per-implementation median timings and the cases
        where implementations disagree on the score
    """
    if results_df.empty:
        return {"implementations": {}, "score_disagreements": []}

    per_impl = results_df.groupby("implementation")["median_us"].agg(["mean", "min", "max"])

    implementations = {
        name: {
            "mean_median_us": round(float(row["mean"]), 3),
            "fastest_case_us": round(float(row["min"]), 3),
            "slowest_case_us": round(float(row["max"]), 3)
        }
        for name, row in per_impl.iterrows()
    }

    # Implementations use different rules in a few corner cases
    spread = results_df.groupby("case")["score"].agg(lambda s: float(s.max() - s.min()))
    disagreements = [
        {"case": case, "score_spread": round(value, 6)}
        for case, value in spread.items()
        if value > 1e-9
    ]

    return {
        "implementations": implementations,
        "score_disagreements": disagreements
    }


def save_report(results_df: pd.DataFrame, summary: Dict[str, Any], output_path: str) -> Path:
    """
    Write the results table and summary to ``output_path``.

    Args:
        results_df: Results table
        summary: Summary from build_summary
        output_path: Output directory

    Returns:
        Path of the output directory
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    results_df.to_csv(output_dir / "benchmark_results.csv", index=False)

    with open(output_dir / "benchmark_summary.yaml", 'w') as f:
        yaml.dump(summary, f, default_flow_style=False, indent=2, sort_keys=False)

    logger.info(f"Benchmark report saved to {output_path}")
    return output_dir
