"""
Benchmark harness for jaro-winkler-bytes.

Times this package's Jaro-Winkler similarity against third-party
implementations on a fixed set of string pairs, in both argument orders,
and reports per-call timings.
"""

import argparse
import logging
import sys
import time
import timeit
from typing import Any, Callable, Dict, List, Optional, Tuple
import pandas as pd
import jellyfish
import Levenshtein

from ..match.jaro_winkler import similarity
from ..reporting.benchmark_report import build_summary, save_report, summarize_timings
from .config import DEFAULT_CONFIG_PATH, load_benchmark_config, validate_benchmark_config

logger = logging.getLogger(__name__)


def _utf8_pair(left: str, right: str) -> Tuple[bytes, bytes]:
    return left.encode("utf-8"), right.encode("utf-8")


def _text_pair(left: str, right: str) -> Tuple[str, str]:
    return left, right


# name -> (argument preparation, scoring function)
IMPLEMENTATIONS: Dict[str, Tuple[Callable, Callable[..., float]]] = {
    "jaro_winkler_bytes": (_utf8_pair, similarity),
    "jellyfish": (_text_pair, jellyfish.jaro_winkler_similarity),
    "levenshtein": (_text_pair, Levenshtein.jaro_winkler),
}


class BenchmarkPipeline:
    """
    Runs the configured benchmark cases for every configured implementation.

    Arguments are prepared before timing starts, so only the scoring call is
    measured.
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH,
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize pipeline with configuration.

        Args:
            config_path: Path to configuration file
            config: Configuration dictionary, used instead of the file when given
        """
        self.config_path = config_path
        self.config = config if config is not None else load_benchmark_config(config_path)

        if not validate_benchmark_config(self.config):
            source = "in-memory config" if config is not None else config_path
            raise ValueError(f"Invalid benchmark configuration: {source}")

        self.timing = self.config["timing"]
        self.stage_times: Dict[str, float] = {}

        logger.info("Initialized benchmark pipeline")

    def _start_stage_timer(self, stage_name: str):
        """Start timing for a pipeline stage."""
        self.stage_times[stage_name] = time.time()
        logger.info(f"Starting stage: {stage_name}")

    def _end_stage_timer(self, stage_name: str):
        """End timing for a pipeline stage."""
        if stage_name in self.stage_times:
            duration = time.time() - self.stage_times[stage_name]
            logger.info(f"Completed stage: {stage_name} in {duration:.2f} seconds")

    def select_cases(self, case_names: Optional[List[str]] = None) -> Dict[str, Tuple[str, str]]:
        """
        Pick the cases to run.

        Args:
            case_names: Case names to keep, or None for all configured cases

        Returns:
            Mapping of case name to (left, right)

        Raises:
            KeyError: If a requested case is not configured
        """
        cases = {name: tuple(pair) for name, pair in self.config["cases"].items()}
        if not case_names:
            return cases

        missing = [name for name in case_names if name not in cases]
        if missing:
            raise KeyError(f"Unknown benchmark case(s): {', '.join(missing)}")

        return {name: cases[name] for name in case_names}

    def time_case(self, case_name: str, implementation: str, left: str, right: str,
                  flipped: bool = False) -> Dict[str, Any]:
        """
        Time one implementation on one case.

        Args:
            case_name: Case label
            implementation: Implementation name from IMPLEMENTATIONS
            left: First string
            right: Second string
            flipped: Whether the arguments were swapped (recorded only)

        Returns:
            Raw timing sample
        """
        prepare, func = IMPLEMENTATIONS[implementation]
        args = prepare(left, right)
        number = self.timing["number"]

        score = float(func(*args))
        timings = timeit.repeat(lambda: func(*args), number=number,
                                repeat=self.timing["repeat"])

        logger.debug(f"{implementation} {case_name}{' flipped' if flipped else ''}: "
                     f"score={score:.6f} best={min(timings) / number * 1e6:.3f}us")

        return {
            "case": case_name,
            "implementation": implementation,
            "flipped": flipped,
            "score": score,
            "number": number,
            "timings": timings
        }

    def run_cases(self, cases: Dict[str, Tuple[str, str]]) -> pd.DataFrame:
        """
        Time every configured implementation on every case.

        Args:
            cases: Mapping of case name to (left, right)

        Returns:
            Results table
        """
        self._start_stage_timer("timing")

        samples = []
        for case_name, (left, right) in cases.items():
            for implementation in self.config["implementations"]:
                samples.append(self.time_case(case_name, implementation, left, right))
                if self.config.get("flipped", True):
                    samples.append(self.time_case(case_name, implementation, right, left,
                                                  flipped=True))

        results_df = summarize_timings(samples)
        logger.info(f"Timed {len(cases)} cases across "
                    f"{len(self.config['implementations'])} implementations")

        self._end_stage_timer("timing")
        return results_df

    def run_pipeline(self, case_names: Optional[List[str]] = None,
                     output_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Run the benchmark end to end.

        Args:
            case_names: Cases to run, or None for all
            output_path: Directory for the CSV and summary, or None to skip writing

        Returns:
            Dictionary with the results table and summary
        """
        start = time.time()
        logger.info("Starting benchmark run")

        try:
            cases = self.select_cases(case_names)
            results_df = self.run_cases(cases)
            summary = build_summary(results_df)

            if output_path:
                save_report(results_df, summary, output_path)

            logger.info(f"Benchmark completed in {time.time() - start:.2f} seconds")

            return {"results": results_df, "summary": summary}

        except Exception as e:
            logger.error(f"Benchmark failed: {e}")
            raise


def main(argv: Optional[List[str]] = None):
    """Main entry point for the benchmark harness."""
    parser = argparse.ArgumentParser(description="Jaro-Winkler similarity benchmark")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Configuration file path")
    parser.add_argument("--output", help="Output directory path")
    parser.add_argument("--case", action="append", dest="cases",
                        help="Case to run (repeatable, default: all)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        pipeline = BenchmarkPipeline(args.config)
        report = pipeline.run_pipeline(case_names=args.cases, output_path=args.output)

        results_df = report["results"]
        print("\n" + "=" * 50)
        print("BENCHMARK SUMMARY")
        print("=" * 50)
        for row in results_df.itertuples(index=False):
            label = f"{row.implementation} {row.case}{' flipped' if row.flipped else ''}"
            print(f"{label:<45} score={row.score:.4f} median={row.median_us:9.3f}us")
        print("=" * 50)

    except Exception as e:
        logger.error(f"Benchmark execution failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
