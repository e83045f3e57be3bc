"""
Configuration utilities for the benchmark harness.

Provides configuration loading, validation and merging for benchmark runs.
"""

import logging
import yaml
from typing import Dict, Any
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/benchmark.yaml"

KNOWN_IMPLEMENTATIONS = ("jaro_winkler_bytes", "jellyfish", "levenshtein")

_LONG_TEST_OUTPUT = (
    "test result: ok. 0 passed; 0 failed; 0 ignored; 0 measured; 0 filtered out; "
    "finished in 0.00s Doc-tests jaro running 0 tests test result: ok. 0 passed; "
    "0 failed; 0 ignored; 0 measured; 0 filtered out; finished in 0.00s"
)


def load_benchmark_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load benchmark configuration from YAML file.

    Values in the file override the defaults; missing keys keep their
    default values.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    config_file = Path(config_path)
    if not config_file.exists():
        logger.warning(f"Configuration file {config_path} not found, using defaults")
        return get_default_benchmark_config()

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load configuration from {config_path}: {e}")
        return get_default_benchmark_config()

    if not isinstance(config, dict):
        logger.error(f"Configuration in {config_path} must be a mapping, using defaults")
        return get_default_benchmark_config()

    bench_config = config.get('benchmark', {})
    if not isinstance(bench_config, dict):
        logger.error(f"benchmark section in {config_path} must be a mapping, using defaults")
        return get_default_benchmark_config()

    merged = merge_configs(get_default_benchmark_config(), bench_config)

    # Cases listed in the file replace the default set
    if 'cases' in bench_config:
        merged['cases'] = bench_config['cases']

    logger.info(f"Loaded benchmark configuration from {config_path}")
    return merged


def get_default_benchmark_config() -> Dict[str, Any]:
    """
    Get default benchmark configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "implementations": list(KNOWN_IMPLEMENTATIONS),
        "flipped": True,
        "timing": {
            "number": 1000,
            "repeat": 5
        },
        "cases": {
            "standard": ["wonderful", "wonderment"],
            "short": ["hello", "hell"],
            "different": ["hello hi what is going on", "hell"],
            "long": [_LONG_TEST_OUTPUT, "wonderment double double"],
            "both long": [
                _LONG_TEST_OUTPUT,
                "; 0 ignored; 0 measured; 0 filtered out; finished in 0.00s Doc-tests "
                "jaro running 0 tests test result: ok. 0 passed; 0 failed; 0 ignored; "
                "0 measured; 0 filtered out; finished in 0.00s"
            ]
        }
    }


def validate_benchmark_config(config: Dict[str, Any]) -> bool:
    """
    Validate benchmark configuration.

    Args:
        config: Configuration dictionary

    Returns:
        True if configuration is valid, False otherwise
    """
    required_sections = ["implementations", "timing", "cases"]

    for section in required_sections:
        if section not in config:
            logger.error(f"Missing required configuration section: {section}")
            return False

    implementations = config.get("implementations", [])
    if not isinstance(implementations, list) or not implementations:
        logger.error("implementations must be a non-empty list")
        return False

    for name in implementations:
        if name not in KNOWN_IMPLEMENTATIONS:
            logger.error(f"Unknown implementation: {name}")
            return False

    timing = config.get("timing", {})
    for key in ("number", "repeat"):
        value = timing.get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            logger.error(f"timing.{key} must be a positive integer")
            return False

    if not isinstance(config.get("flipped", True), bool):
        logger.error("flipped must be a boolean")
        return False

    cases = config.get("cases", {})
    if not isinstance(cases, dict) or not cases:
        logger.error("cases must be a non-empty mapping")
        return False

    for name, pair in cases.items():
        if (not isinstance(pair, (list, tuple)) or len(pair) != 2
                or not all(isinstance(value, str) for value in pair)):
            logger.error(f"Case {name} must be a pair of strings")
            return False

    logger.info("Configuration validation passed")
    return True


def merge_configs(base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge two configuration dictionaries.

    Args:
        base_config: Base configuration
        override_config: Override configuration

    Returns:
        Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def save_benchmark_config(config: Dict[str, Any], config_path: str) -> bool:
    """
    Save benchmark configuration to YAML file.

    Args:
        config: Configuration dictionary
        config_path: Path to save configuration

    Returns:
        True if successful, False otherwise
    """
    try:
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w') as f:
            yaml.dump({"benchmark": config}, f, default_flow_style=False, indent=2)

        logger.info(f"Saved configuration to {config_path}")
        return True

    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to save configuration to {config_path}: {e}")
        return False
