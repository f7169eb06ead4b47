"""
Matcher CLI configuration.

Settings are resolved in this order (later wins):
1. MatcherConfig defaults
2. YAML file passed with --config (or MATCHER_CONFIG)
3. Command-line flags (defaults read from MATCHER_* environment variables)
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from ..matching import FALLBACK_POLICIES, MatcherConfig, MatcherConfigError
from .errors import ConfigurationError


def add_args(parser: argparse.ArgumentParser) -> None:
    """
    Add matcher arguments to the parser.

    Arguments can be overridden by environment variables.
    """
    parser.add_argument(
        "--config",
        dest="config_path",
        type=str,
        metavar="PATH",
        help="YAML file with MatcherConfig overrides.",
        default=os.environ.get("MATCHER_CONFIG") or None,
    )

    parser.add_argument(
        "--fallback-policy",
        dest="fallback_policy",
        choices=FALLBACK_POLICIES,
        help="Which accepted fallback window is kept (default: first).",
        default=os.environ.get("MATCHER_FALLBACK_POLICY") or None,
    )

    parser.add_argument(
        "--report-raw",
        dest="report_raw",
        action="store_true",
        help="Report detector statistics even when the pair is not significant.",
        default=os.environ.get("MATCHER_REPORT_RAW", "false").lower() == "true",
    )

    parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the result as JSON.",
        default=False,
    )

    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level.",
        default=os.environ.get("LOG_LEVEL", "WARNING"),
    )


def load_config_file(path: str | Path) -> dict[str, Any]:
    """
    Load MatcherConfig overrides from a YAML file.

    Raises:
        ConfigurationError: If the file is missing, malformed or not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def build_matcher_config(config: argparse.Namespace) -> MatcherConfig:
    """
    Resolve the MatcherConfig for a parsed command line.

    Raises:
        ConfigurationError: If the merged settings are rejected by MatcherConfig
    """
    settings: dict[str, Any] = {}
    if config.config_path:
        settings.update(load_config_file(config.config_path))

    if config.fallback_policy is not None:
        settings["fallback_policy"] = config.fallback_policy
    if config.report_raw:
        settings["report_raw"] = True

    try:
        return MatcherConfig.from_dict(settings)
    except (MatcherConfigError, TypeError) as e:
        raise ConfigurationError(f"Invalid matcher configuration: {e}") from e


def setup_logging(level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
