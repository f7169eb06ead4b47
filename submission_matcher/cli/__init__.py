"""
Matcher CLI for comparing token sequences.

This module provides a command-line interface to:
- Compare two files of integer tokens
- Run the matcher on a built-in sample pair

Usage:
    # Compare two token files
    matcher-cli compare --a ./a.tokens --b ./b.tokens

    # JSON output, keeping statistics for non-significant pairs
    matcher-cli compare --a ./a.tokens --b ./b.tokens --json --report-raw

    # Thresholds from a YAML file
    matcher-cli compare --a ./a.tokens --b ./b.tokens --config matcher.yaml

Token files hold whitespace- or comma-separated integers; "#" starts a comment.
Exit codes: 0 success, 1 malformed input or handled error, 2 usage error.
"""

from .errors import ConfigurationError, MatcherCLIError, TokenFileError
from .readers import parse_tokens, read_token_file

__all__ = [
    # Readers
    "parse_tokens",
    "read_token_file",
    # Errors
    "MatcherCLIError",
    "TokenFileError",
    "ConfigurationError",
]
