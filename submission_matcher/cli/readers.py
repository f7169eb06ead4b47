"""Token file reader for the matcher CLI."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .errors import TokenFileError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")


def parse_tokens(text: str, source: str = "<string>") -> list[int]:
    """
    Parse whitespace- and/or comma-separated integers.

    Everything after "#" on a line is ignored. Empty input yields [].

    Raises:
        TokenFileError: If a value is not an integer
    """
    tokens: list[int] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        content = line.split("#", 1)[0]
        for value in _SEPARATORS.split(content.strip()):
            if not value:
                continue
            try:
                tokens.append(int(value))
            except ValueError:
                raise TokenFileError(
                    f"{source}:{line_number}: not an integer token: {value!r}",
                    path=source,
                    line=line_number,
                ) from None
    return tokens


def read_token_file(path: str | Path) -> list[int]:
    """
    Read a token file.

    Raises:
        TokenFileError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    if not path.is_file():
        raise TokenFileError(f"Token file not found: {path}", path=str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TokenFileError(f"Cannot read token file {path}: {e}", path=str(path)) from e

    tokens = parse_tokens(text, source=str(path))
    logger.debug(f"Read {len(tokens)} tokens from {path}")
    return tokens
