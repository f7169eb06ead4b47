"""Custom exceptions for matcher CLI operations."""


class MatcherCLIError(Exception):
    """Base exception for all matcher CLI errors."""

    pass


class TokenFileError(MatcherCLIError):
    """
    Raised when a token file cannot be used as input.

    This can happen when:
    - The file does not exist or cannot be read
    - A value is not an integer
    """

    def __init__(self, message: str, path: str | None = None, line: int | None = None):
        super().__init__(message)
        self.path = path
        self.line = line


class ConfigurationError(MatcherCLIError):
    """
    Raised when a matcher config file is invalid.

    This can happen when:
    - The YAML file is missing or malformed
    - The YAML top level is not a mapping
    - A key or value is rejected by MatcherConfig
    """

    pass
