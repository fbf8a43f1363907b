"""Custom exceptions for KindConf."""


class KindConfError(Exception):
    """Base exception for KindConf errors."""

    pass


class ConfigError(KindConfError):
    """Raised when a configuration update is rejected.

    Covers every recoverable failure: unknown keys, kind mismatches, writes to
    frozen parameters, unparseable scalar strings and malformed or duplicate
    ``key=value`` arguments.
    """

    def __init__(self, key: str, why: str):
        """Initialize configuration error.

        Args:
            key: The offending key  # (or the whole argument for malformed tokens)
            why: Human-readable reason, e.g. "has the wrong type"
        """
        self.key = key
        self.why = why
        super().__init__(f"config key '{key}' {why}")
