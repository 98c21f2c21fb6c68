"""Custom exception hierarchy for wordwalk errors."""

import regex as re


class WordWalkError(Exception):
    """Base exception for all wordwalk errors."""


class CapacityError(WordWalkError):
    """Raised when the interning table cannot hold another spelling."""

    def __init__(
        self,
        message: str,
        *,
        capacity: int | None = None,
        vocab_size: int | None = None,
    ) -> None:
        """Initialize with optional table capacity and vocab size appended to the message."""
        extra = " "
        if capacity is not None:
            extra += f"(capacity: {capacity}) "
        if vocab_size is not None:
            extra += f"(vocab size: {vocab_size}) "
        super().__init__(message + extra)
        self.capacity = capacity
        self.vocab_size = vocab_size


class VocabularyError(WordWalkError):
    """Raised when a token id is not part of the vocabulary."""

    def __init__(self, message: str, *, invalid_id: int | None = None) -> None:
        extra = " "
        if invalid_id is not None:
            extra += f"(invalid id: {invalid_id}) "
        super().__init__(message + extra)
        self.invalid_id = invalid_id


class FrozenGraphError(WordWalkError):
    """Raised when a frozen successor graph is mutated."""


class PatternError(WordWalkError):
    """Raised when compiling and/or validating delimiter patterns."""

    def __init__(
        self,
        message: str,
        *,
        pattern: str | None = None,
        regex_err: re.error | None = None,
    ) -> None:
        """
        Initialize PatternError with pattern details.

        Args:
            message: Error message.
            pattern: The delimiter set or regex pattern that failed.
            regex_err: The underlying regex error from the regex library.
        """
        extra = " "
        if pattern is not None:
            extra += f"(pattern: {pattern!r}) "
        if regex_err:
            extra += f"(reason: {regex_err}) "
        super().__init__(message + extra)
        self.pattern = pattern
        self.regex_err = regex_err


class StrategyError(WordWalkError):
    """Raised when a strategy or mode name cannot be resolved."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available


class CorpusError(WordWalkError):
    """Raised when a corpus cannot be read."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        extra = " "
        if path:
            extra += f"(path: {path}) "
        super().__init__(message + extra)
        self.path = path


class ConfigError(WordWalkError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self, message: str, *, key: str | None = None, value: object = None
    ) -> None:
        extra = " "
        if key:
            extra += f"(key: {key}) (got {value!r}) "
        super().__init__(message + extra)
        self.key = key
        self.value = value
