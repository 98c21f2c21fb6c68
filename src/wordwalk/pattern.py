from enum import Enum
from functools import lru_cache

import regex as re

from .errors import PatternError


class Delimiters(str, Enum):
    """
    Named sets of token boundary characters.

    Punctuation is never a delimiter, so marks like ``.``, ``?`` and ``!`` stay
    attached to the word they follow.
    """

    # space, CR and LF
    DEFAULT = " \r\n"
    WHITESPACE = " \t\r\n\f\v"

    @classmethod
    def get(cls, name: str) -> str:
        """Get a delimiter set by name (case-insensitive)."""
        try:
            return cls[name.upper().replace("-", "_")].value
        except KeyError:
            raise PatternError(
                f"Unknown delimiter set: {name!r}. "
                f"Valid sets: {', '.join(d.name.lower() for d in cls)}"
            )


def list_delimiters() -> list[str]:
    """Return names of all built-in delimiter sets."""
    return [d.name.lower() for d in Delimiters]


DEFAULT_DELIMITERS = Delimiters.DEFAULT.value


@lru_cache(maxsize=32)
def compile_delimiters(delimiters: str) -> re.Pattern[str]:
    """
    Compile a pattern matching maximal runs of non-delimiter characters.

    :param delimiters: Characters that separate tokens.
    :return: Compiled token pattern.
    :raises PatternError: If the set is empty or does not compile.
    """
    if not delimiters:
        raise PatternError("delimiter set must not be empty", pattern=delimiters)
    # escape by code point so control characters are safe inside the class
    klass = "".join(
        f"\\u{ord(c):04x}" if ord(c) <= 0xFFFF else f"\\U{ord(c):08x}"
        for c in dict.fromkeys(delimiters)
    )
    pattern = f"[^{klass}]+"
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError("invalid delimiter pattern", pattern=pattern, regex_err=e)
