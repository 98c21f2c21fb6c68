"""
Random walks over the successor graph.

A walk starts from a token accepted by the start strategy and keeps following
uniformly chosen successors until it emits a sentence-ending token, reaches a
dead end, or would overflow the output size. Constrained generation ("a
sentence ending in ``?``") is rejection sampling over independent walks.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .graph import SuccessorGraph
from .strategy import StartStrategy, UppercaseStartStrategy
from .types import Spelling, TokenId

TERMINAL_MARKS: Final[frozenset[str]] = frozenset(".?!")
DEFAULT_MAX_CHARS: Final[int] = 4095
DEFAULT_RETRIES: Final[int] = 1000
DEFAULT_MAX_START_ATTEMPTS: Final[int] = 10_000

log = logging.getLogger(__name__)


def ends_sentence(spelling: Spelling) -> bool:
    """Return ``True`` if the last character of ``spelling`` is ``.``, ``?`` or ``!``."""
    return bool(spelling) and spelling[-1] in TERMINAL_MARKS


class WalkEnd(str, Enum):
    """Why a walk stopped."""

    TERMINAL = "terminal"
    DEAD_END = "dead_end"
    TRUNCATED = "truncated"


@dataclass(frozen=True)
class WalkResult:
    """Text produced by one walk and the reason it stopped."""

    text: str
    end: WalkEnd
    token_ids: tuple[TokenId, ...]

    @property
    def terminal(self) -> bool:
        return self.end is WalkEnd.TERMINAL

    @property
    def last_char(self) -> str:
        return self.text[-1] if self.text else ""

    def ends_with(self, mark: str) -> bool:
        return self.last_char == mark


class SentenceSampler:
    """
    Samples token chains from a read-only :class:`SuccessorGraph`.

    Several samplers may share one frozen graph; each owns its random generator.
    """

    def __init__(
        self,
        graph: SuccessorGraph,
        rng: random.Random | None = None,
        strategy: StartStrategy | None = None,
        max_start_attempts: int = DEFAULT_MAX_START_ATTEMPTS,
    ) -> None:
        """
        :param graph: Graph to walk.
        :param rng: Random generator, a fresh OS-seeded one if ``None``.
        :param strategy: Start strategy, uppercase-first-letter if ``None``.
        :param max_start_attempts: Random draws before falling back to a linear scan.
        """
        if max_start_attempts < 0:
            raise ValueError("max_start_attempts must be >= 0")
        self.graph = graph
        self.rng = rng if rng is not None else random.Random()
        self.strategy = strategy if strategy is not None else UppercaseStartStrategy()
        self.max_start_attempts = max_start_attempts

    def pick_start(self) -> TokenId | None:
        """
        Pick the id of a token accepted by the start strategy.

        Tries ``max_start_attempts`` uniform draws, then the lowest accepted id,
        then id 0. Returns ``None`` only when the vocabulary is empty.
        """
        n = len(self.graph)
        if n == 0:
            return None

        for _ in range(self.max_start_attempts):
            token_id = self.rng.randrange(n)
            if self.strategy.accepts(self.graph.spelling(token_id)):
                return token_id

        log.debug("no start token after %d draws, scanning", self.max_start_attempts)
        for token_id in range(n):
            if self.strategy.accepts(self.graph.spelling(token_id)):
                return token_id

        log.debug("no token accepted by %s, using id 0", type(self.strategy).__name__)
        return 0

    def walk(self, max_chars: int = DEFAULT_MAX_CHARS) -> WalkResult:
        """
        Build one candidate sentence of at most ``max_chars`` characters.

        :param max_chars: Maximum length of the space-joined output.
        :returns: The text and whether it ended on a terminal token, a dead end
                  or the size bound.
        :raises ValueError: If ``max_chars`` is not positive.
        """
        if max_chars < 1:
            raise ValueError("max_chars must be positive")

        current = self.pick_start()
        if current is None:
            return WalkResult("", WalkEnd.DEAD_END, ())

        token = self.graph.spelling(current)
        if len(token) > max_chars:
            return WalkResult(token[:max_chars], WalkEnd.TRUNCATED, (current,))

        parts = [token]
        ids = [current]
        length = len(token)
        if ends_sentence(token):
            return WalkResult(token, WalkEnd.TERMINAL, (current,))

        # each step adds at least two characters, so the size bound ends cycles
        while True:
            successors = self.graph.successors_of(current)
            if not successors:
                end = WalkEnd.DEAD_END
                break

            nxt = successors[self.rng.randrange(len(successors))]
            token = self.graph.spelling(nxt)
            if length + 1 + len(token) > max_chars:
                end = WalkEnd.TRUNCATED
                break

            parts.append(token)
            ids.append(nxt)
            length += 1 + len(token)
            current = nxt
            if ends_sentence(token):
                end = WalkEnd.TERMINAL
                break

        return WalkResult(" ".join(parts), end, tuple(ids))

    def sample_ending(
        self,
        mark: str,
        retries: int = DEFAULT_RETRIES,
        max_chars: int = DEFAULT_MAX_CHARS,
    ) -> WalkResult | None:
        """
        Walk repeatedly until the output ends with ``mark``.

        :param mark: Required last character, usually ``?`` or ``!``.
        :param retries: Maximum number of walks.
        :param max_chars: Size bound passed to every walk.
        :returns: The first matching walk, or ``None`` once retries are exhausted.
        :raises ValueError: If ``mark`` is not a single character.
        """
        if len(mark) != 1:
            raise ValueError(f"mark must be a single character, got {mark!r}")

        for _ in range(retries):
            result = self.walk(max_chars)
            if result.ends_with(mark):
                return result

        log.debug("no sentence ending in %r after %d walks", mark, retries)
        return None
