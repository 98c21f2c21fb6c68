"""
Markov model context owning the interner and the successor graph.
"""

import logging
import random

from ._decorators import measure_time
from .errors import WordWalkError
from .graph import SuccessorGraph
from .interner import DEFAULT_CAPACITY, TokenInterner
from .pattern import DEFAULT_DELIMITERS, compile_delimiters
from .sampler import DEFAULT_MAX_START_ATTEMPTS, SentenceSampler
from .strategy import StartStrategy, get_strategy
from .tokenizer import scan

log = logging.getLogger(__name__)


class MarkovModel:
    """
    First-order word model built once from a single corpus.

    The model is the explicit context shared by tokenization and sampling:
    :meth:`build` fills the interner and graph in one pass and freezes the
    graph, after which any number of samplers may read it concurrently.
    """

    def __init__(
        self,
        delimiters: str = DEFAULT_DELIMITERS,
        capacity: int = DEFAULT_CAPACITY,
        max_capacity: int | None = None,
    ) -> None:
        """
        :param delimiters: Token boundary characters.
        :param capacity: Initial interning table size.
        :param max_capacity: Interning table size limit, ``None`` for unbounded.
        :raises PatternError: If ``delimiters`` is empty.
        """
        # fail fast on a bad delimiter set
        compile_delimiters(delimiters)
        self.delimiters = delimiters
        self.interner = TokenInterner(capacity, max_capacity)
        self.graph = SuccessorGraph(self.interner)
        self.n_tokens = 0

    @property
    def built(self) -> bool:
        return self.graph.frozen

    @property
    def vocab_size(self) -> int:
        return len(self.interner)

    @measure_time
    def build(self, text: str) -> "MarkovModel":
        """
        Scan ``text`` into the graph and freeze it.

        :param text: Corpus text, already scrubbed of non-printable characters.
        :returns: ``self`` for chaining.
        :raises WordWalkError: If the model was already built.
        :raises CapacityError: If the interning table is exhausted.
        """
        if self.built:
            raise WordWalkError("model already built, create a new one per corpus")

        self.n_tokens = scan(text, self.graph, self.delimiters)
        self.graph.freeze()

        log.info(
            "scanned %d tokens: %d distinct, %d transitions, %d dead ends",
            self.n_tokens,
            self.vocab_size,
            self.graph.edge_count,
            len(self.graph.dead_ends()),
        )
        if self.n_tokens == 0:
            log.warning("corpus produced no tokens")
        return self

    def sampler(
        self,
        seed: int | None = None,
        strategy: str | StartStrategy = "uppercase",
        max_start_attempts: int = DEFAULT_MAX_START_ATTEMPTS,
        rng: random.Random | None = None,
    ) -> SentenceSampler:
        """
        Create a sampler over the built graph.

        :param seed: Seed for a new generator; ignored when ``rng`` is given.
        :param strategy: Start strategy instance or registered name.
        :param max_start_attempts: Random draws before the linear-scan fallback.
        :param rng: Generator to use instead of seeding a new one.
        :raises WordWalkError: If the model has not been built.
        :raises StrategyError: If ``strategy`` names no registered strategy.
        """
        if not self.built:
            raise WordWalkError("model must be built before sampling")
        if isinstance(strategy, str):
            strategy = get_strategy(strategy)
        return SentenceSampler(
            self.graph,
            rng=rng if rng is not None else random.Random(seed),
            strategy=strategy,
            max_start_attempts=max_start_attempts,
        )
