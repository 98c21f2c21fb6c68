"""Parallel processing mode helpers for batch sentence generation."""

import os
import random
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from math import ceil
from typing import TYPE_CHECKING, Literal

from .errors import StrategyError, WordWalkError
from .sampler import (
    DEFAULT_MAX_CHARS,
    DEFAULT_MAX_START_ATTEMPTS,
    DEFAULT_RETRIES,
    WalkResult,
)

if TYPE_CHECKING:
    from .model import MarkovModel
    from .strategy import StartStrategy

ParallelStrategy = Literal["auto", "thread", "off"]

# below this many sentences thread start-up costs more than it saves
_AUTO_MIN_BATCH = 64


class ParallelMode(str, Enum):
    """Named parallelization modes for batch generation."""

    AUTO = "auto"
    THREAD = "thread"
    OFF = "off"

    @classmethod
    def get(cls, name: str) -> "ParallelMode":
        """Get parallel mode by name (case-insensitive)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise StrategyError(
                "unknown mode",
                invalid_name=name,
                available=[mode.value for mode in cls],
            )


def list_parallel_modes() -> list[str]:
    """Return available parallel mode names."""
    return [mode.value for mode in ParallelMode]


def generate_batch(
    model: "MarkovModel",
    count: int,
    *,
    mark: str | None = None,
    seed: int | None = None,
    strategy: "str | StartStrategy" = "uppercase",
    retries: int = DEFAULT_RETRIES,
    max_chars: int = DEFAULT_MAX_CHARS,
    max_start_attempts: int = DEFAULT_MAX_START_ATTEMPTS,
    num_workers: int | None = None,
    parallel_mode: ParallelStrategy = "auto",
) -> list[WalkResult | None]:
    """
    Generate ``count`` sentences from a built model.

    Every sentence gets its own generator seeded from a master generator, so
    for a fixed ``seed`` the output is the same whatever the worker count.
    Workers only read the frozen graph.

    :param model: Built model to sample from.
    :param count: Number of sentences.
    :param mark: Required last character; ``None`` returns plain walks.
    :param seed: Master seed, OS entropy if ``None``.
    :param strategy: Start strategy instance or name.
    :param retries: Walks per sentence when ``mark`` is set.
    :param max_chars: Size bound per walk.
    :param max_start_attempts: Random draws before the linear-scan fallback.
    :param num_workers: Thread count, CPU count if ``None``.
    :param parallel_mode: ``"thread"``, ``"off"`` or ``"auto"``.
    :returns: One result per sentence in order; ``None`` where retries ran out.
    :raises WordWalkError: If the model is not built.
    :raises StrategyError: If ``parallel_mode`` is unknown.
    """
    mode = ParallelMode.get(parallel_mode)
    if not model.built:
        raise WordWalkError("model must be built before sampling")
    if count <= 0:
        return []

    master = random.Random(seed)
    seeds = [master.getrandbits(64) for _ in range(count)]

    def generate_one(sentence_seed: int) -> WalkResult | None:
        sampler = model.sampler(
            seed=sentence_seed,
            strategy=strategy,
            max_start_attempts=max_start_attempts,
        )
        if mark is None:
            return sampler.walk(max_chars)
        return sampler.sample_ending(mark, retries=retries, max_chars=max_chars)

    if num_workers is None:
        workers = os.cpu_count() or 1
    else:
        workers = max(1, num_workers)  # "0" interpreted as 1 worker

    if mode is ParallelMode.AUTO:
        mode = ParallelMode.THREAD if count >= _AUTO_MIN_BATCH else ParallelMode.OFF

    if mode is ParallelMode.OFF or workers == 1:
        return [generate_one(s) for s in seeds]

    # group seeds to reduce task-scheduling overhead for large batches
    target_tasks = min(count, workers * 2)
    group_size = max(1, ceil(count / target_tasks))
    groups = [seeds[i : i + group_size] for i in range(0, count, group_size)]

    def generate_group(group: list[int]) -> list[WalkResult | None]:
        return [generate_one(s) for s in group]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(generate_group, groups))
    return [r for group in results for r in group]


__all__ = [
    "ParallelStrategy",
    "ParallelMode",
    "list_parallel_modes",
    "generate_batch",
]
