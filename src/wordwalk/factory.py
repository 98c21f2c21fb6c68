"""Factory functions for loading corpora and building models."""

import logging
from pathlib import Path

from . import _sanitise
from .errors import CorpusError
from .interner import DEFAULT_CAPACITY
from .model import MarkovModel
from .pattern import DEFAULT_DELIMITERS

log = logging.getLogger(__name__)


def read_corpus(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Read a corpus file and scrub it for tokenization.

    Undecodable bytes become U+FFFD, every non-printable character becomes a
    space.

    :param path: Path to a text file.
    :param encoding: Text encoding of the file.
    :return: Scrubbed corpus text.
    :raises CorpusError: If the file does not exist or cannot be read.
    """
    p = Path(path)
    if not p.is_file():
        raise CorpusError("corpus file does not exist", path=str(p))
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise CorpusError(f"could not read corpus: {e.strerror}", path=str(p)) from e

    try:
        text = raw.decode(encoding, errors="replace")
    except LookupError as e:
        raise CorpusError(f"unknown encoding {encoding!r}", path=str(p)) from e

    log.info("loaded %s (%d bytes)", p, len(raw))
    return _sanitise.scrub(text)


def from_text(
    text: str,
    *,
    delimiters: str = DEFAULT_DELIMITERS,
    capacity: int = DEFAULT_CAPACITY,
    max_capacity: int | None = None,
    scrub: bool = True,
) -> MarkovModel:
    """
    Build a model from in-memory text.

    :param text: Corpus text.
    :param delimiters: Token boundary characters.
    :param capacity: Initial interning table size.
    :param max_capacity: Interning table size limit, ``None`` for unbounded.
    :param scrub: Replace non-printable characters before scanning.
    :return: Built model.

    .. code-block:: python

        model = from_text("Who are you? Run away! Run fast.")
        sampler = model.sampler(seed=7)
        print(sampler.sample_ending("?").text)
    """
    if scrub:
        text = _sanitise.scrub(text)
    model = MarkovModel(delimiters, capacity, max_capacity)
    return model.build(text)


def from_file(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    delimiters: str = DEFAULT_DELIMITERS,
    capacity: int = DEFAULT_CAPACITY,
    max_capacity: int | None = None,
) -> MarkovModel:
    """
    Build a model from a text file.

    :raises CorpusError: If the file cannot be read.
    """
    text = read_corpus(path, encoding)
    return from_text(
        text,
        delimiters=delimiters,
        capacity=capacity,
        max_capacity=max_capacity,
        scrub=False,
    )
