"""Delimiter-based tokenization feeding the successor graph."""

from collections.abc import Iterator

from .graph import SuccessorGraph
from .pattern import DEFAULT_DELIMITERS, compile_delimiters
from .types import Spelling


def iter_tokens(text: str, delimiters: str = DEFAULT_DELIMITERS) -> Iterator[Spelling]:
    """
    Lazily yield the non-empty tokens of ``text`` from left to right.

    Runs of delimiter characters are skipped; everything else, punctuation
    included, belongs to a token.
    """
    pat = compile_delimiters(delimiters)
    for m in pat.finditer(text):
        yield m.group(0)


def scan(text: str, graph: SuccessorGraph, delimiters: str = DEFAULT_DELIMITERS) -> int:
    """
    Tokenize ``text`` and record every consecutive pair in ``graph``.

    Every token is interned, including the very first one which has no
    predecessor and therefore no edge.

    :param text: Scrubbed corpus text.
    :param graph: Graph receiving tokens and edges.
    :param delimiters: Token boundary characters.
    :returns: Number of tokens scanned.
    """
    prev: Spelling | None = None
    n_tokens = 0
    for tok in iter_tokens(text, delimiters):
        if prev is None:
            graph.add_token(tok)
        else:
            graph.record_edge(prev, tok)
        prev = tok
        n_tokens += 1
    return n_tokens
