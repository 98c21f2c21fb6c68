"""Build models from Hugging Face datasets, e.g. Project Gutenberg collections."""

import logging

from datasets import load_dataset

from ._sanitise import scrub
from .errors import CorpusError
from .factory import from_text
from .interner import DEFAULT_CAPACITY
from .model import MarkovModel
from .pattern import DEFAULT_DELIMITERS

log = logging.getLogger(__name__)

GUTENBERG_SCIFI = "stevez80/Sci-Fi-Books-gutenberg"


def load_corpus(
    name: str = GUTENBERG_SCIFI,
    *,
    split: str = "train",
    column: str = "text",
    num_docs: int | None = None,
) -> str:
    """
    Load up to ``num_docs`` documents and join them with newlines.

    :raises CorpusError: If the dataset has no ``column``.
    """
    ds = load_dataset(name, split=split)
    if column not in ds.column_names:
        raise CorpusError(
            f"dataset has no column {column!r} (columns: {ds.column_names})", path=name
        )
    docs = ds[:num_docs][column] if num_docs is not None else ds[column]
    log.info("loaded %d documents from %s[%s]", len(docs), name, split)
    return scrub("\n".join(docs))


def from_dataset(
    name: str = GUTENBERG_SCIFI,
    *,
    split: str = "train",
    column: str = "text",
    num_docs: int | None = None,
    delimiters: str = DEFAULT_DELIMITERS,
    capacity: int = DEFAULT_CAPACITY,
    max_capacity: int | None = None,
) -> MarkovModel:
    """
    Build a model from a Hugging Face dataset text column.

    .. code-block:: python

        model = from_dataset(num_docs=10)
        print(model.sampler().sample_ending("!").text)
    """
    text = load_corpus(name, split=split, column=column, num_docs=num_docs)
    return from_text(
        text,
        delimiters=delimiters,
        capacity=capacity,
        max_capacity=max_capacity,
        scrub=False,
    )
