"""wordwalk: first-order word Markov chains with constrained sentence sampling."""

from .errors import (
    CapacityError,
    ConfigError,
    CorpusError,
    FrozenGraphError,
    PatternError,
    StrategyError,
    VocabularyError,
    WordWalkError,
)
from .interner import TokenInterner, djb2
from .graph import Node, SuccessorGraph
from .pattern import Delimiters, list_delimiters
from .tokenizer import iter_tokens, scan
from .sampler import SentenceSampler, WalkEnd, WalkResult, ends_sentence
from .model import MarkovModel
from .factory import from_file, from_text, read_corpus
from .config import SamplerConfig
from .parallel import generate_batch, list_parallel_modes
from .strategy import (
    AnyStartStrategy,
    CustomStartStrategy,
    StartStrategy,
    UppercaseStartStrategy,
    get_strategy,
    list_strategies,
)

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("wordwalk")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "WordWalkError",
    "CapacityError",
    "ConfigError",
    "CorpusError",
    "FrozenGraphError",
    "PatternError",
    "StrategyError",
    "VocabularyError",
    "TokenInterner",
    "djb2",
    "Node",
    "SuccessorGraph",
    "Delimiters",
    "iter_tokens",
    "scan",
    "SentenceSampler",
    "WalkEnd",
    "WalkResult",
    "ends_sentence",
    "MarkovModel",
    "SamplerConfig",
    "StartStrategy",
    "UppercaseStartStrategy",
    "AnyStartStrategy",
    "CustomStartStrategy",
    "get_strategy",
    "from_text",
    "from_file",
    "read_corpus",
    "generate_batch",
    "list_delimiters",
    "list_parallel_modes",
    "list_strategies",
]
