"""Sampling configuration with environment variable overrides."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Final

from .errors import ConfigError
from .sampler import DEFAULT_MAX_CHARS, DEFAULT_MAX_START_ATTEMPTS, DEFAULT_RETRIES
from .strategy import StrategyName, list_strategies

ENV_PREFIX: Final[str] = "WORDWALK_"


@dataclass(frozen=True)
class SamplerConfig:
    """Knobs for sentence generation."""

    # output size bound per walk, in characters
    max_chars: int = DEFAULT_MAX_CHARS
    # walks per requested sentence before giving up
    retries: int = DEFAULT_RETRIES
    max_start_attempts: int = DEFAULT_MAX_START_ATTEMPTS
    # None seeds from OS entropy
    seed: int | None = None
    strategy: StrategyName = "uppercase"

    def __post_init__(self) -> None:
        if self.max_chars < 1:
            raise ConfigError("max_chars must be positive", key="max_chars", value=self.max_chars)
        if self.retries < 0:
            raise ConfigError("retries must be >= 0", key="retries", value=self.retries)
        if self.max_start_attempts < 0:
            raise ConfigError(
                "max_start_attempts must be >= 0",
                key="max_start_attempts",
                value=self.max_start_attempts,
            )
        if self.strategy not in list_strategies():
            raise ConfigError("unknown start strategy", key="strategy", value=self.strategy)
        if self.strategy == "custom":
            raise ConfigError(
                "custom strategy needs an explicit subset, pass a CustomStartStrategy instead",
                key="strategy",
                value=self.strategy,
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SamplerConfig":
        """
        Build a config from ``WORDWALK_*`` variables, defaults for the rest.

        ``WORDWALK_MAX_CHARS``, ``WORDWALK_RETRIES``, ``WORDWALK_MAX_START_ATTEMPTS``
        and ``WORDWALK_SEED`` are integers; ``WORDWALK_STRATEGY`` is a strategy name.

        :raises ConfigError: If a variable does not parse or is out of range.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            raw = env.get(key, "").strip()
            if not raw:
                continue
            if f.name == "strategy":
                values[f.name] = raw.lower()
                continue
            try:
                values[f.name] = int(raw)
            except ValueError as e:
                raise ConfigError("expected an integer", key=key, value=raw) from e
        return cls(**values)

    def merge(self, **overrides: object) -> "SamplerConfig":
        """Return a copy with every non-``None`` override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
