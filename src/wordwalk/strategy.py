"""Start-token selection strategies for sentence sampling."""

from typing import Final, Literal, overload, override
from abc import ABC, abstractmethod
import logging

from .errors import StrategyError
from .types import Spelling

log = logging.getLogger(__name__)

# =========================================================================================

# start selection strategies


class StartStrategy(ABC):
    """Base strategy deciding which tokens may open a sentence."""

    @abstractmethod
    def accepts(self, spelling: Spelling) -> bool:
        """Return ``True`` if ``spelling`` may start a sentence."""


class UppercaseStartStrategy(StartStrategy):
    """Strategy accepting tokens whose first character is an uppercase letter."""

    @override
    def accepts(self, spelling: Spelling) -> bool:
        """Accept ``"Who"`` or ``"Run"``, reject ``"are"``, ``"(Who"`` and ``""``."""
        if not spelling:
            return False
        first = spelling[0]
        return first.isalpha() and first.isupper()


class AnyStartStrategy(StartStrategy):
    """Strategy accepting every non-empty token."""

    @override
    def accepts(self, spelling: Spelling) -> bool:
        return bool(spelling)


class CustomStartStrategy(StartStrategy):
    """Strategy that only starts from the given spellings."""

    def __init__(self, allowed_subset: set[str]) -> None:
        """Store the spellings allowed to open a sentence."""
        super().__init__()
        if not allowed_subset:
            log.warning("empty start subset, sampling will fall back to token 0")
        self.allowed_subset = frozenset(allowed_subset)

    @override
    def accepts(self, spelling: Spelling) -> bool:
        return spelling in self.allowed_subset


StrategyName = Literal["uppercase", "any", "custom"]

_START_STRATEGIES: Final[dict[str, type[StartStrategy]]] = {
    "uppercase": UppercaseStartStrategy,
    "any": AnyStartStrategy,
    "custom": CustomStartStrategy,
}


def list_strategies() -> list[str]:
    """Return available start strategy names."""
    return list(_START_STRATEGIES.keys())


@overload
def get_strategy(name: Literal["uppercase", "any"]) -> StartStrategy:
    """Return a built-in strategy that does not need extra arguments."""
    ...


@overload
def get_strategy(
    name: Literal["custom"], allowed_subset: set[str]
) -> CustomStartStrategy:
    """Return a custom strategy limited to ``allowed_subset``."""
    ...


def get_strategy(
    name: StrategyName = "uppercase", allowed_subset: set[str] | None = None
) -> StartStrategy:
    """
    Create a start strategy by name.

    :param name: Strategy identifier, one of "uppercase", "any" or "custom".
    :param allowed_subset: Required for "custom"; spellings allowed to start a sentence.
    :raises StrategyError: If name is unknown or allowed_subset is missing for custom.
    """
    if name not in _START_STRATEGIES:
        raise StrategyError(
            "unknown strategy name",
            invalid_name=name,
            available=list(_START_STRATEGIES.keys()),
        )

    if name == "custom":
        if allowed_subset is None:
            raise StrategyError("allowed_subset is required for custom strategy")
        return CustomStartStrategy(allowed_subset)

    return _START_STRATEGIES[name]()


__all__ = [
    "StrategyName",
    "StartStrategy",
    "UppercaseStartStrategy",
    "AnyStartStrategy",
    "CustomStartStrategy",
    "list_strategies",
    "get_strategy",
]
