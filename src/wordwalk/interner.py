"""
Open-addressed token interner.

Maps token spellings to dense, zero-based ids in first-occurrence order.
"""

import logging
from typing import Final

from .errors import CapacityError, VocabularyError
from .types import Spelling, TokenId

DEFAULT_CAPACITY: Final[int] = 1024
MAX_LOAD_FACTOR: Final[float] = 0.5
EMPTY: Final[int] = -1

_HASH_SEED: Final[int] = 5381
_MASK64: Final[int] = 0xFFFFFFFFFFFFFFFF

log = logging.getLogger(__name__)


def djb2(spelling: Spelling) -> int:
    """
    Hash a spelling with the xor variant of djb2 over its UTF-8 bytes.

    The state wraps at 64 bits like an unsigned long would.
    """
    h = _HASH_SEED
    for b in spelling.encode("utf-8", errors="surrogatepass"):
        h = (((h << 5) + h) ^ b) & _MASK64
    return h


class TokenInterner:
    """
    Spelling -> id table using open addressing with linear probing.

    The slot table doubles whenever an insert would push the load factor past
    ``MAX_LOAD_FACTOR``. With ``max_capacity`` set, growth stops at that size,
    the table is allowed to fill completely and the next new spelling raises
    :class:`CapacityError`.
    """

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, max_capacity: int | None = None
    ) -> None:
        """
        :param capacity: Initial number of hash slots.
        :param max_capacity: Upper bound on slots, ``None`` for unbounded growth.
        :raises ValueError: If either capacity is not positive.

        The initial table never exceeds ``max_capacity``.
        """
        if capacity < 1:
            raise ValueError("capacity must be positive")
        if max_capacity is not None:
            if max_capacity < 1:
                raise ValueError("max_capacity must be positive")
            capacity = min(capacity, max_capacity)
        self.max_capacity = max_capacity
        # slot -> token id (EMPTY if unused)
        self._slots: list[TokenId] = [EMPTY] * capacity
        # token id -> spelling
        self._spellings: list[Spelling] = []

    def __len__(self) -> int:
        return len(self._spellings)

    def __contains__(self, spelling: object) -> bool:
        return isinstance(spelling, str) and self.lookup(spelling) is not None

    @property
    def capacity(self) -> int:
        """Current number of hash slots."""
        return len(self._slots)

    @property
    def spellings(self) -> tuple[Spelling, ...]:
        """All interned spellings indexed by id."""
        return tuple(self._spellings)

    def spelling(self, token_id: TokenId) -> Spelling:
        """Return the spelling for ``token_id``."""
        if not 0 <= token_id < len(self._spellings):
            raise VocabularyError("token id not in vocabulary", invalid_id=token_id)
        return self._spellings[token_id]

    def lookup(self, spelling: Spelling) -> TokenId | None:
        """Return the id of ``spelling`` without interning it."""
        slot = self._probe(spelling)
        if slot is None or self._slots[slot] == EMPTY:
            return None
        return self._slots[slot]

    def intern(self, spelling: Spelling) -> TokenId:
        """
        Return the id of ``spelling``, allocating the next id on first sight.

        :raises CapacityError: If the table is full and may not grow.
        """
        slot = self._probe(spelling)
        if slot is not None and self._slots[slot] != EMPTY:
            return self._slots[slot]

        if (len(self._spellings) + 1) > self.capacity * MAX_LOAD_FACTOR and self._grow():
            slot = self._probe(spelling)

        if slot is None:
            raise CapacityError(
                "interning table full",
                capacity=self.capacity,
                vocab_size=len(self._spellings),
            )

        token_id = len(self._spellings)
        self._spellings.append(spelling)
        self._slots[slot] = token_id
        return token_id

    def _probe(self, spelling: Spelling) -> int | None:
        """
        Find the slot holding ``spelling`` or the first empty slot on its chain.

        Returns ``None`` when every slot was visited without a match or a gap.
        """
        n = len(self._slots)
        start = djb2(spelling) % n
        for step in range(n):
            slot = (start + step) % n
            token_id = self._slots[slot]
            if token_id == EMPTY or self._spellings[token_id] == spelling:
                return slot
        return None

    def _grow(self) -> bool:
        """Double the slot table (bounded by ``max_capacity``) and rehash."""
        new_cap = self.capacity * 2
        if self.max_capacity is not None:
            new_cap = min(new_cap, self.max_capacity)
        if new_cap <= self.capacity:
            return False

        slots = [EMPTY] * new_cap
        for token_id, spelling in enumerate(self._spellings):
            slot = djb2(spelling) % new_cap
            while slots[slot] != EMPTY:
                slot = (slot + 1) % new_cap
            slots[slot] = token_id

        log.debug("interning table grown %d -> %d slots", self.capacity, new_cap)
        self._slots = slots
        return True
