"""
Successor graph over interned tokens.

Each token id owns one :class:`Node` in an arena indexed by id. A node's
successor list keeps every observation, so drawing uniformly from it follows
the empirical transition frequencies.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .errors import FrozenGraphError, VocabularyError
from .interner import TokenInterner
from .types import Edge, Spelling, TokenId

log = logging.getLogger(__name__)


@dataclass(slots=True)
class Node:
    """Per-token record: its spelling and the ids seen right after it."""

    spelling: Spelling
    successors: list[TokenId] = field(default_factory=list)


class SuccessorGraph:
    """Append-only first-order transition graph built in one pass over a corpus."""

    def __init__(self, interner: TokenInterner | None = None) -> None:
        self.interner = interner if interner is not None else TokenInterner()
        self._nodes: list[Node] = []
        self._edge_count = 0
        self._frozen = False
        # adopt spellings interned before the graph was attached
        self._sync_nodes()

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Total number of recorded transitions, duplicates included."""
        return self._edge_count

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Mark construction as complete; the graph is read-only afterwards."""
        self._frozen = True

    def add_token(self, spelling: Spelling) -> TokenId:
        """Intern ``spelling`` and make sure it has a (possibly empty) node."""
        self._check_mutable()
        token_id = self.interner.intern(spelling)
        if token_id >= len(self._nodes):
            self._sync_nodes()
        return token_id

    def record_edge(self, from_spelling: Spelling, to_spelling: Spelling) -> Edge:
        """
        Record one observation of ``to_spelling`` directly after ``from_spelling``.

        :returns: The ``(from_id, to_id)`` pair that was recorded.
        :raises FrozenGraphError: If the graph has been frozen.
        :raises CapacityError: If the interner cannot take a new spelling.
        """
        from_id = self.add_token(from_spelling)
        to_id = self.add_token(to_spelling)
        self._nodes[from_id].successors.append(to_id)
        self._edge_count += 1
        return from_id, to_id

    def node(self, token_id: TokenId) -> Node:
        if not 0 <= token_id < len(self._nodes):
            raise VocabularyError("token id not in graph", invalid_id=token_id)
        return self._nodes[token_id]

    def successors_of(self, token_id: TokenId) -> Sequence[TokenId]:
        """
        Return the successor ids of ``token_id`` in insertion order.

        The returned list is the graph's own storage and must not be mutated.
        Dead ends return an empty list.
        """
        return self.node(token_id).successors

    def successor_spellings(self, token_id: TokenId) -> list[Spelling]:
        return [self._nodes[succ].spelling for succ in self.successors_of(token_id)]

    def spelling(self, token_id: TokenId) -> Spelling:
        return self.node(token_id).spelling

    def lookup(self, spelling: Spelling) -> TokenId | None:
        return self.interner.lookup(spelling)

    def dead_ends(self) -> list[TokenId]:
        """Ids that were never observed as a predecessor."""
        return [i for i, node in enumerate(self._nodes) if not node.successors]

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenGraphError("successor graph is frozen, build a new model instead")

    def _sync_nodes(self) -> None:
        # ids are dense, so every id below len(interner) needs a node
        for token_id in range(len(self._nodes), len(self.interner)):
            self._nodes.append(Node(self.interner.spelling(token_id)))
