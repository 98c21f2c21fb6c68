"""
Core types for the token graph.
"""

type TokenId = int
type Spelling = str
type Edge = tuple[TokenId, TokenId]
