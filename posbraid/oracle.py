"""
Completability oracle: can a partial word still grow into an accepted one?
"""

from enum import IntFlag
from typing import List, Sequence

from .braid import b1, components
from .canonical import (
    has_irreducible_tail,
    is_lexicographic_minimum,
    is_prime_admissible,
)


class Completability(IntFlag):
    """One bit per necessary condition; ALL means the word may be extended."""
    KNOT = 1
    PRIME = 2
    MINIMAL = 4
    IRREDUCIBLE = 8
    ALL = KNOT | PRIME | MINIMAL | IRREDUCIBLE


def completability(word: Sequence[int], max_b1: int, debug: bool = False) -> Completability:
    """
    Evaluate all pruning conditions on `word` for the bound `max_b1`.

    Every further letter raises b1 by one and can merge at most two
    components, so more than `remaining + 1` components can never close
    up to a knot.
    """
    remaining = max_b1 - b1(word)
    mask = Completability(0)
    if components(word) - remaining <= 1:
        mask |= Completability.KNOT
    if is_prime_admissible(word, max_b1, debug):
        mask |= Completability.PRIME
    if is_lexicographic_minimum(word):
        mask |= Completability.MINIMAL
    if has_irreducible_tail(word):
        mask |= Completability.IRREDUCIBLE
    return mask


def is_completable(word: Sequence[int], max_b1: int, debug: bool = False) -> bool:
    return completability(word, max_b1, debug) == Completability.ALL


def describe_failures(mask: int) -> List[str]:
    """Names of the conditions missing from `mask`, e.g. ['KNOT', 'MINIMAL']."""
    return [
        flag.name for flag in (
            Completability.KNOT,
            Completability.PRIME,
            Completability.MINIMAL,
            Completability.IRREDUCIBLE,
        )
        if not mask & flag
    ]
