"""
Canonical-form predicates for partial braid words.

Each predicate is a necessary condition for a word to be the prefix of a
word the search eventually accepts. None of them is sufficient: the search
only promises not to lose any prime positive braid knot, duplicates and a
few composite closures are filtered downstream.

Accepted words are
- the lexicographic minimum among their cyclic conjugates,
- not made smaller by swapping two commuting generators or by a braid
  relation sigma_i sigma_{i+1} sigma_i = sigma_{i+1} sigma_i sigma_{i+1},
- far enough from a connected sum that primality is still possible.
"""

from typing import List, Sequence, Tuple

from .braid import b1, max_generator
from .errors import InvariantViolation


def last_letter_too_high(word: Sequence[int]) -> bool:
    """
    True if the last letter opens a strand not adjacent to the used ones.

    A word ending in sigma_j after generators no higher than i < j - 1 can
    always be rewritten with a lower last letter.
    """
    if len(word) < 2:
        return False
    return word[-1] > 1 + max(word[:-1])


def is_lexicographic_minimum(word: Sequence[int]) -> bool:
    """
    True if no suffix of the word is smaller than the prefix of equal length.

    This is the rotation test for a partial word: any extension of a word
    failing it has a smaller cyclic conjugate.
    """
    word = list(word)
    n = len(word)
    for i in range(1, n):
        if word[i:] < word[:n - i]:
            return False
    return True


def minimal_rotation(word: Sequence[int]) -> Tuple[int, ...]:
    """Smallest cyclic rotation of a complete word, wrapping around its end."""
    word = tuple(word)
    return min((word[i:] + word[:i] for i in range(len(word))), default=word)


def is_rotation_minimal(word: Sequence[int]) -> bool:
    """
    True if the word is no larger than any of its cyclic rotations.

    Only meaningful for complete words: partial words are pruned with
    is_lexicographic_minimum, which needs no wrap-around.
    """
    return tuple(word) == minimal_rotation(word)


def _previous_neighbour(word: Sequence[int], start: int, letter: int) -> int:
    """Index of the nearest letter at or before `start` within 1 of `letter`, -1 if none."""
    i = start
    while i >= 0 and abs(word[i] - letter) > 1:
        i -= 1
    return i


def has_irreducible_tail(word: Sequence[int]) -> bool:
    """
    False if the end of the word can be made smaller by a braid relation.

    Letters commuting with the last letter s are skipped. The tail is fine
    if the nearest non-commuting letter is s or s+1; otherwise it is s-1 and
    the next non-commuting letter before it must be s-1 or s+1. Finding s
    there means the word ends in s (s-1) s up to commuting letters, which
    the braid relation turns into the smaller (s-1) s (s-1).
    """
    s = word[-1]
    i = _previous_neighbour(word, len(word) - 2, s)
    if i < 0 or word[i] in (s, s + 1):
        return True
    i = _previous_neighbour(word, i - 1, s)
    if i < 0 or word[i] in (s - 1, s + 1):
        return True
    return False


def twist_regions(word: Sequence[int], column: int) -> int:
    """
    Number of twist regions between columns `column` and `column + 1`.

    Keeping only the letters `column` and `column + 1`, a region starts at
    every letter differing from the previous kept letter.
    """
    last = None
    regions = 0
    for letter in word:
        if letter in (column, column + 1) and letter != last:
            last = letter
            regions += 1
    return regions


def missing_crossings_for_primality(word: Sequence[int], debug: bool = False) -> int:
    """
    Lower bound on the letters still needed before the closure can be prime.

    A pair of columns with only two twist regions is a connected sum unless
    the lower column gets another crossing; fewer than four regions also
    ask for one more crossing in the upper column. Each column is counted
    at most once.
    """
    columns = max_generator(word)
    missing: List[int] = [0] * columns
    for i in range(1, columns):
        regions = twist_regions(word, i)
        if debug and regions < 2:
            raise InvariantViolation(
                f"columns {i} and {i + 1} of {list(word)} have {regions} twist regions"
            )
        if regions == 2:
            missing[i - 1] = 1
        if regions < 4:
            missing[i] = 1
    return sum(missing)


def is_prime_admissible(word: Sequence[int], max_b1: int, debug: bool = False) -> bool:
    """True if the remaining b1 budget can still cover the missing crossings."""
    return missing_crossings_for_primality(word, debug) <= max_b1 - b1(word)
