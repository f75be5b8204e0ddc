"""
posbraid: enumeration of prime positive braid knots by genus

For a fixed genus g, posbraid lists positive braid words together with the
Dowker-Thistlethwaite codes of their closures, such that every prime
positive braid knot of genus g appears at least once. The list is
deliberately over-inclusive: from genus 3 on it contains several words per
knot, and an external knot recognizer is expected to remove the doubles.

Every listed word
- is the lexicographic minimum among its cyclic conjugates,
- cannot be made lexicographically smaller by swapping commuting
  generators or by a braid relation,
- closes to a knot with first Betti number 2g,
- uses every generator at least twice.

QUICK START:
    from posbraid import list_braids

    for result in list_braids(2):
        print(result.letters, result.dt_code)
"""

from .braid import (
    BraidWord,
    max_generator,
    generator_sum,
    strands,
    b1,
    components,
    strand_permutation,
    to_letters,
    from_letters,
)
from .canonical import (
    last_letter_too_high,
    is_lexicographic_minimum,
    minimal_rotation,
    is_rotation_minimal,
    has_irreducible_tail,
    twist_regions,
    missing_crossings_for_primality,
    is_prime_admissible,
)
from .oracle import Completability, completability, is_completable, describe_failures
from .dt_code import DTCode, CrossingTable, trace_closure, dt_code
from .config import SearchConfig
from .search import BraidSearch, SearchResult, SearchStats, Transition, list_braids
from .errors import PosbraidError, UsageError, InvariantViolation, DTCodeError

__version__ = "1.0.0"
__all__ = [
    # Braid words
    "BraidWord",
    "max_generator",
    "generator_sum",
    "strands",
    "b1",
    "components",
    "strand_permutation",
    "to_letters",
    "from_letters",
    # Predicates
    "last_letter_too_high",
    "is_lexicographic_minimum",
    "minimal_rotation",
    "is_rotation_minimal",
    "has_irreducible_tail",
    "twist_regions",
    "missing_crossings_for_primality",
    "is_prime_admissible",
    # Oracle
    "Completability",
    "completability",
    "is_completable",
    "describe_failures",
    # DT codes
    "DTCode",
    "CrossingTable",
    "trace_closure",
    "dt_code",
    # Search
    "SearchConfig",
    "BraidSearch",
    "SearchResult",
    "SearchStats",
    "Transition",
    "list_braids",
    # Errors
    "PosbraidError",
    "UsageError",
    "InvariantViolation",
    "DTCodeError",
]
