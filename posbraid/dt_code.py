"""
Dowker-Thistlethwaite codes of positive braid closures.

The closure of a braid on n strands is traced by following one strand
through the word, then through the word again from the strand position it
ended at, and so on. For a knot the walk returns to its starting position
after exactly n passes, having visited every crossing twice. Numbering the
visits 1, 2, 3, ... gives every crossing one odd and one even label; the DT
code lists the even labels ordered by their odd partners, each signed by
whether the traced strand passed over or under at that crossing.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .braid import strands
from .errors import DTCodeError


@dataclass(frozen=True)
class DTCode:
    """
    DT code of a knot diagram.

    Attributes:
        entries: Signed even labels, one per crossing, ordered by odd label
    """
    entries: Tuple[int, ...]

    @property
    def crossings(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return " ".join(str(e) for e in self.entries)


@dataclass
class CrossingTable:
    """
    Labels collected while tracing a closure, one row per letter of the word.

    Attributes:
        odd: Odd visit number of each crossing
        even: Even visit number of each crossing
        sign: True where the entry of the DT code is positive
    """
    odd: np.ndarray
    even: np.ndarray
    sign: np.ndarray

    @classmethod
    def empty(cls, size: int) -> 'CrossingTable':
        return cls(
            odd=np.zeros(size, dtype=np.int64),
            even=np.zeros(size, dtype=np.int64),
            sign=np.zeros(size, dtype=bool),
        )

    def record(self, crossing: int, label: int, moves_up: bool) -> None:
        even = label % 2 == 0
        if even:
            self.even[crossing] = label
        else:
            self.odd[crossing] = label
        self.sign[crossing] = even == (not moves_up)

    def dt_entries(self) -> List[int]:
        order = np.argsort(self.odd, kind="stable")
        signed = np.where(self.sign[order], self.even[order], -self.even[order])
        return [int(e) for e in signed]


def trace_closure(word: Sequence[int]) -> Tuple[CrossingTable, int]:
    """
    Walk the closure of `word` from strand position 1 until it comes back.

    The position stays within 1..strands(word): a letter v moves the strand
    at position v up and the strand at position v + 1 down.

    Returns:
        The crossing table and the number of full passes through the word.
    """
    table = CrossingTable.empty(len(word))
    position = 1
    label = 1
    passes = 0
    while True:
        for crossing, letter in enumerate(word):
            if letter == position:
                table.record(crossing, label, moves_up=True)
                position += 1
            elif letter == position - 1:
                table.record(crossing, label, moves_up=False)
                position -= 1
            else:
                continue
            label += 1
        passes += 1
        if position == 1:
            return table, passes


def dt_code(word: Sequence[int]) -> DTCode:
    """
    DT code of the closure of a positive braid word that closes to a knot.

    Raises:
        DTCodeError: if the closure walk does not take exactly one pass per
            strand, i.e. the closure is not a knot
    """
    if not word:
        raise DTCodeError(word, 0, 1)
    table, passes = trace_closure(word)
    expected = strands(word)
    if passes != expected:
        raise DTCodeError(word, passes, expected)
    return DTCode(tuple(table.dt_entries()))
