"""
Positive braid words for posbraid.

A positive braid word is a sequence of generator indices i >= 1, each one
standing for the positive crossing sigma_i between strands i and i+1. The
helpers in this module compute the structural quantities the search prunes
on: strand count, first Betti number of the fiber surface and number of
components of the closure.
"""

from string import ascii_lowercase
from typing import Iterable, Iterator, List, Optional, Sequence


def max_generator(word: Sequence[int]) -> int:
    """Largest generator of the word, 1 for an empty word."""
    result = 1
    for letter in word:
        if letter > result:
            result = letter
    return result


def generator_sum(word: Sequence[int]) -> int:
    return sum(word)


def strands(word: Sequence[int]) -> int:
    """Number of strands of the smallest braid group containing the word."""
    return max_generator(word) + 1


def b1(word: Sequence[int]) -> int:
    """
    First Betti number of the fiber surface of the closure.

    For a knot this equals twice the genus.
    """
    return 1 + len(word) - strands(word)


def push_strand(word: Sequence[int], position: int) -> int:
    """Follow the strand starting at `position` once through the word."""
    for letter in word:
        if letter == position:
            position += 1
        elif letter == position - 1:
            position -= 1
    return position


def strand_permutation(word: Sequence[int]) -> List[int]:
    """
    Permutation of the strand positions induced by the word.

    Returns a list `perm` with perm[p] the end position of the strand
    entering at position p, for p in 1..strands(word). perm[0] is unused.
    """
    return [0] + [push_strand(word, p) for p in range(1, strands(word) + 1)]


def components(word: Sequence[int]) -> int:
    """
    Number of components of the closure of the word.

    Walks every strand not yet labelled through the word until the walk
    returns to its start, labelling all positions on the way; each walk is
    one cycle of the strand permutation.
    """
    if not word:
        return 0
    labels = [0] * (strands(word) + 1)
    count = 0
    for start in range(1, len(labels)):
        if labels[start]:
            continue
        count += 1
        position = start
        while not labels[position]:
            labels[position] = count
            position = push_strand(word, position)
    return count


def to_letters(word: Iterable[int]) -> str:
    """Render a word as letters, 1 -> 'a', 2 -> 'b', ..."""
    return "".join(chr(letter + 96) for letter in word)


def from_letters(text: str) -> List[int]:
    """Parse a word written as letters a..z."""
    word = []
    for char in text.strip():
        if char not in ascii_lowercase:
            raise ValueError(f"Invalid braid letter {char!r} in {text!r}")
        word.append(ord(char) - 96)
    return word


class BraidWord:
    """
    A mutable positive braid word used as the search stack.

    The search only ever touches the top of the stack: it pushes a new
    letter, pops the last one, or raises the last one by one. All derived
    quantities are recomputed on demand.
    """

    def __init__(self, generators: Optional[List[int]] = None):
        self.generators: List[int] = list(generators) if generators else []

    @classmethod
    def from_letters(cls, text: str) -> 'BraidWord':
        return cls(from_letters(text))

    @property
    def last(self) -> int:
        return self.generators[-1]

    def push(self, letter: int) -> None:
        if letter < 1:
            raise ValueError(f"Generator index {letter} out of range for a positive braid")
        self.generators.append(letter)

    def pop(self) -> int:
        return self.generators.pop()

    def bump(self) -> None:
        """Try the next generator at the current depth."""
        self.generators[-1] += 1

    def strands(self) -> int:
        return strands(self.generators)

    def b1(self) -> int:
        return b1(self.generators)

    def components(self) -> int:
        return components(self.generators)

    def to_letters(self) -> str:
        return to_letters(self.generators)

    def to_tuple(self) -> tuple:
        return tuple(self.generators)

    def __len__(self) -> int:
        return len(self.generators)

    def __iter__(self) -> Iterator[int]:
        return iter(self.generators)

    def __getitem__(self, index):
        return self.generators[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, BraidWord):
            return self.generators == other.generators
        return NotImplemented

    def __repr__(self) -> str:
        if not self.generators:
            return "BraidWord(ε)"
        return f"BraidWord({self.to_letters()})"
