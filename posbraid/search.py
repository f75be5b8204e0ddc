"""
Depth-first enumeration of positive braid words of a given genus.

The search keeps one braid word as an explicit stack, starting from the
seed "aa". Each step takes exactly one of four transitions, in order of
priority:

1. BACKTRACK - the last letter is too high: pop it and try the next value
   one level up.
2. ADVANCE   - the oracle rejects the word: try the next value for the
   last letter.
3. DEEPEN    - b1 is still below the bound: push a new letter, 'a' after
   an 'a' and one below the last letter otherwise.
4. EMIT      - the word is accepted: report its smallest cyclic rotation
   with the DT code and try the next value for the last letter. If that
   rotation was reported before, the step is a DUPLICATE instead.

The search is over once the stack is down to a single letter. Since every
branch eventually runs its last letter past the adjacency cap, this always
happens.

Words are visited in lexicographic order, so a rotation the search accepts
on its own is always reported before any larger rotation of it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .braid import BraidWord, to_letters
from .canonical import last_letter_too_high, minimal_rotation
from .config import SearchConfig
from .dt_code import dt_code
from .oracle import Completability, completability, describe_failures

SEED = (1, 1)


class Transition(Enum):
    BACKTRACK = "backtrack"
    ADVANCE = "advance"
    DEEPEN = "deepen"
    EMIT = "emit"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class SearchResult:
    """
    An accepted braid word.

    Attributes:
        index: 1-based position in the enumeration
        word: Generator indices of the word
        dt_code: Signed DT code of its closure
    """
    index: int
    word: Tuple[int, ...]
    dt_code: Tuple[int, ...]

    @property
    def letters(self) -> str:
        return to_letters(self.word)

    @property
    def crossings(self) -> int:
        return len(self.word)

    def format(self) -> str:
        """The two lines of the results stream for this word."""
        code = " ".join(str(e) for e in self.dt_code)
        return f"{self.letters}\n: {self.crossings} {self.index} {code}\n"


@dataclass
class SearchStats:
    """Transition counters of a search run."""
    backtracks: int = 0
    advances: int = 0
    deepenings: int = 0
    emitted: int = 0
    duplicates: int = 0
    rejections: Dict[str, int] = field(default_factory=dict)

    def count(self, transition: Transition) -> None:
        if transition == Transition.BACKTRACK:
            self.backtracks += 1
        elif transition == Transition.ADVANCE:
            self.advances += 1
        elif transition == Transition.DEEPEN:
            self.deepenings += 1
        elif transition == Transition.DUPLICATE:
            self.duplicates += 1
        else:
            self.emitted += 1

    @property
    def steps(self) -> int:
        return self.backtracks + self.advances + self.deepenings + self.emitted + self.duplicates

    def __str__(self) -> str:
        return (f"{self.steps} steps: {self.backtracks} backtracks, "
                f"{self.advances} advances, {self.deepenings} deepenings, "
                f"{self.emitted} words, {self.duplicates} duplicates")


class BraidSearch:
    """
    Branch-and-bound search over positive braid words.

    Usage:
        search = BraidSearch(SearchConfig(genus=2))
        for result in search.run():
            print(result.letters, result.dt_code)
    """

    def __init__(self, config: SearchConfig):
        self.config = config
        self.max_b1 = config.max_b1
        self.word = BraidWord(list(SEED))
        self.stats = SearchStats()
        self.last_result: Optional[SearchResult] = None
        self.listed: Set[Tuple[int, ...]] = set()

    @property
    def finished(self) -> bool:
        return len(self.word) <= 1

    def _narrate(self, message: str) -> None:
        if self.config.debug:
            self.config.log(message)

    def _next_letter(self) -> int:
        return 1 if self.word.last == 1 else self.word.last - 1

    def step(self) -> Transition:
        """Perform one transition of the search and return which one."""
        if self.config.debug:
            self.config.log(f'Working on "{self.word.to_letters()}". ', end="")
        self.last_result = None
        generators = self.word.generators

        if last_letter_too_high(generators):
            self._narrate("Last letter too high, popping back.")
            self.word.pop()
            self.word.bump()
            transition = Transition.BACKTRACK
        else:
            mask = completability(generators, self.max_b1, self.config.debug)
            if mask != Completability.ALL:
                self._narrate(f"Not completable ({int(mask)}: "
                              f"{', '.join(describe_failures(mask))}), increasing.")
                for name in describe_failures(mask):
                    self.stats.rejections[name] = self.stats.rejections.get(name, 0) + 1
                self.word.bump()
                transition = Transition.ADVANCE
            elif self.word.b1() < self.max_b1:
                self._narrate("Too short, appending.")
                self.word.push(self._next_letter())
                transition = Transition.DEEPEN
            else:
                transition = self._accept()
                self.word.bump()

        self.stats.count(transition)
        return transition

    def _accept(self) -> Transition:
        word = minimal_rotation(self.word.generators)
        if word in self.listed:
            self._narrate(f"Is good, but {to_letters(word)} is already listed.")
            return Transition.DUPLICATE
        if word == self.word.to_tuple():
            self._narrate("Is good!")
        else:
            self._narrate(f"Is good! Listing its rotation {to_letters(word)}.")
        self.listed.add(word)
        self.last_result = SearchResult(
            index=self.stats.emitted + 1,
            word=word,
            dt_code=dt_code(word).entries,
        )
        return Transition.EMIT

    def run(self) -> Iterator[SearchResult]:
        """Run the search to exhaustion, yielding accepted words in order."""
        while not self.finished:
            if self.step() == Transition.EMIT:
                yield self.last_result
        if self.config.debug:
            self.config.log(f"Search finished after {self.stats}.")
            if self.stats.rejections:
                detail = ", ".join(f"{k}={v}" for k, v in sorted(self.stats.rejections.items()))
                self.config.log(f"Oracle rejections: {detail}")

    def write_results(self) -> int:
        """Run the search, writing every result to the output stream."""
        for result in self.run():
            self.config.output.write(result.format())
        self.config.output.flush()
        return self.stats.emitted


def list_braids(genus: int, debug: bool = False) -> List[SearchResult]:
    """All words the search accepts for `genus`, in enumeration order."""
    return list(BraidSearch(SearchConfig(genus=genus, debug=debug)).run())
