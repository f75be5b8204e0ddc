"""
Run configuration for the braid search.
"""

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class SearchConfig:
    """
    Parameters of one search run.

    Attributes:
        genus: Target genus of the knots; the search bound is 2 * genus
        debug: Narrate every search transition and enable internal checks
        output: Results stream (braid words and DT codes)
        diagnostics: Stream for progress and debug narration
    """
    genus: int
    debug: bool = False
    output: TextIO = field(default_factory=lambda: sys.stdout)
    diagnostics: TextIO = field(default_factory=lambda: sys.stderr)

    def __post_init__(self):
        if self.genus < 0:
            raise ValueError(f"Genus must be non-negative, got {self.genus}")

    @property
    def max_b1(self) -> int:
        """First Betti number every accepted word must reach."""
        return 2 * self.genus

    def log(self, message: str, end: str = "\n") -> None:
        """Write a diagnostics line."""
        print(message, end=end, file=self.diagnostics)
