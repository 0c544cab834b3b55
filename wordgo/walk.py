"""Free-form word walks: paths through adjacent cells without revisits."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from .dictionary import Dictionary
from .errors import OutOfBoundsError
from .matrix import BLANK, LetterMatrix

WALK_DIRECTIONS: tuple[str, ...] = ("L", "TL", "T", "TR", "R", "BR", "B", "BL")


@dataclass(frozen=True)
class Coord:
    """A cell position: ``x`` is the row, ``y`` the column."""

    x: int
    y: int

    def step(self, direction: str, rows: int, cols: int) -> Coord:
        """Neighbour in a direction made of T, B, L, R; raise if off the grid."""
        row, col = self.x, self.y
        if "T" in direction:
            row -= 1
            if row < 0:
                raise OutOfBoundsError("<")
        if "B" in direction:
            row += 1
            if row >= rows:
                raise OutOfBoundsError(">")
        if "L" in direction:
            col -= 1
            if col < 0:
                raise OutOfBoundsError("^")
        if "R" in direction:
            col += 1
            if col >= cols:
                raise OutOfBoundsError("v")
        return Coord(row, col)


@dataclass(frozen=True)
class Path:
    """A sequence of distinct cells on a letter grid."""

    matrix: LetterMatrix
    coordinates: tuple[Coord, ...]

    @property
    def word(self) -> str:
        return "".join(self.matrix.cell(c.x, c.y) for c in self.coordinates)

    def has_visited(self, coord: Coord) -> bool:
        """True if the path already passes through ``coord``."""
        return coord in self.coordinates

    def extend(self, direction: str) -> Path | None:
        """The path one step longer, or None if the step leaves the grid or revisits."""
        rows, cols = self.matrix.dimensions
        try:
            nxt = self.coordinates[-1].step(direction, rows, cols)
        except OutOfBoundsError:
            return None
        if self.has_visited(nxt):
            return None
        return Path(self.matrix, self.coordinates + (nxt,))


def find_path_words(
    matrix: LetterMatrix, dictionary: Dictionary, start: Coord
) -> set[str]:
    """All dictionary words spelled by non-repeating paths from ``start``."""
    found: set[str] = set()

    def walk(path: Path) -> None:
        for direction in WALK_DIRECTIONS:
            longer = path.extend(direction)
            if longer is None:
                continue
            word = longer.word
            if dictionary.is_word(word):
                found.add(word)
            if dictionary.is_prefix(word):
                walk(longer)

    walk(Path(matrix, (start,)))
    return found


def random_start(matrix: LetterMatrix, rng: random.Random) -> Coord:
    """A random cell holding a letter rather than a blank."""
    if all(char == BLANK for row in matrix for char in row):
        raise ValueError("the letter matrix holds no letters")
    rows, cols = matrix.dimensions
    while True:
        coord = Coord(rng.randrange(rows), rng.randrange(cols))
        if matrix.cell(coord.x, coord.y) != BLANK:
            return coord


def format_columns(words: Iterable[str], columns: int) -> str:
    """Longest words first, padded to a common width, ``columns`` per line."""
    ordered = sorted(words, key=lambda word: (-len(word), word))
    if not ordered:
        return ""
    width = len(ordered[0])
    parts = []
    for count, word in enumerate(ordered, start=1):
        parts.append(f"{word:<{width}.{width}} ")
        if count % columns == 0:
            parts.append("\n")
    return "".join(parts)