"""Rectangular grid of letters read from a text file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from .errors import EmptyMatrixError, FileOpenError, FileReadError

BLANK = " "


@dataclass(frozen=True)
class LetterMatrix:
    """Letters arranged in rows of equal width; blanks are spaces."""

    grid: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.grid:
            raise EmptyMatrixError()
        width = len(self.grid[0])
        if any(len(row) != width for row in self.grid):
            raise ValueError("all rows of a letter matrix must have the same width")

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> LetterMatrix:
        """Build a grid from text lines, skipping empty ones and right-padding."""
        rows = [stripped for line in lines if (stripped := line.rstrip("\r\n"))]
        if not rows:
            raise EmptyMatrixError()
        width = max(len(row) for row in rows)
        return cls(tuple(row.ljust(width, BLANK) for row in rows))

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0])

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.rows, self.cols

    def cell(self, row: int, col: int) -> str:
        """Letter at ``(row, col)``."""
        return self.grid[row][col]

    def __getitem__(self, row: int) -> str:
        return self.grid[row]

    def __iter__(self) -> Iterator[str]:
        return iter(self.grid)

    def render(self) -> str:
        """Human-readable listing of the grid with its dimensions."""
        lines = [
            "Matriz de Letras:",
            f"Dimensões: {self.rows}x{self.cols}",
            "",
        ]
        lines.extend(f"{index:2d}: {row}" for index, row in enumerate(self.grid))
        return "\n".join(lines) + "\n"


def load_matrix(path: str | PathLike[str]) -> LetterMatrix:
    """Read a letter grid from a text file."""
    subject = "da matriz"
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise FileOpenError(subject, exc) from exc
    with handle:
        try:
            lines = handle.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(subject, exc) from exc
    return LetterMatrix.from_lines(lines)