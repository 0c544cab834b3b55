"""Straight-line word search over a letter grid."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import product

from .dictionary import MIN_WORD_BYTES, Dictionary
from .matrix import BLANK, LetterMatrix


@dataclass(frozen=True)
class Direction:
    """A straight search direction with its display arrow and step."""

    name: str
    symbol: str
    delta_row: int
    delta_col: int


DIRECTIONS: tuple[Direction, ...] = (
    Direction("R", "→", 0, 1),
    Direction("L", "←", 0, -1),
    Direction("B", "↓", 1, 0),
    Direction("T", "↑", -1, 0),
    Direction("BR", "↘", 1, 1),
    Direction("BL", "↙", 1, -1),
    Direction("TR", "↗", -1, 1),
    Direction("TL", "↖", -1, -1),
)


@dataclass(frozen=True)
class WordResult:
    """A dictionary word found along a straight line of the grid."""

    word: str
    start_row: int
    start_col: int
    direction: str
    length: int


class WordSearcher:
    """Finds dictionary words laid out in straight lines of a letter grid."""

    def __init__(
        self,
        matrix: LetterMatrix,
        dictionary: Dictionary,
        directions: Iterable[Direction] = DIRECTIONS,
    ) -> None:
        self.matrix = matrix
        self.dictionary = dictionary
        self.directions = tuple(directions)
        self._results: list[WordResult] = []
        self._seen: set[tuple[str, int, int, str]] = set()
        self._lock = threading.Lock()

    def _cells(self, row: int, col: int, direction: Direction) -> Iterator[str]:
        rows, cols = self.matrix.dimensions
        while 0 <= row < rows and 0 <= col < cols:
            yield self.matrix.cell(row, col)
            row += direction.delta_row
            col += direction.delta_col

    def search_from_position(
        self, start_row: int, start_col: int, direction: Direction
    ) -> None:
        """Collect every word that starts at a cell and runs in one direction."""
        sequence = ""
        for char in self._cells(start_row, start_col, direction):
            if char == BLANK:
                break
            sequence += char
            if not self.dictionary.is_prefix(sequence):
                break
            size = len(sequence.encode("utf-8"))
            if size >= MIN_WORD_BYTES and self.dictionary.is_word(sequence):
                self._add(
                    WordResult(sequence, start_row, start_col, direction.name, size)
                )

    def _add(self, result: WordResult) -> None:
        key = (result.word, result.start_row, result.start_col, result.direction)
        with self._lock:
            if key not in self._seen:
                self._seen.add(key)
                self._results.append(result)

    def search_all(self, num_workers: int) -> None:
        """Search every cell in every direction using a pool of worker threads."""
        if num_workers < 1:
            return
        rows, cols = self.matrix.dimensions
        jobs = product(range(rows), range(cols), self.directions)
        with ThreadPoolExecutor(max_workers=num_workers) as pool:
            for _ in pool.map(lambda job: self.search_from_position(*job), jobs):
                pass

    def results(self) -> list[WordResult]:
        """A snapshot of the results found so far."""
        with self._lock:
            return list(self._results)

    def format_results(self) -> str:
        """Report of all results grouped by direction."""
        results = self.results()
        by_direction: dict[str, list[WordResult]] = {}
        for result in results:
            by_direction.setdefault(result.direction, []).append(result)

        parts = [
            "\n=== Resultados da Busca ===\n",
            f"Total de palavras encontradas: {len(results)}\n\n",
        ]
        for direction, words in by_direction.items():
            parts.append(f"{direction} ({len(words)} palavras):\n")
            parts.extend(
                f"  '{word.word}' em ({word.start_row},{word.start_col})"
                f" - {word.length} letras\n"
                for word in words
            )
            parts.append("\n")
        return "".join(parts)