"""Exceptions raised while loading puzzle data and walking the grid."""

from __future__ import annotations


class WordGoError(Exception):
    """Base class for every error raised by the package."""


class OutOfBoundsError(WordGoError):
    """A step would leave the letter grid.

    ``side`` is the marker of the boundary that was crossed:
    ``<`` for the top row, ``>`` for the bottom row, ``^`` for the
    left column and ``v`` for the right column.
    """

    def __init__(self, side: str) -> None:
        self.side = side
        super().__init__(f"out of boundaries {side}")


class EmptyMatrixError(WordGoError):
    """The letter grid source held no non-empty line."""

    def __init__(self, message: str = "matriz vazia") -> None:
        super().__init__(message)


class _FileError(WordGoError):
    _prefix = ""

    def __init__(self, subject: str, cause: BaseException | None = None) -> None:
        self.subject = subject
        self.cause = cause
        message = f"{self._prefix} {subject}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class FileOpenError(_FileError):
    """A data file could not be opened."""

    _prefix = "erro ao abrir arquivo"


class FileReadError(_FileError):
    """A data file was opened but could not be read."""

    _prefix = "erro ao ler arquivo"