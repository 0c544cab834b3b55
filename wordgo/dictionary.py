"""Word list with a prefix trie for pruning grid searches."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike

from .errors import FileOpenError, FileReadError

MIN_WORD_BYTES = 3


@dataclass
class TrieNode:
    """One node of the prefix trie."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    is_word: bool = False


class Dictionary:
    """A set of upper-case words of at least three bytes, indexed by prefix."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = set()
        self._root = TrieNode()
        for word in words:
            self.add(word)

    def add(self, word: str) -> bool:
        """Normalise and store a word; return whether it was long enough to keep."""
        normalized = word.upper().strip()
        # The length rule counts encoded bytes, not characters.
        if len(normalized.encode("utf-8")) < MIN_WORD_BYTES:
            return False
        self._words.add(normalized)
        node = self._root
        for char in normalized:
            node = node.children.setdefault(char, TrieNode())
        node.is_word = True
        return True

    def contains(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return word.upper() in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def _walk(self, sequence: str) -> TrieNode | None:
        node = self._root
        for char in sequence:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def is_prefix(self, sequence: str) -> bool:
        """True if some stored word starts with ``sequence`` (or equals it)."""
        return self._walk(sequence) is not None

    def is_word(self, sequence: str) -> bool:
        """True if ``sequence`` is exactly a stored word."""
        node = self._walk(sequence)
        return node is not None and node.is_word

    def describe(self) -> str:
        """One-line summary of the loaded word count."""
        return f"Dicionário carregado com {len(self._words)} palavras"


def load_dictionary(path: str | PathLike[str]) -> Dictionary:
    """Read a dictionary from a file holding one word per line."""
    subject = "do dicionário"
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise FileOpenError(subject, exc) from exc
    with handle:
        try:
            return Dictionary(line.rstrip("\r\n") for line in handle)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(subject, exc) from exc