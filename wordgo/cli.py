"""Command line entry point for the word grid search."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from collections.abc import Sequence

from .dictionary import load_dictionary
from .errors import WordGoError
from .matrix import load_matrix
from .search import WordSearcher
from .walk import find_path_words, format_columns, random_start

DEFAULT_MATRIX = "res/example.txt"
DEFAULT_DICTIONARY = "res/words.txt"
DEFAULT_WORKERS = 4
DEFAULT_ROUNDS = 10
COLUMNS = 3


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wordgo", description="Find dictionary words in a grid of letters."
    )
    parser.add_argument("--matrix", default=DEFAULT_MATRIX, help="letter grid file")
    parser.add_argument(
        "--dictionary", default=DEFAULT_DICTIONARY, help="word list file"
    )
    parser.add_argument(
        "--simple",
        action="store_true",
        help="straight-line search (also enabled by CFG_SIMPLE=true)",
    )
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--pause", type=float, default=1.0, help="seconds to wait after each round"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search and print its report; return the exit status."""
    args = _parse_args(argv)
    print("=== WordGo - Buscador de Palavras em Matriz de Letras ===")

    print("Carregando matriz de letras...")
    try:
        matrix = load_matrix(args.matrix)
    except WordGoError as exc:
        print(f"Erro ao carregar matriz: {exc}", file=sys.stderr)
        return 1
    print(matrix.render(), end="")
    print()

    print("Carregando dicionário...")
    try:
        dictionary = load_dictionary(args.dictionary)
    except WordGoError as exc:
        print(f"Erro ao carregar dicionário: {exc}", file=sys.stderr)
        return 1
    print(dictionary.describe())
    print()

    print("\n=== Iniciando Busca de Palavras ===")
    if args.simple or os.environ.get("CFG_SIMPLE") == "true":
        searcher = WordSearcher(matrix, dictionary)
        print(f"Iniciando busca com {args.workers} workers...")
        searcher.search_all(args.workers)
        print(searcher.format_results(), end="")
        return 0

    rng = random.Random(args.seed)
    for _ in range(args.rounds):
        start = random_start(matrix, rng)
        print("Waiting for words to be found...")
        found = find_path_words(matrix, dictionary, start)
        if found:
            print("Found words:")
            print(format_columns(found, COLUMNS))
            print()
            if args.pause > 0:
                time.sleep(args.pause)
        else:
            print("No words found")
    return 0


if __name__ == "__main__":
    sys.exit(main())