# wordgo

wordgo finds dictionary words hidden in a grid of letters. It can search in
straight lines, as in a classic word search. It can also follow winding paths
through neighbouring cells, as in a Boggle-style game.

## Input files

wordgo reads two plain-text files in UTF-8:

- a **letter matrix** with one row per line. Blank lines are skipped. Rows
  shorter than the longest row are padded on the right with spaces. A space
  is an empty cell, and no word runs across one.
- a **dictionary** with one word per line. Each word is upper-cased and
  trimmed. Words shorter than three bytes in UTF-8 are ignored.

Dictionary words are stored in upper case, so write the matrix letters in
upper case too.

## Installation

```
pip install .
```

## Command line

```
wordgo
```

You can also run `python -m wordgo.cli`.

The command prints the matrix and the number of words in the dictionary.
After that it searches in one of two modes.

**Path mode** is the default. It runs several rounds. Each round picks a
random cell that holds a letter. From there it walks every path that steps to
a neighbouring cell in any of the eight directions and uses no cell twice.
Every dictionary word spelled along the way is collected. The words of a round
are printed longest first, in three columns. If a round finds nothing, it
prints `No words found`.

**Straight-line mode** is used when you pass `--simple` or set the environment
variable `CFG_SIMPLE` to `true`. It searches from every cell in each of the
eight straight directions. It reports each word with its start position and
its length, grouped by direction.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--matrix PATH` | `res/example.txt` | letter matrix file |
| `--dictionary PATH` | `res/words.txt` | word list file |
| `--simple` | off | use straight-line mode |
| `--workers N` | `4` | worker threads in straight-line mode |
| `--rounds N` | `10` | rounds in path mode |
| `--seed N` | random | seed for choosing start cells |
| `--pause SECONDS` | `1.0` | wait after each round that found words |

Both default paths are relative to the working directory. If a file cannot be
loaded, the command prints the error to standard error and exits with
status 1.

## Library use

### Loading data

```python
from wordgo.dictionary import Dictionary, load_dictionary
from wordgo.matrix import LetterMatrix, load_matrix

matrix = load_matrix("res/example.txt")
dictionary = load_dictionary("res/words.txt")

# or in memory
matrix = LetterMatrix.from_lines(["CAT", "DOG"])
dictionary = Dictionary(["cat", "dog"])
dictionary.add("bird")       # True; returns False for words that are too short
dictionary.contains("cat")   # True, case-insensitive
dictionary.is_prefix("CA")   # True
dictionary.is_word("CAT")    # True
print(dictionary.describe())
print(matrix.render())
```

A `LetterMatrix` has `rows`, `cols`, `dimensions` and `cell(row, col)`. It can
be indexed and iterated by row.

### Straight-line search

```python
from wordgo.search import DIRECTIONS, WordSearcher

searcher = WordSearcher(matrix, dictionary)
searcher.search_all(4)                              # thread pool of 4 workers
searcher.search_from_position(0, 0, DIRECTIONS[0])  # one cell, one direction
for result in searcher.results():
    print(result.word, result.start_row, result.start_col,
          result.direction, result.length)
print(searcher.format_results())
```

The same word, start cell and direction is reported only once. A worker count
below one searches nothing.

### Path search

```python
import random
from wordgo.walk import Coord, find_path_words, format_columns, random_start

start = random_start(matrix, random.Random(42))
words = find_path_words(matrix, dictionary, start)
print(format_columns(words, 3))
print(find_path_words(matrix, dictionary, Coord(0, 0)))
```

`format_columns` sorts the words longest first and then alphabetically.
`random_start` raises `ValueError` if the matrix holds no letters. The lower
level pieces are also available. `Coord.step` moves one cell in a direction
such as `"T"`, `"BR"` or `"L"`. `Path.extend` returns the longer path, or
`None`.

## Errors

Every error that wordgo raises itself is a `wordgo.errors.WordGoError`:

- `FileOpenError` when a file cannot be opened.
- `FileReadError` when a file cannot be read or decoded.
- `EmptyMatrixError` when a matrix holds no non-empty row.
- `OutOfBoundsError` when `Coord.step` would leave the grid.

Building a `LetterMatrix` directly from rows of unequal width raises
`ValueError`.

## What it does not do

wordgo only finds words. It has no game screen, no scoring and no timer. It
does not save its results anywhere: reports are printed or returned as values.