import pytest

from wordgo.errors import (
    EmptyMatrixError,
    FileOpenError,
    FileReadError,
    OutOfBoundsError,
    WordGoError,
)


@pytest.mark.parametrize("side", ["<", ">", "^", "v"])
def test_out_of_bounds_message_carries_side(side):
    error = OutOfBoundsError(side)
    assert str(error) == f"out of boundaries {side}"
    assert error.side == side


def test_out_of_bounds_left_message():
    assert str(OutOfBoundsError("<")) == "out of boundaries <"


def test_empty_matrix_default_message():
    assert str(EmptyMatrixError()) == "matriz vazia"


@pytest.mark.parametrize(
    "factory, expected",
    [
        (lambda: OutOfBoundsError("^"), "out of boundaries ^"),
        (lambda: EmptyMatrixError(), "matriz vazia"),
        (lambda: FileOpenError("do dicionário"), "erro ao abrir arquivo do dicionário"),
        (lambda: FileReadError("do dicionário"), "erro ao ler arquivo do dicionário"),
    ],
)
def test_all_errors_are_base_errors_and_keep_message(factory, expected):
    error = factory()
    assert isinstance(error, WordGoError)
    assert str(error) == expected


def test_file_open_error_wraps_cause():
    cause = FileNotFoundError("missing.txt")
    error = FileOpenError("da matriz", cause)
    assert str(error).startswith("erro ao abrir arquivo da matriz")
    assert str(error).endswith(str(cause))
    assert error.cause is cause
    assert error.subject == "da matriz"


def test_file_read_error_without_cause():
    error = FileReadError("da matriz")
    assert str(error) == "erro ao ler arquivo da matriz"
    assert error.cause is None


@pytest.mark.parametrize(
    "factory, expected_type, expected",
    [
        (lambda: OutOfBoundsError("v"), OutOfBoundsError, "out of boundaries v"),
        (lambda: EmptyMatrixError(), EmptyMatrixError, "matriz vazia"),
        (lambda: FileOpenError("da matriz"), FileOpenError, "erro ao abrir arquivo da matriz"),
        (lambda: FileReadError("da matriz"), FileReadError, "erro ao ler arquivo da matriz"),
    ],
)
def test_errors_are_caught_as_base_error(factory, expected_type, expected):
    error = factory()
    caught_type = None
    message = None
    try:
        raise error
    except WordGoError as caught:
        caught_type = type(caught)
        message = str(caught)
    assert caught_type is expected_type
    assert message == expected