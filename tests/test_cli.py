import pytest

from wordgo.cli import main


@pytest.fixture
def files(tmp_path):
    def make(grid, words):
        matrix = tmp_path / "matrix.txt"
        dictionary = tmp_path / "words.txt"
        matrix.write_text(grid, encoding="utf-8")
        dictionary.write_text(words, encoding="utf-8")
        return ["--matrix", str(matrix), "--dictionary", str(dictionary)]

    return make


def test_simple_mode_reports_words(files, capsys, monkeypatch):
    monkeypatch.delenv("CFG_SIMPLE", raising=False)
    args = files("CAT\nDOG", "CAT\nDOG\nAT\nGO")
    assert main(args + ["--simple", "--workers", "2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("=== WordGo - Buscador de Palavras em Matriz de Letras ===")
    assert "Iniciando busca com 2 workers..." in out
    assert "  'CAT' em (0,0) - 3 letras" in out
    assert "  'DOG' em (1,0) - 3 letras" in out


def test_simple_mode_from_environment(files, capsys, monkeypatch):
    monkeypatch.setenv("CFG_SIMPLE", "true")
    args = files("CAT", "CAT")
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "Total de palavras encontradas: 1" in out


def test_missing_matrix_fails(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    code = main(["--matrix", str(missing), "--dictionary", str(missing)])
    assert code == 1
    assert "Erro ao carregar matriz" in capsys.readouterr().err


def test_missing_dictionary_fails(tmp_path, capsys):
    matrix = tmp_path / "matrix.txt"
    matrix.write_text("CAT", encoding="utf-8")
    code = main(["--matrix", str(matrix), "--dictionary", str(tmp_path / "no.txt")])
    assert code == 1
    assert "Erro ao carregar dicionário" in capsys.readouterr().err


def test_walk_mode_finds_words(files, capsys, monkeypatch):
    monkeypatch.delenv("CFG_SIMPLE", raising=False)
    args = files("AA\nAA", "AAA")
    assert main(args + ["--rounds", "2", "--seed", "3", "--pause", "0"]) == 0
    out = capsys.readouterr().out
    assert out.count("Waiting for words to be found...") == 2
    assert out.count("Found words:") == 2
    assert "AAA" in out


def test_walk_mode_without_words(files, capsys, monkeypatch):
    monkeypatch.delenv("CFG_SIMPLE", raising=False)
    args = files("A", "ABC")
    assert main(args + ["--rounds", "1", "--seed", "1", "--pause", "0"]) == 0
    out = capsys.readouterr().out
    assert "No words found" in out
    assert "Found words:" not in out