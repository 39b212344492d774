import dataclasses
from pathlib import Path

import pytest
from wordlesolver.config import DEFAULT_CORPUS_PATH, DEFAULT_OPENINGS
from wordlesolver.datasets import WordCorpus, load_corpus, normalize_words
from wordlesolver.engine import CorpusError


def test_normalize_trims_lowercases_filters_and_dedupes():
    lines = ["  Spine ", "TARDY", "spine", "toolong", "ab1de", "", "jumbo\r", "tardy"]
    assert normalize_words(lines) == ("spine", "tardy", "jumbo")


def test_load_corpus_from_file(tmp_path: Path):
    p = tmp_path / "wordle.txt"
    p.write_text("crane\nPLANE\ncrane\nxyz\n", encoding="utf-8")
    corpus = load_corpus(p)
    assert list(corpus) == ["crane", "plane"]
    assert len(corpus) == 2
    assert "plane" in corpus and "xyz" not in corpus


def test_missing_corpus_is_fatal(tmp_path: Path):
    with pytest.raises(CorpusError, match="not found"):
        load_corpus(tmp_path / "missing.txt")


def test_empty_corpus_is_fatal(tmp_path: Path):
    p = tmp_path / "wordle.txt"
    p.write_text("\n\nabc\n", encoding="utf-8")
    with pytest.raises(CorpusError):
        load_corpus(p)
    with pytest.raises(CorpusError):
        WordCorpus.from_lines([])


def test_corpus_is_immutable():
    corpus = WordCorpus.from_lines(["crane", "plane"])
    assert isinstance(corpus.words, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        corpus.words = ("spine",)


def test_bundled_word_list_loads():
    corpus = load_corpus(DEFAULT_CORPUS_PATH)
    assert len(corpus) > 100
    for w in DEFAULT_OPENINGS:
        assert w in corpus


def test_read_lines_is_exported(tmp_path: Path):
    import wordlesolver.datasets as ds
    assert "read_lines" in ds.__all__
    p = tmp_path / "w.txt"
    p.write_text("crane\r\nplane\n", encoding="utf-8")
    assert ds.read_lines(p) == ["crane", "plane"]
