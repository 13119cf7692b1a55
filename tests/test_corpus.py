import logging

from subsolver.core.corpus import Corpus
from subsolver.core.patterns import encode


def test_buckets_keep_rank_order():
    corpus = Corpus(["cat", "wow", "dog", "mom", "sat"])
    assert corpus.bucket(encode("abc")) == ("cat", "dog", "sat")
    assert corpus.bucket(encode("aba")) == ("wow", "mom")
    assert corpus.bucket(encode("aaaa")) == ()


def test_blank_lines_skipped_and_case_normalized():
    corpus = Corpus(["The", "", "   ", "CAT\n"])
    assert len(corpus) == 2
    assert "the" in corpus
    assert "cat" in corpus
    assert corpus.bucket_count == 1


def test_from_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("the\n\nof\nand\n", encoding="utf-8")
    corpus = Corpus.from_file(path)
    assert len(corpus) == 3
    assert corpus.bucket(encode("abc")) == ("the", "and")


def test_missing_file_gives_empty_corpus(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        corpus = Corpus.from_file(tmp_path / "nope.txt")
    assert len(corpus) == 0
    assert corpus.find_candidates("ABC") == []
    assert "Could not read corpus" in caplog.text


def test_bundled_corpus_loads():
    corpus = Corpus.from_package_data()
    assert len(corpus) > 100
    assert "the" in corpus
    assert corpus.bucket(encode("abc"))[0] == "the"


def test_find_candidates_uses_pattern():
    corpus = Corpus(["wow", "cat", "did", "mom"])
    assert corpus.find_candidates("MXM") == ["wow", "did", "mom"]


def test_find_candidates_respects_decided_letters():
    corpus = Corpus(["bat", "cat", "cut", "cot"])
    assert corpus.find_candidates("cIF") == ["cat", "cut", "cot"]
    assert corpus.find_candidates("cIt") == ["cat", "cut", "cot"]
    assert corpus.find_candidates("caF") == ["cat"]


def test_find_candidates_apostrophes_must_align():
    corpus = Corpus(["don't", "bring", "can't"])
    assert corpus.find_candidates("ABC'D") == ["don't", "can't"]
    # No apostrophe in the partial word: apostrophe words are rejected
    assert corpus.find_candidates("ABCDE") == ["bring"]
    assert corpus.find_candidates("dBC'D") == ["don't"]


def test_find_candidates_no_bucket():
    corpus = Corpus(["the"])
    assert corpus.find_candidates("AA") == []


def test_undecodable_file_gives_empty_corpus(tmp_path, caplog):
    path = tmp_path / "corpus.txt"
    path.write_bytes(b"the\n\xff\xfe\xfa\n")
    with caplog.at_level(logging.WARNING):
        corpus = Corpus.from_file(path)
    assert len(corpus) == 0
    assert "Could not read corpus" in caplog.text
