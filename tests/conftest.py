import pytest

from subsolver.core.corpus import Corpus

# "the quick brown fox jumps over the lazy dog" under the Atbash alphabet
PANGRAM_CIPHER = "GSV JFRXP YILDM ULC QFNKH LEVI GSV OZAB WLT"
PANGRAM_PLAIN = "the quick brown fox jumps over the lazy dog"


@pytest.fixture
def small_corpus() -> Corpus:
    return Corpus(["the", "cat", "sat"])


@pytest.fixture
def pangram_corpus() -> Corpus:
    return Corpus(
        ["the", "quick", "brown", "jumps", "house", "over", "lazy", "fox", "dog", "cat", "sat"]
    )
