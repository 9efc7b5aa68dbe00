import pytest

from lexicon import LexiconTrie


@pytest.fixture
def lexicon():
    return LexiconTrie(["cat", "car", "cart"])


@pytest.fixture
def c_words():
    return LexiconTrie(["cat", "cut", "cot", "chat"])


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Cat\ncar\n\ncart\nx-ray\ncat\n", encoding="utf-8")
    return str(path)
