import pandas as pd
import pytest

from puzzles.data_utils import (
    extract_dictionary_words,
    load_corpus,
    load_dictionary,
    load_word_lines,
)
from puzzles.sampler import WordSampler
from puzzles.vocab import Corpus


def test_corpus_protocol():
    c = Corpus(["APPLE", "CRANE", "SLATE"])
    assert len(c) == 3
    assert "CRANE" in c
    assert "crane" not in c
    assert c.index_of("SLATE") == 2
    assert c.word_at(0) == "APPLE"
    assert c[1] == "CRANE"
    assert list(c) == ["APPLE", "CRANE", "SLATE"]
    assert c.word_length == 5


def test_corpus_rejects_duplicates_and_empty():
    with pytest.raises(ValueError):
        Corpus(["APPLE", "APPLE"])
    with pytest.raises(ValueError):
        Corpus([])
    with pytest.raises(KeyError):
        Corpus(["APPLE"]).index_of("PEARS")


def test_from_words_normalizes():
    c = Corpus.from_words([" apple", "Crane", "APPLE", "ab1de", "toolong", None], word_len=5)
    assert c.words() == ["APPLE", "CRANE"]


def test_mixed_length_corpus_has_no_word_length():
    assert Corpus(["PLANT", "PLANTER"]).word_length is None


def test_load_corpus_from_csv(tmp_path):
    path = tmp_path / "word_list.csv"
    pd.DataFrame(
        {
            "word": ["cigar", "rebut", "sissy", "cigar", "abc", "humph"],
            "day": [1, 2, None, 4, 5, None],
        }
    ).to_csv(path, index=False)

    everything = load_corpus(path)
    assert everything.words() == ["CIGAR", "REBUT", "SISSY", "HUMPH"]

    answers = load_corpus(path, answers_only=True)
    assert answers.words() == ["CIGAR", "REBUT"]


def test_load_corpus_missing_column(tmp_path):
    path = tmp_path / "words.csv"
    pd.DataFrame({"term": ["cigar"]}).to_csv(path, index=False)
    with pytest.raises(KeyError):
        load_corpus(path)


def test_load_word_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crane\nslate\n\nCRANE\n", encoding="utf-8")
    assert load_word_lines(path).words() == ["CRANE", "SLATE"]


def test_extract_dictionary_words():
    text = "The quick brown fox, the QUICK one; a cat & twelve dogs!"
    assert extract_dictionary_words(text) == ["QUICK", "BROWN", "TWELVE", "DOGS"]


def test_load_dictionary(tmp_path):
    path = tmp_path / "bee-dict.txt"
    path.write_text("planter: one who plants\nrant, rant, ran\n", encoding="utf-8")
    assert load_dictionary(path).words() == ["PLANTER", "PLANTS", "RANT"]


def test_sampler_distinct_excludes_and_is_seeded():
    words = ["A", "B", "C", "D", "E"]
    picked = WordSampler(3).distinct(words, 3, exclude=("A",))
    assert len(set(picked)) == 3
    assert "A" not in picked
    assert picked == WordSampler(3).distinct(words, 3, exclude=("A",))
    with pytest.raises(ValueError):
        WordSampler(3).distinct(words, 5, exclude=("A",))


def test_sampler_shuffled_returns_copy():
    items = [1, 2, 3, 4]
    out = WordSampler(0).shuffled(items)
    assert items == [1, 2, 3, 4]
    assert sorted(out) == items
