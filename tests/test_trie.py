import pytest

from practicealgos.trie import Trie

KEYS = ["the", "a", "there", "answer", "any", "by", "bye", "their"]


@pytest.fixture
def trie():
    result = Trie()
    for key in KEYS:
        result.insert(key)
    return result


def test_source_lookups(trie):
    assert trie.search("the") is True
    assert trie.search("these") is False


@pytest.mark.parametrize("key", KEYS)
def test_all_inserted_keys_found(trie, key):
    assert key in trie


@pytest.mark.parametrize("key", ["th", "an", "b", "theirs", "answers", ""])
def test_prefixes_and_extensions_not_found(trie, key):
    assert trie.search(key) is False


def test_constructor_words():
    built = Trie(KEYS)
    assert all(built.search(key) for key in KEYS)
    assert not built.search("thei")


def test_empty_word_can_be_inserted():
    empty = Trie()
    assert "" not in empty
    empty.insert("")
    assert "" in empty


def test_invalid_characters():
    empty = Trie()
    with pytest.raises(ValueError):
        empty.insert("Hello")
    with pytest.raises(ValueError):
        empty.search("a-b")