"""A prefix tree over lowercase words."""

import string

_LETTERS = frozenset(string.ascii_lowercase)


class _TrieNode:
    __slots__ = ("children", "end_of_word")

    def __init__(self):
        self.children = {}
        self.end_of_word = False


def _check_key(key):
    invalid = set(key) - _LETTERS
    if invalid:
        raise ValueError(f"not a lowercase letter: {min(invalid)!r}")


class Trie:
    """Stores words made of the letters a-z and answers exact lookups."""

    def __init__(self, words=()):
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, key):
        """Add ``key`` to the trie."""
        _check_key(key)
        node = self._root
        for ch in key:
            node = node.children.setdefault(ch, _TrieNode())
        node.end_of_word = True

    def search(self, key):
        """Tell whether ``key`` was inserted as a whole word."""
        _check_key(key)
        node = self._root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.end_of_word

    def __contains__(self, key):
        return self.search(key)