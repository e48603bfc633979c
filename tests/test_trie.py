import pytest

from trie import TrieNode


WORDS = ["cat", "cats", "catdog", "dog", "do", "a"]


def test_inserted_words_end_on_terminal_nodes():
    root = TrieNode.from_words(WORDS)
    for w in WORDS:
        node = root.find(w)
        assert node is not None
        assert node.is_word
        assert node.word == w


def test_prefix_is_not_a_word():
    root = TrieNode.from_words(["cats"])
    node = root.find("cat")
    assert node is not None
    assert not node.is_word
    assert node.word is None
    assert "cat" not in root
    assert "cats" in root


def test_child_lookup():
    root = TrieNode.from_words(["dog"])
    assert root.child("d") is root.children["d"]
    assert root.child("x") is None
    assert root.find("dx") is None


def test_root_is_never_terminal():
    root = TrieNode.from_words(WORDS)
    assert not root.is_word
    assert "" not in root


@pytest.mark.parametrize("bad", ["", "Cat", "ca t", "c4t", "café", "dog\n"])
def test_insert_rejects_malformed_words(bad):
    root = TrieNode()
    with pytest.raises(ValueError):
        root.insert(bad)
    # nothing was linked before the rejection
    assert root.children == {}


def test_insert_is_idempotent():
    once = TrieNode.from_words(["ab", "abc"])
    twice = TrieNode.from_words(["ab", "abc", "ab"])
    assert once.count_nodes() == twice.count_nodes() == 4
    assert once.count_words() == twice.count_words() == 2
    assert twice.find("ab").word == "ab"


def test_shared_prefixes_share_nodes():
    root = TrieNode.from_words(["cat", "catdog", "car"])
    # root, c, a, t, r, d, o, g
    assert root.count_nodes() == 8
    assert root.count_words() == 3
    assert set(root.find("ca").children) == {"t", "r"}


def test_empty_trie():
    root = TrieNode()
    assert root.count_words() == 0
    assert root.count_nodes() == 1
    assert "a" not in root
