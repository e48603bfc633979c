"""
compound.py

Decides whether a word is a concatenation of two or more other words indexed in a
TrieNode, and reports the sub-words it splits into.

The search walks the trie along the candidate word.  Each step is in a state
(node, position):
  • consume: follow the child of `node` for word[position] to (child, position + 1)
  • restart: if `node` ends a word, retry (root, position), i.e. split the
             candidate right here
  • accept:  position == len(word), `node` ends a word and that word is not the
             candidate itself (at least one split happened)

States are memoised for the duration of one call, so every (node, position) pair is
explored at most once no matter how many splits lead back to it.
"""

from typing import Callable, Iterable, NamedTuple, Optional

from trie import TrieNode


class CompoundMatch(NamedTuple):
    word: str
    is_compound: bool
    # union of the parts of every valid split; empty unless collected
    sub_words: frozenset


def find_compound(root: TrieNode, word: str, collect: bool = False) -> CompoundMatch:
    """
    Search `root` for a split of `word` into two or more indexed words.

    Without `collect` the search stops at the first split it finds, trying the longer
    match before the restart.  With collect=True every split is explored and sub_words
    holds each indexed word that appears as a part in at least one of them.
    """
    end = len(word)
    # (id(node), position) → (result, parts of the splits accepted below that state)
    memo = {}
    nothing = frozenset()

    def visit(node, position):
        key = (id(node), position)
        if key in memo:
            return memo[key]

        found = set()
        if position == end:
            result = node.is_word and node.word != word
            if collect and result:
                found.add(node.word)
        else:
            result = False
            nxt = node.child(word[position])
            if nxt is not None:
                result, below = visit(nxt, position + 1)
                found |= below
            if node.is_word and (collect or not result):
                rest, below = visit(root, position)
                if rest and collect:
                    found |= below
                    found.add(node.word)
                result = result or rest

        memo[key] = (result, frozenset(found) if found else nothing)
        return memo[key]

    result, sub_words = visit(root, 0)
    return CompoundMatch(word, result, sub_words)


def is_compound(root: TrieNode, word: str) -> bool:
    return find_compound(root, word).is_compound


def longest_compound(
    root: TrieNode,
    words: Iterable[str],
    on_match: Optional[Callable[[str], None]] = None,
) -> Optional[CompoundMatch]:
    """
    Test every word of `words` in order and return the collected match of the longest
    compound one.  Ties go to the word seen first.  Returns None if no word is compound.

    `on_match` is called with each compound word as soon as it is found.
    """
    longest = None
    for w in words:
        if not is_compound(root, w):
            continue
        if on_match is not None:
            on_match(w)
        if longest is None or len(w) > len(longest):
            longest = w

    if longest is None:
        return None
    return find_compound(root, longest, collect=True)
