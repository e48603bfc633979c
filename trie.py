import re

_WORD_RE = re.compile(r"[a-z]+")


class TrieNode:
    def __init__(self):
        # children: dict mapping single‐char (a–z) → TrieNode
        self.children = {}
        # is_word: True if the path from root down to here spells a valid word
        self.is_word = False
        # word: the word spelled by that path, kept so it never has to be rebuilt
        self.word = None

    @classmethod
    def from_words(cls, words):
        """Build a new root and insert every word of `words` into it."""
        root = cls()
        for w in words:
            root.insert(w)
        return root

    def insert(self, word: str):
        """
        Insert `word` into this trie.  Raises ValueError unless `word` is all lowercase [a–z]+
        """
        if not _WORD_RE.fullmatch(word):
            raise ValueError(f"cannot index {word!r}: expected lowercase a–z letters only")
        node = self
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_word = True
        node.word = word

    def child(self, ch: str):
        """Return the node reached by `ch`, or None if no indexed word continues that way."""
        return self.children.get(ch)

    def find(self, word: str):
        """
        Follow `word` from this node one letter at a time.
        Returns the node reached, or None as soon as a letter has no child.
        """
        node = self
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word):
        node = self.find(word)
        return node is not None and node.is_word

    def count_words(self) -> int:
        """Number of distinct words ending at or below this node."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_word:
                total += 1
            stack.extend(node.children.values())
        return total

    def count_nodes(self) -> int:
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children.values())
        return total
