# trie.py
# Trie (prefix tree) over unicode strings.
# Supports exact lookup, prefix checks, prefix enumeration and removal
# with pruning of nodes that no longer lead to any word.

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode (insertion ordered)
    is_word: True if the path to this node spells a stored word
    """

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False


class Trie:
    """
    Prefix tree. Characters are stored exactly as given (no case folding).
    The empty string is a valid word and is stored on the root.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """Insert `word`. Inserting an existing word is a no-op."""
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def insert_many(self, words: Iterable[str]) -> None:
        for w in words:
            self.insert(w)

    # lookup ---------------------------------------------------------
    def search(self, word: str) -> bool:
        """True only if `word` itself was inserted (not merely a prefix)."""
        node = self._find(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """True if some path spells `prefix`, word end or not."""
        return self._find(prefix) is not None

    def get_words_with_prefix(self, prefix: str) -> List[str]:
        """
        Return all stored words starting with `prefix`.
        Order: a word comes before its extensions, siblings follow the order
        their first character was inserted. Sort the result for a canonical
        order.
        """
        node = self._find(prefix)
        if node is None:
            return []
        out: List[str] = []
        self._collect(node, prefix, out)
        return out

    def words(self) -> List[str]:
        return self.get_words_with_prefix("")

    # removal ---------------------------------------------------------
    def remove(self, word: str) -> bool:
        """
        Remove `word`. Returns False (and changes nothing) if it is absent.
        Walks back up the path unlinking nodes left with no children and no
        word end, stopping at the first node still in use.
        """
        path: List[Tuple[TrieNode, str]] = []
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child
        if not node.is_word:
            return False

        node.is_word = False
        self._size -= 1

        pruned = 0
        for parent, ch in reversed(path):
            child = parent.children[ch]
            if child.children or child.is_word:
                break
            del parent.children[ch]
            pruned += 1
        logger.debug("removed %r, pruned %d node(s)", word, pruned)
        return True

    # convenience ------------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    # internal ---------------------------------------------------------
    def _find(self, s: str):
        """Walk the path for `s`; None if it breaks off."""
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _collect(self, node: TrieNode, prefix: str, results: List[str]) -> None:
        """
        DFS collecting words under a prefix node.
        Explicit stack so long words do not hit the recursion limit; children
        are pushed reversed to keep pre-order and insertion order.
        """
        stack = [(node, prefix)]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                results.append(prefix)
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, prefix + ch))
