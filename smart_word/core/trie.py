# trie.py
# Lexicon: prefix tree over a-z with per-word frequencies and a small
# table of the words that followed each word in the message corpora.

from __future__ import annotations

import heapq
from collections import defaultdict
from typing import Dict, List, Optional, Tuple


Word = str
Count = int
HeapEntry = Tuple[Count, int, Word]

NEXT_WORDS_CAP = 5


def _in_alphabet(ch: str) -> bool:
    return "a" <= ch <= "z"


class TrieNode:
    """
    A single node in the Lexicon.
    children: letter -> TrieNode (a-z only)
    is_word: the path from the root to here spells a stored word
    freq: insertions plus feedback boosts
    next_words: successor word -> count, kept at most `cap` entries long
    """

    __slots__ = ("children", "is_word", "freq", "next_words")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_word = False
        self.freq = 0
        self.next_words: Dict[Word, Count] = {}

    def __repr__(self) -> str:
        return (
            f"TrieNode(is_word={self.is_word}, freq={self.freq}, "
            f"children={''.join(sorted(self.children))!r})"
        )


class Lexicon:
    """
    Word store used by the Predictor for:
     - frequency-ranked prefix completion
     - bigram anchors ("which words followed this one")
     - feedback boosts
    Lookups that miss return None / [] / False; nothing here raises on odd input.
    """

    def __init__(self, next_words_cap: int = NEXT_WORDS_CAP) -> None:
        if next_words_cap < 1:
            raise ValueError("next_words_cap must be >= 1")
        self._root = TrieNode()
        self.next_words_cap = next_words_cap

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word, lowercased. Characters outside a-z are skipped and
        the rest of the word is still inserted ("it's" -> "its").
        Each call bumps the word's frequency by one.
        """
        if not word:
            return

        node = self._root
        for ch in word.lower():
            if not _in_alphabet(ch):
                continue
            node = node.children[ch]
        if node is self._root:
            # nothing but punctuation/digits
            return
        node.is_word = True
        node.freq += 1

    # lookup --------------------------------------------------------
    def lookup(self, word: str) -> Optional[TrieNode]:
        """
        Node for `word`, or None when any character is outside a-z or the
        path does not exist. A returned node may be a bare prefix (is_word False).
        """
        node = self._root
        for ch in (word or "").lower():
            if not _in_alphabet(ch):
                return None
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # search/traversal ---------------------------------------------------------
    def prefix_search(self, prefix: str, limit: int) -> List[Word]:
        """
        Up to `limit` stored words starting with `prefix`, highest frequency
        first. Equal frequencies keep a-z traversal order.
        The whole subtree under `prefix` is scanned on every call.
        """
        if limit <= 0:
            return []
        node = self.lookup(prefix)
        if node is None:
            return []

        heap = self._collect(node, (prefix or "").lower(), limit)

        out: List[Word] = []
        while heap:
            out.append(heapq.heappop(heap)[2])
        out.reverse()
        return out

    def _collect(self, node: TrieNode, prefix: str, limit: int) -> List[HeapEntry]:
        """
        Pre-order a-z walk into a bounded min-heap; later-visited words lose
        frequency ties. Explicit stack, so word length is not bounded by recursion.
        """
        heap: List[HeapEntry] = []
        order = 0
        stack = [(node, prefix)]
        while stack:
            cur, word = stack.pop()
            if cur.is_word:
                entry = (cur.freq, -order, word)
                order += 1
                if len(heap) < limit:
                    heapq.heappush(heap, entry)
                else:
                    heapq.heappushpop(heap, entry)
            for ch in sorted(cur.children, reverse=True):
                stack.append((cur.children[ch], word + ch))
        return heap

    # bigrams ---------------------------------------------------------
    def record_following(self, word: str, next_word: str) -> bool:
        """
        Count `next_word` as having followed `word`.
        When the table outgrows the cap, the lowest count is dropped; among
        equal lowest counts the entry inserted first goes.
        Returns False when `word` has no node.
        """
        node = self.lookup(word)
        if node is None:
            return False
        table = node.next_words
        table[next_word] = table.get(next_word, 0) + 1
        if len(table) > self.next_words_cap:
            # min() keeps the first minimal key in insertion order
            victim = min(table, key=table.__getitem__)
            del table[victim]
        return True

    # feedback -------------------------------------------------------
    def boost(self, word: str, amount: int) -> bool:
        """Add `amount` to the frequency of `word`'s node, if there is one."""
        node = self.lookup(word)
        if node is None:
            return False
        node.freq += amount
        return True

    # convenience/debugging -----------------------------------------------------
    def frequency(self, word: str) -> int:
        node = self.lookup(word)
        if node is None or not node.is_word:
            return 0
        return node.freq

    def following(self, word: str) -> Dict[Word, Count]:
        """Copy of the successor table for `word` ({} when unknown)."""
        node = self.lookup(word)
        return dict(node.next_words) if node is not None else {}

    def size(self) -> int:
        """
        Count words in the Lexicon.
        (O(N) walk, meant for stats output, not the typing path.)
        """
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.is_word:
                count += 1
            stack.extend(node.children.values())
        return count

    def __contains__(self, word: str) -> bool:
        node = self.lookup(word)
        return node is not None and node.is_word
