"""Huffman trees, code tables and encoding."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol, internal nodes do not."""

    freq: int
    symbol: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None


class _MinHeap:
    """Binary min-heap of nodes ordered by frequency."""

    def __init__(self, nodes: Iterable[HuffmanNode] = ()) -> None:
        self._items = list(nodes)
        for idx in reversed(range(len(self._items) // 2)):
            self._sift_down(idx)

    def __len__(self) -> int:
        return len(self._items)

    def _sift_down(self, idx: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = idx
            for child in (2 * idx + 1, 2 * idx + 2):
                if child < size and items[child].freq < items[smallest].freq:
                    smallest = child
            if smallest == idx:
                return
            items[idx], items[smallest] = items[smallest], items[idx]
            idx = smallest

    def pop(self) -> HuffmanNode:
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def push(self, node: HuffmanNode) -> None:
        items = self._items
        items.append(node)
        idx = len(items) - 1
        while idx and node.freq < items[(idx - 1) // 2].freq:
            parent = (idx - 1) // 2
            items[idx] = items[parent]
            idx = parent
        items[idx] = node


def _merge(heap: _MinHeap) -> HuffmanNode:
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(HuffmanNode(left.freq + right.freq, None, left, right))
    return heap.pop()


def build_tree(symbols: Sequence[str], freqs: Sequence[int]) -> HuffmanNode:
    """Build a Huffman tree from parallel sequences of symbols and frequencies."""
    if len(symbols) != len(freqs):
        raise ValueError("symbols and freqs must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is required")
    heap = _MinHeap(HuffmanNode(freq, sym) for sym, freq in zip(symbols, freqs))
    return _merge(heap)


def code_table(root: HuffmanNode) -> dict[str, str]:
    """Map every leaf symbol to its code: 0 for a left edge, 1 for a right edge."""
    codes: dict[str, str] = {}
    stack: list[tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf():
            codes[node.symbol] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


def huffman_codes(symbols: Sequence[str], freqs: Sequence[int]) -> dict[str, str]:
    """Return the Huffman code of each symbol, in left-to-right leaf order."""
    return code_table(build_tree(symbols, freqs))


def count_symbols(message: str, alphabet: Sequence[str]) -> list[int]:
    """Count how often each symbol of the alphabet occurs in the message."""
    counts = Counter(message)
    return [counts[sym] for sym in alphabet]


def distinct_frequencies(text: str) -> list[tuple[str, int]]:
    """Distinct characters with their counts, sorted stably by ascending count."""
    return sorted(Counter(text).items(), key=lambda pair: pair[1])


def build_tree_from_text(text: str) -> HuffmanNode:
    """Build a Huffman tree from the character frequencies of a text."""
    if not text:
        raise ValueError("cannot build a Huffman tree from empty text")
    heap = _MinHeap()
    for sym, freq in Counter(text).items():
        heap.push(HuffmanNode(freq, sym))
    return _merge(heap)


def encode(text: str, codes: Mapping[str, str]) -> str:
    """Concatenate the codes of the characters of the text."""
    try:
        return "".join(codes[ch] for ch in text)
    except KeyError as exc:
        raise KeyError(f"no code for symbol {exc.args[0]!r}") from None


def fixed_size_bits(text: str) -> int:
    """Bits a fixed-width code for the distinct characters of the text would use.

    The width is the smallest power of two, up to 2**5, covering the number of
    distinct characters; beyond 32 distinct characters the result is 0.
    """
    distinct = len(set(text))
    width = next((i for i in range(6) if distinct <= 2**i), 0)
    return width * len(text)