"""Huffman tree construction over byte frequencies."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import count

RIGHT_CHILD = "1"
LEFT_CHILD = "0"


@dataclass(eq=False)
class Node:
    """A Huffman tree node; internal nodes carry symbol 0."""

    freq: int
    symbol: int = 0
    right: Node | None = None
    left: Node | None = None

    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return self.right is None and self.left is None


def byte_frequencies(data: bytes) -> Counter[int]:
    """Count how often each byte value occurs in ``data``."""
    return Counter(bytes(data))


def build_tree(data: bytes) -> Node:
    """Build the Huffman tree for the bytes of ``data``."""
    frequencies = byte_frequencies(data)
    if not frequencies:
        raise ValueError("cannot build a Huffman tree from empty data")

    order = count()
    heap = [
        (freq, next(order), Node(freq, symbol))
        for symbol, freq in sorted(frequencies.items())
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        freq1, _, first = heapq.heappop(heap)
        freq2, _, second = heapq.heappop(heap)
        total = freq1 + freq2
        heapq.heappush(heap, (total, next(order), Node(total, right=first, left=second)))
    return heap[0][2]


def _walk(node: Node, prefix: str) -> Iterator[tuple[int, str]]:
    if node.is_leaf():
        yield node.symbol, prefix
        return
    if node.right is not None:
        yield from _walk(node.right, prefix + RIGHT_CHILD)
    if node.left is not None:
        yield from _walk(node.left, prefix + LEFT_CHILD)


def huffman_codes(data: bytes) -> dict[int, str]:
    """Map each byte value present in ``data`` to its Huffman bit string.

    A single distinct byte value gets the empty code.
    """
    return dict(_walk(build_tree(data), ""))