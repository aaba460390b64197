import heapq
from dataclasses import dataclass
from typing import Hashable, Mapping, Optional

from huffpack.errors import EmptyInputError


@dataclass(eq=False)
class HuffmanNode:
    """
    Node of a Huffman tree.

    - leaf: holds `symbol` and its frequency as `weight`, no children
    - internal: `symbol` is None, `weight` is the sum of both children

    `order` is the creation sequence number used to break weight ties.
    """
    weight: int
    symbol: Optional[Hashable] = None
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None
    order: int = 0

    @property
    def is_leaf(self) -> bool:
        assert (self.left is None) == (self.right is None), "node must have zero or two children"
        return self.left is None

    def __lt__(self, other: "HuffmanNode") -> bool:
        # Equal weights: the node created first is popped first (FIFO).
        return (self.weight, self.order) < (other.weight, other.order)


def build_huffman_tree(frequencies: Mapping[Hashable, int]) -> HuffmanNode:
    """
    Build a Huffman tree from a symbol -> count mapping and return its root.

    Leaves are numbered in the mapping's iteration order and every merged
    node gets the next number, so ties are resolved deterministically. The
    first node popped becomes the left child.
    """
    if not frequencies:
        raise EmptyInputError("cannot build a Huffman tree from an empty frequency table")

    priority_queue = []
    for order, (symbol, count) in enumerate(frequencies.items()):
        if count <= 0:
            raise ValueError(f"frequency for {symbol!r} must be positive, got {count}")
        priority_queue.append(HuffmanNode(weight=count, symbol=symbol, order=order))
    heapq.heapify(priority_queue)

    next_order = len(priority_queue)
    while len(priority_queue) > 1:
        left = heapq.heappop(priority_queue)
        right = heapq.heappop(priority_queue)
        merged = HuffmanNode(
            weight=left.weight + right.weight,
            left=left,
            right=right,
            order=next_order,
        )
        next_order += 1
        heapq.heappush(priority_queue, merged)

    return priority_queue[0]
