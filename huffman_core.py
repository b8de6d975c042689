# filename: huffman_core.py

import heapq
import itertools
from collections import Counter

from huffman_errors import EmptyInputError, InvariantError

# Code given to the only leaf of a single-symbol tree
SINGLE_SYMBOL_CODE = "0"


class ByteNode:
    def __init__(self, value, weight, left=None, right=None, order=0):
        self.value = value
        self.weight = weight
        self.left = left
        self.right = right
        # Creation order breaks ties between equal weights
        self.order = order

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __lt__(self, other):
        return (self.weight, self.order) < (other.weight, other.order)

    def __repr__(self):
        if self.is_leaf:
            return f"ByteNode(value={self.value!r}, weight={self.weight})"
        return f"ByteNode(weight={self.weight})"


class HuffmanLogic:
    def count_frequencies(self, data):
        # Frequency analysis of the input byte data
        return dict(Counter(data))

    def build_tree(self, frequencies):
        if not frequencies:
            raise EmptyInputError("cannot build a Huffman tree from empty input")

        # Build a priority queue for leaf nodes
        order = itertools.count()
        priority_queue = [ByteNode(value, weight, order=next(order))
                          for value, weight in frequencies.items()]
        heapq.heapify(priority_queue)

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            left = heapq.heappop(priority_queue)
            right = heapq.heappop(priority_queue)
            merged = ByteNode(None, left.weight + right.weight, left, right, next(order))
            heapq.heappush(priority_queue, merged)

        return priority_queue[0]

    def generate_codes(self, root):
        """Walk the tree depth-first and map every leaf value to its path.

        Left edges contribute '0' and right edges '1'. A tree made of a
        single leaf gets SINGLE_SYMBOL_CODE, since an empty code could not
        be told apart in a packed bitstream.
        """
        if root.is_leaf:
            return {root.value: SINGLE_SYMBOL_CODE}

        codes = {}
        stack = [(root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_leaf:
                codes[node.value] = prefix
                continue
            if node.left is None or node.right is None:
                raise InvariantError(f"internal node {node!r} is missing a child")
            # Right first so the left subtree is visited first
            stack.append((node.right, prefix + "1"))
            stack.append((node.left, prefix + "0"))
        return codes

    def build_codes(self, data):
        return self.generate_codes(self.build_tree(self.count_frequencies(data)))


def is_prefix_code(codes):
    # Sorted lexicographically, any prefix sits directly before one of its extensions
    ordered = sorted(codes.values())
    return all(not b.startswith(a) for a, b in zip(ordered, ordered[1:]))
