"""Ordered, labelled trees and their Zhang-Shasha preprocessing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A tree node: a label and an ordered list of children."""

    label: str
    children: list[Node] = field(default_factory=list)


def _postorder(root: Node) -> Iterator[Node]:
    """Yield the nodes under ``root`` in postorder, without recursion."""
    stack: list[tuple[Node, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.children))


class Tree:
    """An ordered tree with the tables the tree edit distance needs.

    After :meth:`build`, nodes are numbered 1..n in postorder and:

    * ``labels[k - 1]`` is the label of node ``k``;
    * ``left[k - 1]`` is the number of the leftmost leaf under node ``k``;
    * ``keyroots`` lists, in ascending order, the nodes that are the
      highest node sharing their leftmost leaf.
    """

    def __init__(self, root: Node | None = None) -> None:
        self.root = root
        self.labels: list[str] = []
        self.left: list[int] = []
        self.keyroots: list[int] = []

    def __len__(self) -> int:
        if self.root is None:
            return 0
        return sum(1 for _ in _postorder(self.root))

    def __iter__(self) -> Iterator[Node]:
        """Iterate over the nodes in postorder."""
        if self.root is not None:
            yield from _postorder(self.root)

    def build(self) -> None:
        """Recompute labels, leftmost-leaf numbers and keyroots."""
        self.labels = []
        self.left = []
        self.keyroots = []
        if self.root is None:
            return

        leftmost: dict[int, int] = {}
        for node in _postorder(self.root):
            number = len(self.labels) + 1
            if node.children:
                leaf = leftmost[id(node.children[0])]
            else:
                leaf = number
            leftmost[id(node)] = leaf
            self.labels.append(node.label)
            self.left.append(leaf)

        highest: dict[int, int] = {}
        for number, leaf in enumerate(self.left, start=1):
            highest[leaf] = number
        self.keyroots = sorted(highest.values())

    def __repr__(self) -> str:
        return f"Tree(nodes={len(self)})"