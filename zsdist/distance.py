"""Tree edit distance with unit costs: Zhang-Shasha and an exhaustive variant."""

from __future__ import annotations

from zsdist.tree import Tree

DELETE_COST = 1
INSERT_COST = 1
RENAME_COST = 1


def _subtree_distance(
    tree1: Tree,
    tree2: Tree,
    i: int,
    j: int,
    td: list[list[int]],
    record_subtrees: bool,
) -> None:
    """Fill ``td[i][j]`` using the forest distances of subtrees ``i`` and ``j``."""
    left1, left2 = tree1.left, tree2.left
    labels1, labels2 = tree1.labels, tree2.labels
    li = left1[i - 1]
    lj = left2[j - 1]

    fd = [[0] * (len(labels2) + 1) for _ in range(len(labels1) + 1)]
    for i1 in range(li, i + 1):
        fd[i1][lj - 1] = fd[i1 - 1][lj - 1] + DELETE_COST
    for j1 in range(lj, j + 1):
        fd[li - 1][j1] = fd[li - 1][j1 - 1] + INSERT_COST

    for i1 in range(li, i + 1):
        row, above = fd[i1], fd[i1 - 1]
        left_i1 = left1[i1 - 1]
        for j1 in range(lj, j + 1):
            left_j1 = left2[j1 - 1]
            if left_i1 == li and left_j1 == lj:
                cost = 0 if labels1[i1 - 1] == labels2[j1 - 1] else RENAME_COST
                row[j1] = min(
                    above[j1] + DELETE_COST,
                    row[j1 - 1] + INSERT_COST,
                    above[j1 - 1] + cost,
                )
                if record_subtrees:
                    td[i1][j1] = row[j1]
            else:
                row[j1] = min(
                    above[j1] + DELETE_COST,
                    row[j1 - 1] + INSERT_COST,
                    fd[left_i1 - 1][left_j1 - 1] + td[i1][j1],
                )
    td[i][j] = fd[i][j]


def _prepare(tree1: Tree, tree2: Tree) -> tuple[int, int]:
    tree1.build()
    tree2.build()
    return len(tree1.labels), len(tree2.labels)


def zhang_shasha_distance(tree1: Tree, tree2: Tree) -> int:
    """Edit distance between two ordered trees, visiting keyroot pairs only."""
    n1, n2 = _prepare(tree1, tree2)
    if not n1 or not n2:
        return n1 + n2
    td = [[0] * (n2 + 1) for _ in range(n1 + 1)]
    for i in tree1.keyroots:
        for j in tree2.keyroots:
            _subtree_distance(tree1, tree2, i, j, td, record_subtrees=True)
    return td[n1][n2]


def naive_distance(tree1: Tree, tree2: Tree) -> int:
    """Edit distance between two ordered trees, visiting every node pair."""
    n1, n2 = _prepare(tree1, tree2)
    if not n1 or not n2:
        return n1 + n2
    td = [[0] * (n2 + 1) for _ in range(n1 + 1)]
    for i in range(1, n1 + 1):
        for j in range(1, n2 + 1):
            _subtree_distance(tree1, tree2, i, j, td, record_subtrees=False)
    return td[n1][n2]