import pytest

from zsdist.tree import Node, Tree


def paper_tree():
    # f(d(a,c(b)),e)
    return Tree(
        Node("f", [Node("d", [Node("a"), Node("c", [Node("b")])]), Node("e")])
    )


def chain(depth):
    root = Node("n0")
    node = root
    for k in range(1, depth):
        child = Node(f"n{k}")
        node.children.append(child)
        node = child
    return Tree(root)


def test_labels_are_in_postorder():
    tree = paper_tree()
    tree.build()
    assert tree.labels == ["a", "b", "c", "d", "e", "f"]


def test_leftmost_leaves_of_worked_example():
    tree = paper_tree()
    tree.build()
    assert tree.left == [1, 2, 2, 1, 5, 1]


def test_keyroots_of_worked_example():
    tree = paper_tree()
    tree.build()
    assert tree.keyroots == [3, 5, 6]


def test_len_counts_nodes():
    assert len(paper_tree()) == 6
    assert len(Tree()) == 0


def test_empty_tree_builds_empty_tables():
    tree = Tree()
    tree.build()
    assert tree.labels == []
    assert tree.left == []
    assert tree.keyroots == []


def test_build_is_repeatable():
    tree = paper_tree()
    tree.build()
    first = (list(tree.labels), list(tree.left), list(tree.keyroots))
    tree.build()
    assert (tree.labels, tree.left, tree.keyroots) == first


def test_deep_chain_has_single_keyroot():
    tree = chain(5000)
    tree.build()
    assert tree.keyroots == [5000]
    assert set(tree.left) == {1}


@pytest.mark.parametrize("width", [1, 3, 10])
def test_flat_tree_every_leaf_is_keyroot(width):
    tree = Tree(Node("r", [Node(str(k)) for k in range(width)]))
    tree.build()
    leaves = list(range(1, width + 1))
    assert tree.left == leaves + [1]
    expected = leaves[1:] + [width + 1]
    assert tree.keyroots == expected


def test_table_invariants():
    tree = paper_tree()
    tree.build()
    assert tree.keyroots[-1] == len(tree)
    for number, leaf in enumerate(tree.left, start=1):
        assert 1 <= leaf <= number


def test_iteration_is_postorder():
    assert [node.label for node in paper_tree()] == ["a", "b", "c", "d", "e", "f"]