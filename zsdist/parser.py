"""Parse trees written as ``label(child,child,...)``."""

from __future__ import annotations

from zsdist.tree import Node, Tree

_OPEN = "(["
_CLOSE = ")]"
_SEPARATORS = " ,"


class ParseError(ValueError):
    """Raised when a tree description cannot be parsed."""


def _is_label_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


def parse_tree(text: str) -> Tree:
    """Build a :class:`Tree` from text such as ``"f(d(a,c(b)),e)"``.

    Labels are runs of ASCII letters and digits. Children follow their
    parent inside ``(...)`` or ``[...]``, separated by commas or spaces.
    An empty string gives an empty tree. Missing closing brackets at the
    end are tolerated; a closing bracket at the top level ends the input.
    """
    if not text:
        return Tree()

    root: Node | None = None
    parents: list[Node] = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]
        if char in _SEPARATORS:
            pos += 1
            continue
        if char in _CLOSE:
            pos += 1
            if not parents:
                break
            parents.pop()
            continue

        start = pos
        while pos < length and _is_label_char(text[pos]):
            pos += 1
        label = text[start:pos]
        if not label:
            raise ParseError(f"empty node label at position {start}")

        node = Node(label)
        if parents:
            parents[-1].children.append(node)
        elif root is None:
            root = node
        else:
            raise ParseError(f"second root node {label!r} at position {start}")

        if pos < length and text[pos] in _OPEN:
            pos += 1
            parents.append(node)

    if root is None:
        raise ParseError("empty tree")
    return Tree(root)