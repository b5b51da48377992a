"""Dendrogram Tree Structures.

This module defines the core data structures for the organism dendrogram:
- Node: A single organism (leaf) or merged cluster (internal node)
- ClusterTree: Owns a root Node and, transitively, every node below it

Every way of building a ClusterTree copies the nodes it takes from another
tree, so two trees never share a Node.
"""

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from src.dendrogram.exceptions import EmptyTree
from src.dendrogram.records import parse_record

# Number of leading characters each operand contributes to a merged name
NAME_PREFIX_LENGTH = 3


@dataclass(eq=False)
class Node:
    """Represents a node in the dendrogram.

    Nodes are created and rewired only by ClusterTree; client code reads them
    through ``ClusterTree.root``.

    Attributes:
        name: Organism name, or the derived name of a merged cluster.
        score: Organism score, or the average score of a merged cluster.
        left: Left subtree, None for leaves.
        right: Right subtree, None for leaves.
    """

    name: str
    score: float
    left: "Node | None" = None
    right: "Node | None" = None

    def __post_init__(self) -> None:
        if (self.left is None) != (self.right is None):
            raise ValueError(f"Node '{self.name}' must have zero or two children")

    @property
    def is_leaf(self) -> bool:
        """Check if this node is a leaf node (no children)."""
        return self.left is None and self.right is None


def _walk(node: Node | None) -> Iterator[Node]:
    # Pre-order with an explicit stack; trees can be deeper than the recursion limit
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if not current.is_leaf:
            stack.append(current.right)
            stack.append(current.left)


def node_height(node: Node) -> int:
    """Get the height of the subtree rooted at ``node``.

    Args:
        node: A non-empty node.

    Returns:
        0 for a leaf, otherwise one more than the taller child.
    """
    height = 0
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        if current.is_leaf:
            height = max(height, depth)
        else:
            stack.append((current.left, depth + 1))
            stack.append((current.right, depth + 1))
    return height


def render_node(node: Node) -> str:
    """Render the subtree rooted at ``node`` as nested parentheses.

    Leaves render as their name; internal nodes render as
    ``(<left>,<right>)``.
    """
    parts: list[str] = []
    stack: list[Node | str] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif item.is_leaf:
            parts.append(item.name)
        else:
            stack.extend([")", item.right, ",", item.left, "("])
    return "".join(parts)


def _copy_node(node: Node | None) -> Node | None:
    # Pre-order: the parent is allocated before its subtrees
    if node is None:
        return None
    new_root = Node(name=node.name, score=node.score)
    stack = [(node, new_root)]
    while stack:
        source, target = stack.pop()
        if source.is_leaf:
            continue
        target.left = Node(name=source.left.name, score=source.left.score)
        target.right = Node(name=source.right.name, score=source.right.score)
        stack.append((source.right, target.right))
        stack.append((source.left, target.left))
    return new_root


def _release_node(node: Node | None) -> None:
    # Reversed pre-order visits every child before its parent
    for current in reversed(list(_walk(node))):
        current.left = None
        current.right = None


class ClusterTree:
    """A strictly binary clustering tree that exclusively owns its nodes.

    Construct trees through the classmethods:

    - ``ClusterTree()`` for an empty tree
    - ``ClusterTree.from_record`` for a single organism
    - ``ClusterTree.merge`` to join two trees under a new root
    - ``ClusterTree.from_trees`` to agglomerate a collection of trees
    - ``tree.copy()`` for an independent deep copy

    The tree is also a context manager; leaving the ``with`` block releases
    its nodes.
    """

    def __init__(self) -> None:
        self._root: Node | None = None

    @classmethod
    def _adopt(cls, root: Node) -> "ClusterTree":
        tree = cls()
        tree._root = root
        return tree

    @classmethod
    def from_record(cls, record: str) -> "ClusterTree":
        """Create a single node tree from a ``<name> <score>`` record.

        Args:
            record: One line of text.

        Returns:
            A tree holding one leaf.

        Raises:
            InvalidRecord: If the record cannot be parsed.
        """
        name, score = parse_record(record)
        return cls._adopt(Node(name=name, score=score))

    @classmethod
    def merge(cls, tree1: "ClusterTree", tree2: "ClusterTree") -> "ClusterTree":
        """Join copies of two trees under a new root.

        The new root's score is the average of the two root scores and its
        name is the first three characters of each root name, concatenated.
        ``tree1`` and ``tree2`` are left unchanged.

        Raises:
            EmptyTree: If either tree is empty.
        """
        if tree1.is_empty or tree2.is_empty:
            raise EmptyTree("Cannot merge an empty tree")

        root = Node(
            name=tree1.root_name[:NAME_PREFIX_LENGTH] + tree2.root_name[:NAME_PREFIX_LENGTH],
            score=(tree1.root_score + tree2.root_score) / 2,
            left=_copy_node(tree1._root),
            right=_copy_node(tree2._root),
        )
        return cls._adopt(root)

    @classmethod
    def from_trees(cls, trees: Iterable["ClusterTree"]) -> "ClusterTree":
        """Agglomerate a collection of trees into a single tree.

        Args:
            trees: Non-empty collection of trees. It is not modified.

        Returns:
            An independent copy of the consolidated tree.

        Raises:
            EmptyInput: If ``trees`` is empty.
            DuplicateName: If two clusters share a root name.
            DuplicateScore: If two clusters share a root score.
        """
        from src.dendrogram.agglomeration import agglomerate

        return agglomerate(trees)

    def copy(self) -> "ClusterTree":
        """Return an independent deep copy of this tree."""
        tree = type(self)()
        tree._root = _copy_node(self._root)
        return tree

    def __copy__(self) -> "ClusterTree":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "ClusterTree":
        return self.copy()

    def clear(self) -> None:
        """Release every node of the tree, leaving it empty.

        Calling ``clear`` on an empty tree does nothing.
        """
        _release_node(self._root)
        self._root = None

    def __enter__(self) -> "ClusterTree":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.clear()

    @property
    def root(self) -> Node | None:
        """The root node, or None for an empty tree."""
        return self._root

    @property
    def is_empty(self) -> bool:
        """Check if the tree has no root."""
        return self._root is None

    @property
    def root_name(self) -> str:
        """Name held by the root node."""
        return self._require_root().name

    @property
    def root_score(self) -> float:
        """Score held by the root node."""
        return self._require_root().score

    def _require_root(self) -> Node:
        if self._root is None:
            raise EmptyTree()
        return self._root

    def height(self) -> int:
        """Get the height of the tree (0 for a single organism).

        Raises:
            EmptyTree: If the tree is empty.
        """
        return node_height(self._require_root())

    def render(self) -> str:
        """Render the tree as a nested-parenthesis string.

        Raises:
            EmptyTree: If the tree is empty.
        """
        if self._root is None:
            raise EmptyTree("Cannot render an empty tree")
        return render_node(self._root)

    def write(self, stream: TextIO | None = None) -> None:
        """Write the rendered tree and a newline to ``stream`` (stdout by default)."""
        stream = stream if stream is not None else sys.stdout
        stream.write(self.render() + "\n")

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate over all nodes in pre-order."""
        return _walk(self._root)

    def leaves(self) -> list[Node]:
        """Get the leaf nodes from left to right."""
        return [node for node in self.iter_nodes() if node.is_leaf]

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def __eq__(self, other: object) -> bool:
        """Check equality based on structure and values."""
        if not isinstance(other, ClusterTree):
            return NotImplemented
        # A pre-order listing with leaf flags fixes the shape of a strict binary tree
        return [(n.name, n.score, n.is_leaf) for n in self.iter_nodes()] == [
            (n.name, n.score, n.is_leaf) for n in other.iter_nodes()
        ]

    def __str__(self) -> str:
        return "" if self._root is None else self.render()

    def __repr__(self) -> str:
        """String representation of the tree."""
        if self._root is None:
            return "ClusterTree(empty)"
        return (
            f"ClusterTree(root_name={self._root.name!r}, "
            f"root_score={self._root.score:g}, "
            f"height={self.height()}, "
            f"leaves={len(self.leaves())})"
        )
