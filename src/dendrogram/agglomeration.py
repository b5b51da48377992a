"""Nearest-pair agglomeration for the organism dendrogram.

This module reduces a collection of cluster trees to a single tree by
repeatedly merging the two clusters whose root scores are closest:

1. Scan every pair of clusters in collection order
2. Reject the collection if two clusters share a root name or a root score
3. Merge the closest pair and put the merged tree where the first of the
   pair was
4. Repeat until a single cluster remains

Each step rescans all current clusters; no distances are cached between
steps, so identical input always yields an identical tree.
"""

from collections.abc import Iterable

from src.dendrogram.exceptions import DuplicateName, DuplicateScore, EmptyInput
from src.dendrogram.tree_structures import ClusterTree


def find_closest_pair(trees: list[ClusterTree]) -> tuple[int, int]:
    """Find the two trees whose root scores are closest together.

    Pairs are visited with an outer loop over the list and an inner loop over
    the trees after it; on ties the first pair visited wins.

    Args:
        trees: At least two non-empty trees.

    Returns:
        Tuple of (i, j) list positions with i < j.

    Raises:
        EmptyInput: If fewer than two trees are given.
        DuplicateName: If two trees share a root name.
        DuplicateScore: If two trees share a root score.
    """
    if len(trees) < 2:
        raise EmptyInput(f"Need at least two trees to pair, got {len(trees)}")

    closest: tuple[int, int] | None = None
    smallest_diff = 0.0

    for i in range(len(trees)):
        for j in range(i + 1, len(trees)):
            if trees[i].root_name == trees[j].root_name:
                raise DuplicateName(trees[i].root_name)

            diff = abs(trees[i].root_score - trees[j].root_score)
            if diff == 0:
                raise DuplicateScore(trees[i].root_score)

            if closest is None or diff < smallest_diff:
                smallest_diff = diff
                closest = (i, j)

    return closest


def merge_closest_trees(trees: list[ClusterTree]) -> None:
    """Run one merge step in place.

    The closest pair is removed from ``trees`` and the merged tree is
    inserted at the position of the first tree of the pair, so the list
    shrinks by one.

    Args:
        trees: Working list of at least two trees.
    """
    i, j = find_closest_pair(trees)
    merged = ClusterTree.merge(trees[i], trees[j])

    del trees[j]
    trees[i] = merged


def agglomerate(trees: Iterable[ClusterTree]) -> ClusterTree:
    """Agglomerate trees until a single consolidated tree remains.

    Args:
        trees: Non-empty collection of trees. It is not modified.

    Returns:
        An independent copy of the consolidated tree.

    Raises:
        EmptyInput: If ``trees`` is empty.
        DuplicateName: If two clusters share a root name.
        DuplicateScore: If two clusters share a root score.
    """
    worklist = list(trees)
    if not worklist:
        raise EmptyInput()

    while len(worklist) > 1:
        merge_closest_trees(worklist)

    return worklist[0].copy()
