"""Tree builder module for the organism dendrogram.

This module wires ingestion and agglomeration together:
1. Reads organism records into single node trees
2. Agglomerates them into one consolidated tree
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from src.dendrogram.tree_structures import ClusterTree
from src.ingestion import OrganismIngestion


logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds an organism dendrogram from records."""

    def __init__(self, ingestion: OrganismIngestion | None = None) -> None:
        """Initialize the tree builder.

        Args:
            ingestion: Record ingestion instance.
        """
        self.ingestion = ingestion or OrganismIngestion()

    def build_tree(self, trees: Iterable[ClusterTree]) -> ClusterTree:
        """Agglomerate single organism trees into one dendrogram.

        Args:
            trees: Non-empty collection of trees.

        Returns:
            The consolidated tree.
        """
        trees = list(trees)
        logger.info(f"Building dendrogram from {len(trees)} organisms")

        tree = ClusterTree.from_trees(trees)

        logger.info(f"Built {tree!r}")
        return tree

    def build_from_lines(self, lines: Iterable[str]) -> ClusterTree:
        """Build a dendrogram from ``<name> <score>`` records."""
        return self.build_tree(self.ingestion.parse_lines(lines))

    def build_from_file(self, path: str | Path) -> ClusterTree:
        """Build a dendrogram from an organisms file."""
        return self.build_tree(self.ingestion.load_file(path))


def build_dendrogram(path: str | Path, **kwargs) -> ClusterTree:
    """Convenience function to build a dendrogram from a file.

    Args:
        path: Path to the organisms file.
        **kwargs: Additional arguments for TreeBuilder.

    Returns:
        The consolidated tree.
    """
    builder = TreeBuilder(**kwargs)
    return builder.build_from_file(path)
