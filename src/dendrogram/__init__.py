"""Dendrogram Core Module.

This module contains the organism clustering implementation including:
- Tree structures (ClusterTree)
- Record parsing
- Nearest-pair agglomeration

The tree builder lives in ``src.dendrogram.tree_builder`` and is imported
from there, since it depends on ``src.ingestion``.
"""

from src.dendrogram.agglomeration import agglomerate, find_closest_pair, merge_closest_trees
from src.dendrogram.exceptions import (
    DendrogramError,
    DuplicateName,
    DuplicateScore,
    EmptyInput,
    EmptyTree,
    InvalidRecord,
)
from src.dendrogram.records import parse_record
from src.dendrogram.tree_structures import ClusterTree, node_height, render_node

__all__ = [
    "ClusterTree",
    "node_height",
    "render_node",
    "parse_record",
    "agglomerate",
    "find_closest_pair",
    "merge_closest_trees",
    "DendrogramError",
    "InvalidRecord",
    "EmptyInput",
    "DuplicateName",
    "DuplicateScore",
    "EmptyTree",
]
