"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from src.dendrogram.tree_structures import ClusterTree


@pytest.fixture
def organism_lines() -> list[str]:
    """Sample organism records for testing."""
    return [
        "Cat 10",
        "Dog 12",
        "Fish 50",
    ]


@pytest.fixture
def organism_trees(organism_lines: list[str]) -> list[ClusterTree]:
    """Single organism trees built from the sample records."""
    return [ClusterTree.from_record(line) for line in organism_lines]


@pytest.fixture
def organisms_file(tmp_path: Path, organism_lines: list[str]) -> Path:
    """Organisms file holding the sample records."""
    path = tmp_path / "organisms.txt"
    path.write_text("\n".join(organism_lines) + "\n", encoding="utf-8")
    return path
