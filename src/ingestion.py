"""Organism ingestion module.

This module handles reading organism records for the dendrogram pipeline.
Each non-blank line becomes a single node ClusterTree; records that cannot
be parsed are logged and skipped.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from src.dendrogram.exceptions import InvalidRecord
from src.dendrogram.tree_structures import ClusterTree
from src.settings import settings


logger = logging.getLogger(__name__)


class OrganismIngestion:
    """Handles loading organism records into single node trees."""

    def __init__(self, encoding: str | None = None) -> None:
        """Initialize the organism ingestion pipeline.

        Args:
            encoding: Text encoding of organism files. Defaults to
                settings.file_encoding.
        """
        self.encoding = encoding or settings.file_encoding

    def parse_lines(self, lines: Iterable[str]) -> list[ClusterTree]:
        """Turn organism records into single node trees.

        Args:
            lines: Iterable of ``<name> <score>`` records.

        Returns:
            One tree per valid record, in input order.
        """
        trees: list[ClusterTree] = []
        skipped = 0

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                trees.append(ClusterTree.from_record(line))
            except InvalidRecord as e:
                skipped += 1
                logger.warning(f"Invalid organism on line {line_number}. {e}")

        logger.info(f"Parsed {len(trees)} organisms ({skipped} skipped)")
        return trees

    def load_file(self, path: str | Path) -> list[ClusterTree]:
        """Load an organisms file.

        Args:
            path: Path to the organisms file.

        Returns:
            One tree per valid record in the file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Organisms file not found: {path}")

        logger.info(f"Loading organisms: {path}")
        with path.open(encoding=self.encoding) as handle:
            return self.parse_lines(handle)
