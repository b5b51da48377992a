"""Command line interface for the organism dendrogram.

Reads an organisms file, builds the dendrogram and prints it as a single
nested-parenthesis line on standard output. Diagnostics go to standard
error through logging.

Usage examples:

  dendrogram organisms.txt
  dendrogram organisms.txt --log-level DEBUG
  dendrogram            (reads settings.organisms_file)
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.dendrogram.exceptions import DendrogramError
from src.dendrogram.tree_builder import TreeBuilder
from src.settings import settings


logger = logging.getLogger(__name__)


def parse_command_line_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the dendrogram command.

    Args:
        argv: Argument list. Defaults to sys.argv[1:].

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="dendrogram",
        description="Cluster scored organisms into a binary tree and print it.",
    )
    parser.add_argument(
        "organisms_file",
        nargs="?",
        type=Path,
        default=None,
        help=f"Organisms file with one '<name> <score>' record per line "
        f"(default: {settings.organisms_file})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Configure root logging to standard error."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the dendrogram command.

    Returns:
        Process exit code.
    """
    load_dotenv()
    args = parse_command_line_arguments(argv)

    log_level = args.log_level or ("DEBUG" if settings.verbose else settings.log_level)
    configure_logging(log_level)

    organisms_file = args.organisms_file or settings.organisms_file

    try:
        tree = TreeBuilder().build_from_file(organisms_file)
    except OSError as e:
        logger.error(f"ERROR: Invalid file. {e}")
        return 1
    except MemoryError:
        logger.error("ERROR: Failure to allocate memory while constructing tree.")
        return 1
    except DendrogramError as e:
        logger.error(f"ERROR: Unable to construct tree. {e}")
        return 1

    tree.write(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
