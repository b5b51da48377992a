"""Parsing of single organism records.

A record is one line of text of the form ``<name><whitespace><score>``. The
name is everything before the first whitespace character. The score is the
first whitespace-delimited token of the rest of the line; further numeric
tokens are ignored, while any non-numeric trailing text rejects the record.
"""

import math
import re

from src.dendrogram.exceptions import InvalidRecord

_NAME_SEPARATOR = re.compile(r"\s")
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_record(record: str) -> tuple[str, float]:
    """Split a record into its name and score.

    Args:
        record: One line of text. A trailing line terminator is ignored.

    Returns:
        Tuple of (name, score).

    Raises:
        InvalidRecord: If the name is empty, the score is missing, not a
            finite number, negative, or followed by non-numeric text.
    """
    record = record.rstrip("\r\n")
    parts = _NAME_SEPARATOR.split(record, maxsplit=1)
    name = parts[0]
    tokens = parts[1].split() if len(parts) > 1 else []

    if not name:
        raise InvalidRecord(record, "has empty name field")
    if not tokens:
        raise InvalidRecord(record, "has empty score")
    if any(_DECIMAL.fullmatch(token) is None for token in tokens):
        raise InvalidRecord(record, "has invalid score")

    score = float(tokens[0])
    if not math.isfinite(score):
        raise InvalidRecord(record, "has invalid score")
    if score < 0:
        raise InvalidRecord(record, "has invalid negative score")

    return name, score
