"""Readers for the plain-text file and node lists."""

import logging
import os
from typing import Iterable, List, Tuple

from nodefit import config
from nodefit.models import File, Node

logger = logging.getLogger(__name__)


class InputFormatError(ValueError):
    """A line of an input list is not a valid '<name> <size>' record."""

    def __init__(self, source: str, line_number: int, line: str, reason: str):
        self.source = source
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"{source}:{line_number}: {reason}: {line.strip()!r}")


def parse_records(lines: Iterable[str], source: str = "<input>") -> List[Tuple[str, int]]:
    """
    Parse '<name> <size>' records.

    Blank lines and lines starting with the comment prefix are skipped. Any
    other line must hold exactly two tokens, the second a non-negative
    integer.
    """
    records = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(config.COMMENT_PREFIX):
            continue

        tokens = stripped.split()
        if len(tokens) != 2:
            raise InputFormatError(source, line_number, line, f"expected '<name> <size>', got {len(tokens)} tokens")

        name, size_text = tokens
        try:
            size = int(size_text)
        except ValueError:
            raise InputFormatError(source, line_number, line, "size is not an integer") from None
        if size < 0:
            raise InputFormatError(source, line_number, line, "size is negative")

        records.append((name, size))
    return records


def _read_records(path: str) -> List[Tuple[str, int]]:
    with open(path, "r") as f:
        records = parse_records(f, source=os.fspath(path))
    logger.debug(f"Read {len(records)} records from {path}")
    return records


def load_files(path: str) -> List[File]:
    return [File(name, size) for name, size in _read_records(path)]


def load_nodes(path: str) -> List[Node]:
    return [Node(name, size) for name, size in _read_records(path)]
