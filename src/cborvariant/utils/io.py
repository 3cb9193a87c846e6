"""File loading helper."""

from __future__ import annotations

import logging
import os

from ..exceptions import FileReadError

logger = logging.getLogger(__name__)


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Read a whole file into memory.

    Args:
        path: File to read

    Returns:
        File contents

    Raises:
        FileReadError: If the file cannot be opened or read

    Example:
        >>> value = decode(read_file("fixtures/sample.cbor"))
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileReadError(f"Cannot read {os.fspath(path)}: {e.strerror or e}") from e

    logger.debug("Read %d bytes from %s", len(data), os.fspath(path))
    return data
