"""Reading and writing of whole files as bytes."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path


def read(path: str | os.PathLike[str]) -> bytes:
    """Return the file's bytes without a single trailing newline.

    Raises ``ValueError`` for an empty file.
    """
    data = Path(path).read_bytes()
    if not data:
        raise ValueError(f"{os.fspath(path)} is empty")
    return data[:-1] if data.endswith(b"\n") else data


def write(path: str | os.PathLike[str], parts: Iterable[bytes]) -> None:
    """Write the concatenation of ``parts`` to the file, replacing it."""
    Path(path).write_bytes(b"".join(parts))