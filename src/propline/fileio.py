"""Whole-file I/O for properties files.

Every call opens, fully reads or writes, and closes its file; no handle
outlives a single call. Errors surface as OSError.
"""

from __future__ import annotations

from pathlib import Path


def read_all_lines(path: Path | str, charset: str | None = None) -> list[str]:
    """Read a file as a list of lines without terminators.

    \\n, \\r\\n and \\r all end a line. A trailing terminator does not add an
    empty last line, and an empty file has no lines.
    """
    # Universal newline mode folds \r\n and \r into \n.
    with Path(path).open(encoding=charset, newline=None) as f:
        content = f.read()
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_all(path: Path | str, text: str, charset: str | None = None) -> None:
    """Replace the file's content with text, written byte-for-byte as given.

    The path itself is opened, so symlinks are followed and the file keeps
    its owner and mode.
    """
    with Path(path).open("w", encoding=charset, newline="") as f:
        f.write(text)


def ensure_exists(path: Path | str) -> None:
    """Create an empty file at path unless one is already there."""
    path = Path(path)
    if not path.exists():
        path.touch()
