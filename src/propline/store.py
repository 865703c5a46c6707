"""LineStore: line-preserving editor for a properties file.

The store keeps two views of the file:

    lines   ordered LineEntry records, one per physical line, holding the
            text of comments/blanks and the formatting prefix of properties
    index   key -> value for every property, the single source of values

Rendering a property line concatenates its prefix with the current index
value, so untouched lines come back exactly as they were read:

    store = LineStore("app.properties")
    store.load()
    store.set_property("port", 8080)
    store.save()
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

from propline import fileio
from propline.models import COMMENT, DEFAULT_SEPARATOR, LineEntry, is_property_line, split_property

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from propline.config import PropConfig

log = logging.getLogger("propline.store")


class InvalidKeyError(ValueError):
    """Key contains the separator or a newline, or starts with the comment marker."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Invalid key {key!r}: a key should not contain the separator or a newline, "
            "and should not start with the comment marker"
        )
        self.key = key


class InvalidLineEntryError(ValueError):
    """Text would span more than one physical line."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid line entry {text!r}: an entry should not contain a newline")
        self.text = text


class LineStore:
    """Ordered lines plus a key -> value index for one properties file."""

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        separator: str = DEFAULT_SEPARATOR,
        comment: str = COMMENT,
        newline: str = os.linesep,
        charset: str | None = None,
    ) -> None:
        for name, marker in (("separator", separator), ("comment", comment), ("newline", newline)):
            if not marker:
                msg = f"{name} must not be empty"
                raise ValueError(msg)
        self.path = path
        self.separator = separator
        self.comment = comment
        self.newline = newline
        self.charset = charset
        self._lines: list[LineEntry] = []
        self._index: dict[str, str] = {}
        if path is not None:
            fileio.ensure_exists(path)

    @classmethod
    def from_config(cls, cfg: PropConfig) -> LineStore:
        return cls(
            cfg.file,
            separator=cfg.separator,
            comment=cfg.comment,
            newline=cfg.newline,
            charset=cfg.charset,
        )

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def check_key_valid(self, key: str) -> None:
        if self.separator in key or key.strip().startswith(self.comment) or self.newline in key:
            raise InvalidKeyError(key)

    def check_line_entry_valid(self, text: str) -> None:
        if self.newline in text:
            raise InvalidLineEntryError(text)

    def _check_index(self, index: int, *, allow_end: bool = False) -> None:
        upper = len(self._lines) if allow_end else len(self._lines) - 1
        if not 0 <= index <= upper:
            msg = f"line index {index} out of range (line count {len(self._lines)})"
            raise IndexError(msg)

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def line_count(self) -> int:
        return len(self._lines)

    def _render(self, entry: LineEntry) -> str:
        if entry.is_property(self.comment):
            # A property without an index value renders as its bare prefix
            return entry.raw_prefix + self._index.get(entry.key(self.separator), "")
        return entry.raw_prefix

    def get_line_entry(self, index: int) -> str:
        """Render one line with its current value substituted in."""
        self._check_index(index)
        return self._render(self._lines[index])

    def get_property(self, key: str) -> str | None:
        """Value for an already-trimmed key, or None."""
        return self._index.get(key)

    def has_property(self, key: str) -> bool:
        return key in self._index

    def get_property_entry_index(self, key: str) -> int:
        """Position of the first property line carrying key, or -1."""
        self.check_key_valid(key)
        return self._find_property_line(key.strip())

    def _find_property_line(self, key: str) -> int:
        for i, entry in enumerate(self._lines):
            if entry.is_property(self.comment) and entry.key(self.separator) == key:
                return i
        return -1

    def get_all_lines(self) -> list[str]:
        return [self._render(entry) for entry in self._lines]

    def get_full_text(self) -> str:
        """The file content to be written; every line, the last included, ends with newline."""
        return "".join(line + self.newline for line in self.get_all_lines())

    def keys(self) -> list[str]:
        """Keys of the property lines in file order, each listed once."""
        return list(dict.fromkeys(
            entry.key(self.separator) for entry in self._lines if entry.is_property(self.comment)
        ))

    def as_dict(self) -> dict[str, str]:
        """Copy of the key -> value index."""
        return dict(self._index)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _parse(self, text: str) -> tuple[LineEntry, tuple[str, str] | None]:
        """Build the LineEntry for text and the (key, value) to upsert, if any."""
        if not is_property_line(text, self.comment):
            return LineEntry(text), None
        prefix, value = split_property(text, self.separator)
        key = text.partition(self.separator)[0].strip()
        return LineEntry(prefix), (key, value)

    def add_line_entry(self, text: str = "", index: int | None = None) -> None:
        """Insert text as a new line at index (append when index is None)."""
        self.check_line_entry_valid(text)
        if index is None:
            index = len(self._lines)
        self._check_index(index, allow_end=True)
        entry, prop = self._parse(text)
        self._lines.insert(index, entry)
        if prop is not None:
            self._index[prop[0]] = prop[1]

    def modify_line_entry(self, index: int, text: str) -> None:
        """Replace the line at index in place."""
        self.check_line_entry_valid(text)
        self._check_index(index)
        entry, prop = self._parse(text)
        self._lines[index] = entry
        if prop is not None:
            self._index[prop[0]] = prop[1]

    def remove_line_entry_at(self, index: int, *, prune: bool = False) -> None:
        """Remove the line at index.

        The key stays in the index unless prune is set and no other property
        line still uses it.
        """
        self._check_index(index)
        entry = self._lines.pop(index)
        if prune and entry.is_property(self.comment):
            key = entry.key(self.separator)
            if self._find_property_line(key) == -1:
                self._index.pop(key, None)

    def set_property(self, key: str, value: Any) -> None:
        """Set key to value, appending a ``key<sep>`` line if the key has none yet."""
        value = str(value)
        self.check_key_valid(key)
        self.check_line_entry_valid(value)
        key = key.strip()
        self._index[key] = value.strip()
        if self._find_property_line(key) == -1:
            self._lines.append(LineEntry(key + self.separator))

    def update(self, values: Mapping[str, Any]) -> None:
        """set_property for every pair; nothing changes if any pair is invalid."""
        pairs = [(key, str(value)) for key, value in values.items()]
        for key, value in pairs:
            self.check_key_valid(key)
            self.check_line_entry_valid(value)
        for key, value in pairs:
            self.set_property(key, value)

    def clear_all(self) -> None:
        self._lines.clear()
        self._index.clear()

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def _require_path(self) -> Path | str:
        if self.path is None:
            msg = "LineStore has no file path"
            raise ValueError(msg)
        return self.path

    def load(self) -> None:
        """Replace the store's content with the file's.

        The store is cleared first, so a failed read leaves it empty.
        """
        path = self._require_path()
        self.clear_all()
        for line in fileio.read_all_lines(path, self.charset):
            self.add_line_entry(line)
        log.debug("loaded %d lines, %d properties from %s", len(self._lines), len(self._index), path)

    def save(self) -> None:
        path = self._require_path()
        fileio.write_all(path, self.get_full_text(), self.charset)
        log.debug("saved %d lines to %s", len(self._lines), path)
