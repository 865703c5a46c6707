"""Line model for properties files.

A properties file is an ordered list of physical lines. Each line is either a
property line (``key<sep>value``) or something that renders verbatim (blank
lines and comments). LineEntry keeps only the formatting part of a property
line; the value itself lives in the store's index.
"""

from __future__ import annotations

from dataclasses import dataclass

COMMENT = "#"
DEFAULT_SEPARATOR = "="


def is_property_line(line: str, comment: str = COMMENT) -> bool:
    """True for non-blank lines that do not start with the comment marker."""
    trimmed = line.strip()
    return len(trimmed) > 0 and not trimmed.startswith(comment)


def leading_whitespace(text: str) -> str:
    """Return the whitespace run at the start of text ("" if text is all whitespace)."""
    for i, ch in enumerate(text):
        if not ch.isspace():
            return text[:i]
    return ""


def split_property(text: str, separator: str) -> tuple[str, str]:
    """Split a property line into (template prefix, trimmed value).

    The prefix keeps the key, its surrounding whitespace, the separator and the
    whitespace right after it, so ``"key  =   value"`` gives
    ``("key  =   ", "value")``. A line without separator is all key.
    """
    key_part, sep, rest = text.partition(separator)
    if not sep:
        return key_part, ""
    return key_part + separator + leading_whitespace(rest), rest.strip()


@dataclass
class LineEntry:
    """One physical line: the rendering template of a property, or the raw text."""

    raw_prefix: str = ""

    def is_property(self, comment: str = COMMENT) -> bool:
        return is_property_line(self.raw_prefix, comment)

    def key(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Key of a property line; meaningless for comments and blanks."""
        s = self.raw_prefix.strip()
        if separator and s.endswith(separator):
            s = s[: -len(separator)].strip()
        return s
