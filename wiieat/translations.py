"""Message catalogue lookup keyed by the hashpjw string hash."""

from __future__ import annotations

import re

HASHWORDBITS = 32
_MASK = (1 << HASHWORDBITS) - 1
_HIGH_NIBBLE = 0xF << (HASHWORDBITS - 4)

_SIMPLE_ESCAPES = {
    '"': '"',
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

_ESCAPE = re.compile(r"\\([0-7]{1,3}|.)?", re.DOTALL)


def hash_string(text: str) -> int:
    """Return the 32-bit hashpjw value of the text's UTF-8 bytes."""
    hval = 0
    for byte in text.encode("utf-8"):
        hval = ((hval << 4) + byte) & _MASK
        high = hval & _HIGH_NIBBLE
        if high:
            hval ^= high >> (HASHWORDBITS - 8)
            hval ^= high
    return hval


def _replace_escape(match: re.Match[str]) -> str:
    escaped = match.group(1)
    if escaped is None or escaped == "\\" or escaped[0] in "01234567":
        # A doubled backslash, an octal escape or a trailing backslash
        # leaves nothing behind.
        return ""
    return _SIMPLE_ESCAPES.get(escaped, escaped)


def expand_escape(text: str) -> str:
    """Expand the backslash escape sequences found in a message string.

    The usual C escapes become their control characters; an unknown escape
    keeps just the escaped character; a doubled backslash, an octal escape
    and a trailing backslash are dropped.
    """
    if "\\" not in text:
        return text
    return _ESCAPE.sub(_replace_escape, text)


class Catalog:
    """Translations stored by the hash of their message id."""

    def __init__(self) -> None:
        self._messages: dict[int, str | None] = {}

    def __len__(self) -> int:
        return len(self._messages)

    def set(self, msgid: str, msgstr: str | None) -> None:
        """Register a message id, with its translation if one is given."""
        key = hash_string(msgid)
        if key not in self._messages:
            self._messages[key] = None
        if msgstr is not None:
            self._messages[key] = expand_escape(msgstr)

    def gettext(self, msgid: str) -> str:
        """Return the translation of msgid, or msgid itself if there is none."""
        translated = self._messages.get(hash_string(msgid))
        return translated if translated is not None else msgid

    def clear(self) -> None:
        """Forget every message."""
        self._messages.clear()