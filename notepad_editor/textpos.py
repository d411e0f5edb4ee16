"""Conversions between byte, character and UTF-16 positions in text."""

from __future__ import annotations

import os
from pathlib import Path


def split_lines(text: str) -> list[str]:
    """Split text into lines; a trailing newline yields a final empty line."""
    parts = text.split("\n")
    lines = [part[:-1] if part.endswith("\r") else part for part in parts[:-1]]
    lines.append(parts[-1])
    return lines


def split_at_char_col(s: str, col: int) -> tuple[str, str]:
    """Split a string at a character column, clamped to its length."""
    return s[:col], s[col:]


def pixel_to_col(line: str, pixel_x: float, ascii_w: float) -> int:
    """Map a horizontal pixel position to a character column.

    Characters above U+2FFF are treated as double width.
    """
    width = 0.0
    col = 0
    for ch in line:
        char_w = ascii_w * 2.0 if ord(ch) > 0x2FFF else ascii_w
        if width + char_w / 2.0 > pixel_x:
            return col
        width += char_w
        col += 1
    return col


def _utf16_len(ch: str) -> int:
    return 2 if ord(ch) > 0xFFFF else 1


def byte_to_utf16(text: str, byte_pos: int) -> int:
    """Convert a UTF-8 byte offset into a UTF-16 code unit offset."""
    encoded = text.encode("utf-8")
    if not 0 <= byte_pos <= len(encoded):
        raise ValueError(f"byte position {byte_pos} out of range")
    try:
        prefix = encoded[:byte_pos].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"byte position {byte_pos} is not on a character boundary") from exc
    return sum(_utf16_len(ch) for ch in prefix)


def utf16_to_byte(text: str, utf16_pos: int) -> int:
    """Convert a UTF-16 code unit offset into a UTF-8 byte offset."""
    count = 0
    byte_pos = 0
    for ch in text:
        if count >= utf16_pos:
            return byte_pos
        count += _utf16_len(ch)
        byte_pos += len(ch.encode("utf-8"))
    return byte_pos


def char_idx_to_byte(s: str, char_idx: int) -> int:
    """Convert a character index into a UTF-8 byte offset, clamped to the end."""
    return len(s[:char_idx].encode("utf-8"))


def parse_tags_from_input(text: str) -> set[str]:
    """Collect ``#tag`` tokens: a ``#`` followed by one or more non-space characters."""
    return {token[1:] for token in text.split() if token.startswith("#") and len(token) > 1}


def resolve_image_path(note_path: str | os.PathLike[str] | None, url: str) -> Path:
    """Resolve an image reference against the note that contains it.

    Absolute paths are kept, ``~/`` expands to the home directory and
    relative paths are taken from the note's directory.
    """
    url = url.strip()
    if url.startswith("/"):
        return Path(url)
    if url.startswith("~/"):
        rest = url[2:]
        home = os.environ.get("HOME")
        if home is not None:
            return Path(home) / rest
        return Path(f"/{rest}")
    if note_path is not None:
        note = Path(note_path)
        if note.parent != note:
            return note.parent / url
    return Path(url)