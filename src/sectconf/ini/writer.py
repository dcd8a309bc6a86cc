# -*- encoding: utf-8 -*-
# @File   : writer.py
# @Time   : 2026/10/12 02:33:18

"""Structure preserving config writer.

Given the mapping to save and the lines of the file being replaced,
the writer walks the old lines once and patches them:

    - comments and blank lines are kept (never two blank lines in a row);
      a comment is never collapsed, even right after a blank line;
    - known keys stay where they are, carrying the mapping's current value;
    - keys gone from the mapping (or tombstoned) are dropped,
      and so are section headers left without any key;
    - keys new to an existing section go after that section's last key;
    - keys of brand new sections are appended at the end, sorted.

Writing the same mapping over its own output gives the same lines back.
"""

import logging
import os
from collections.abc import Mapping
from typing import Iterable

from .codec import escape
from .ordering import KeyPath, join_key, sort_keys, split_key
from .reader import header_name, is_blank, is_header, is_ignorable, split_pair

__all__ = ['make_line', 'write_lines', 'write_config']


def make_line(key: str, value: str | None) -> str:
    return f'{key} = {escape(value)}'


class _MergeWriter:
    def __init__(self, mapping: Mapping[str, str | None]) -> None:
        self._values = {k: v for k, v in mapping.items() if v is not None}
        self._sorted = sort_keys(split_key(k) for k in self._values)
        self._live_prefixes = {i.prefix for i in self._sorted}
        self._written: set[str] = set()
        self._lines: list[str] = []
        self._prefix = ''
        # index right after the last key (or header) line of this section.
        self._anchor: int | None = None

    def _last_is_blank(self) -> bool:
        return bool(self._lines) and is_blank(self._lines[-1])

    def _content_end(self) -> int:
        at = len(self._lines)
        while at > 0 and is_blank(self._lines[at - 1]):
            at -= 1
        return at

    def _line_for(self, path: KeyPath) -> str:
        self._written.add(path.full)
        return make_line(path.key, self._values[path.full])

    def _flush_section(self, *, header_follows: bool) -> None:
        """Insert unwritten keys of the section being left."""
        extra = [
            self._line_for(i) for i in self._sorted
            if i.prefix == self._prefix and i.full not in self._written
        ]
        if not extra:
            return

        at = self._content_end() if self._anchor is None else self._anchor
        self._lines[at:at] = extra
        after = at + len(extra)
        if after < len(self._lines):
            if not is_blank(self._lines[after]):
                self._lines.insert(after, '')
        elif header_follows:
            self._lines.append('')

    def _enter_section(self, line: str) -> None:
        name = header_name(line)
        keep = name in self._live_prefixes
        self._flush_section(header_follows=keep)
        self._prefix = name
        self._anchor = None
        if not keep:
            logging.debug(f'dropping empty section {line}')
            return
        self._lines.append(line)
        self._anchor = len(self._lines)

    def _update_pair(self, line: str) -> None:
        key, _ = split_pair(line)
        full = join_key(self._prefix, key)
        if split_key(full).prefix != self._prefix:
            # `b.c = 1` under `[a]` is `a.b.c`: it gets written in `[a.b]`.
            logging.debug(f'moving {line!r} out of [{self._prefix}]')
            return
        if full not in self._values or full in self._written:
            logging.debug(f'dropping stale line {line!r}')
            return
        self._lines.append(self._line_for(KeyPath(self._prefix, key)))
        self._anchor = len(self._lines)

    def merge(self, existing_lines: Iterable[str]) -> None:
        for line in existing_lines:
            line = line.rstrip('\r\n')
            if is_ignorable(line):
                if not (is_blank(line) and self._last_is_blank()):
                    self._lines.append(line)
            elif is_header(line):
                self._enter_section(line)
            else:
                self._update_pair(line)
        self._flush_section(header_follows=False)

    def append_remaining(self) -> None:
        for i in self._sorted:
            if i.full in self._written:
                continue
            if i.prefix != self._prefix:
                if self._lines and not self._last_is_blank():
                    self._lines.append('')
                self._lines.append(f'[{i.prefix}]')
                self._prefix = i.prefix
            self._lines.append(self._line_for(i))

    @property
    def lines(self) -> list[str]:
        return self._lines


def write_lines(
    mapping: Mapping[str, str | None],
    existing_lines: Iterable[str] = ()
) -> list[str]:
    """Render `mapping` as config lines, reusing the layout of
    `existing_lines` (usually the file being overwritten) where possible.

    Keys mapped to `None` are never written.
    """
    writer = _MergeWriter(mapping)
    writer.merge(existing_lines)
    writer.append_remaining()
    return writer.lines


def write_config(
    mapping: Mapping[str, str | None],
    existing_lines: Iterable[str] = (), *,
    newline: str = os.linesep
) -> str:
    """`write_lines()`, joined into text. Every line ends with `newline`."""
    return ''.join(
        f'{i}{newline}' for i in write_lines(mapping, existing_lines))
