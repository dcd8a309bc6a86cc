# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2026/10/12 01:07:40

"""Line classification and the config reader.

    ; comment           # also a comment
    root = value

    [section.sub]
    key = "quoted\\tvalue"
"""

import logging
from collections.abc import MutableMapping
from typing import Iterable, TypeVar

from .codec import unescape
from .model import ConfigDict

COMMENT_MARKS = (';', '#')

M = TypeVar('M', bound=MutableMapping[str, str | None])


def is_blank(line: str) -> bool:
    return not line.strip()


def is_ignorable(line: str) -> bool:
    return is_blank(line) or line.startswith(COMMENT_MARKS)


def is_header(line: str) -> bool:
    return line.startswith('[') and line.endswith(']')


def header_name(line: str) -> str:
    return line[1:-1]


def split_pair(line: str) -> tuple[str, str | None]:
    """`key = value` -> `('key', 'value')`; without `=` the value is None."""
    key, sep, value = line.partition('=')
    return key.strip(), (value.strip() if sep else None)


def read_lines(
    lines: Iterable[str], mapping: M | None = None
) -> M | ConfigDict:
    """Parse `lines` into `mapping` (a new `ConfigDict` if not given).

    Existing keys of `mapping` are kept and overridden where the lines
    set them again, so several files may be read into one mapping.
    Lines that make no sense are skipped, nothing is raised.
    """
    ret = ConfigDict() if mapping is None else mapping
    prefix = ''
    for lineno, line in enumerate(lines, 1):
        line = line.rstrip('\r\n')
        if is_ignorable(line):
            continue
        if is_header(line):
            prefix = header_name(line) + '.'
            continue

        key, value = split_pair(line)
        if value is None or not key:
            logging.debug(f'line {lineno} is not a key/value pair: {line!r}')
            continue
        ret[prefix + key] = unescape(value)
    return ret
