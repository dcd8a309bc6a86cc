# -*- encoding: utf-8 -*-
# @File   : ordering.py
# @Time   : 2026/10/11 22:15:03

"""Dotted key helpers and the section-aware key order used by the writer.

Sorted keys group by section, sections go depth-first with a parent's
own keys before its subsections, and keys inside a section are alphabetical:

    ('', 'root') < ('a', 'x') < ('a', 'y') < ('a.b', 'x') < ('b', 'x')
"""

from functools import cmp_to_key
from typing import Iterable, NamedTuple


class KeyPath(NamedTuple):
    """A dotted key cut at its last dot."""
    prefix: str  # '' for the root section
    key: str

    @property
    def full(self) -> str:
        return join_key(self.prefix, self.key)


def split_key(full_key: str) -> KeyPath:
    prefix, _, key = full_key.rpartition('.')
    return KeyPath(prefix, key)


def join_key(prefix: str, key: str) -> str:
    return f'{prefix}.{key}' if prefix else key


def _cmp(left: object, right: object) -> int:
    return (left > right) - (left < right)


def compare_keys(left: KeyPath, right: KeyPath) -> int:
    """Three-way comparison of two `KeyPath`s.

    Prefixes are compared segment by segment, only over the segments both
    have; on a tie the prefix with fewer segments wins, then the short key.
    """
    lparts, rparts = left.prefix.split('.'), right.prefix.split('.')
    for lseg, rseg in zip(lparts, rparts):
        if lseg != rseg:
            return _cmp(lseg, rseg)
    return _cmp(len(lparts), len(rparts)) or _cmp(left.key, right.key)


def sort_keys(paths: Iterable[KeyPath]) -> list[KeyPath]:
    return sorted(paths, key=cmp_to_key(compare_keys))
