# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 00:21:56

"""
Flat config mapping, keyed by dotted paths.

Sections are not stored anywhere: `section.sub.key` simply lives
under the `section.sub` prefix. `SectionProxy` gives a dict-like view
of one prefix when that is handier.
"""

from collections.abc import MutableMapping
from typing import Any, Iterator, Mapping

from ..errors import ConfigKeyError
from .codec import to_config_string, try_parse_assign
from .ordering import join_key, sort_keys, split_key


class SectionProxy(MutableMapping[str, str | None]):
    """Keys directly under one prefix, addressed by their short name.

    Reads and writes go straight through to the owning `ConfigDict`.
    Keys of subsections are not part of the view.
    """

    def __init__(self, owner: 'ConfigDict', prefix: str) -> None:
        self._owner = owner
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def _full(self, key: str) -> str:
        if not key or '.' in key:
            raise ConfigKeyError(key)
        return join_key(self._prefix, key)

    def __getitem__(self, key: str) -> str | None:
        return self._owner[self._full(key)]

    def __setitem__(self, key: str, value: str | None) -> None:
        self._owner[self._full(key)] = value

    def __delitem__(self, key: str) -> None:
        del self._owner[self._full(key)]

    def __iter__(self) -> Iterator[str]:
        for i in list(self._owner):
            path = split_key(i)
            if path.prefix == self._prefix:
                yield path.key

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return f'[{self._prefix}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._prefix, len(self))

    def to_dict(self) -> dict[str, str | None]:
        return {k: self[k] for k in self}


class ConfigDict(MutableMapping[str, str | None]):
    """Dotted key -> raw string value.

    A `None` value is a tombstone: the writer drops that key
    (and its section, if nothing else is left in it).
    """

    def __init__(
        self, pairs: Mapping[str, str | None] | None = None
    ) -> None:
        self.__raw: dict[str, str | None] = {}
        if pairs:
            self.update(pairs)

    def __getitem__(self, key: str) -> str | None:
        return self.__raw[key]

    def __setitem__(self, key: str, value: str | None) -> None:
        if not key:
            raise ConfigKeyError(key)
        self.__raw[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return f'ConfigDict({self.__raw!r})'

    def live_items(self) -> Iterator[tuple[str, str]]:
        """Pairs that would actually get written."""
        for k, v in self.__raw.items():
            if v is not None:
                yield k, v

    def prefixes(self) -> list[str]:
        """Sections holding at least one live key, in write order."""
        ret: dict[str, None] = {}
        for i in sort_keys(split_key(k) for k, _ in self.live_items()):
            ret.setdefault(i.prefix, None)
        return list(ret)

    def section(self, prefix: str) -> SectionProxy:
        return SectionProxy(self, prefix)

    def tombstone(self, key: str) -> None:
        """Mark `key` for removal on the next write."""
        self[key] = None

    def get_value(self, key: str, value_type: Any, default: Any = None) -> Any:
        """Typed read. Missing keys, tombstones and values that
        don't convert all give `default`."""
        return try_parse_assign(self.__raw.get(key), value_type, default)

    def set_value(self, key: str, value: Any) -> None:
        """Typed write; `None` tombstones the key."""
        self[key] = to_config_string(value)
