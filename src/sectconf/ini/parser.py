# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 14:50:09

"""Load and save config files.

The reader and writer work on line sequences only; this is where files get
opened. Saving re-reads the file first, so its comments and layout survive:

    >>> cfg = ConfigFileParser('app.ini')
    >>> values = cfg.read()
    >>> values['server.port'] = '8080'
    >>> cfg.write(values)
"""

from collections.abc import MutableMapping
from io import StringIO, TextIOBase
from os import PathLike
from os.path import exists
from warnings import warn
from typing import TypeVar

import chardet

from ..abstract import FileHandler
from .model import ConfigDict
from .reader import read_lines
from .writer import write_lines

# latin-1 maps every byte, so this one never fails.
FALLBACK_CODEC = 'latin-1'

M = TypeVar('M', bound=MutableMapping[str, str | None])


class ConfigFileParser(FileHandler[MutableMapping[str, str | None]]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        """Codec used for the last read, and for the next write."""
        return self._codec

    @staticmethod
    def readstream(
        buf: TextIOBase, instance: M | None = None
    ) -> M | ConfigDict:
        """Read an already decoded text stream (no file involved)."""
        return read_lines(buf, instance)

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            warn(f'cannot tell the encoding of `{self._fn}` for sure '
                 f'({codec["encoding"]}, {codec["confidence"]:.2f}), '
                 'trying utf-8.')
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
            self._codec = codec['encoding']
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode(FALLBACK_CODEC)
            self._codec = FALLBACK_CODEC
        return StringIO(buf)

    def _existing_lines(self) -> list[str]:
        if not exists(self._fn):
            return []
        try:
            # when encoding is None, `open()` would fallback to system default.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return fp.read().splitlines()
        except UnicodeDecodeError:
            return self._decode_file().read().splitlines()

    def read(
        self, instance: M | None = None
    ) -> M | ConfigDict:
        """Read the file into `instance` (or a new `ConfigDict`).

        A missing file reads as empty.
        """
        return read_lines(self._existing_lines(), instance)

    def write(self, instance: MutableMapping[str, str | None]) -> None:
        """Save `instance`, keeping whatever layout the file already has."""
        lines = write_lines(instance, self._existing_lines())
        with open(self._fn, 'w', encoding=self._codec) as fp:
            for i in lines:
                fp.write(i)
                fp.write('\n')

    def __str__(self) -> str:
        return 'config file: ' + super().__str__() + f' ({self._codec})'
