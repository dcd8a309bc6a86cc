# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/11 21:02:47

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Binds a document type `T` to one file on disk.

    The config core only ever sees line sequences;
    opening, decoding and saving files happens in subclasses of this.
    """
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = fspath(filename)

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
