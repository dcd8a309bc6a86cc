# -*- encoding: utf-8 -*-
# @File   : binding.py
# @Time   : 2026/10/13 20:12:44

"""Map plain objects to config files through an explicit property table.

    class Window(Configurable):
        config_properties = (
            ConfigProperty('width', int),
            ConfigProperty('mode', DisplayMode, 'display.mode'),
        )

    text = serialize_config(window, old_lines)
    deserialize_config(window, text.splitlines())
"""

import logging
import os
from typing import Any, ClassVar, Iterable, NamedTuple, Sequence

from .errors import ConfigBindingError
from .ini.codec import to_config_string, try_parse_value
from .ini.reader import read_lines
from .ini.writer import write_config


class ConfigProperty(NamedTuple):
    attr: str
    value_type: Any
    path: str | None = None  # dotted config path, `attr` if not given

    @property
    def config_path(self) -> str:
        return self.path or self.attr


class Configurable:
    config_properties: ClassVar[Sequence[ConfigProperty]] = ()

    @classmethod
    def config_table(cls) -> dict[str, ConfigProperty]:
        """Dotted path -> property.

        Raises:
            ConfigBindingError: two properties claim the same path.
        """
        ret: dict[str, ConfigProperty] = {}
        for i in cls.config_properties:
            if i.config_path in ret:
                raise ConfigBindingError(
                    f'{cls.__name__}: `{ret[i.config_path].attr}` and '
                    f'`{i.attr}` both map to "{i.config_path}"')
            ret[i.config_path] = i
        return ret


def serialize_config(
    obj: Configurable,
    existing_lines: Iterable[str] = (), *,
    newline: str = os.linesep
) -> str:
    """Write the bound properties of `obj` over `existing_lines`.

    Properties that are `None` are left out of the output. A property
    naming an attribute `obj` doesn't have raises `ConfigBindingError`.
    """
    values = {}
    for path, prop in obj.config_table().items():
        try:
            value = getattr(obj, prop.attr)
        except AttributeError as e:
            raise ConfigBindingError(
                f'{type(obj).__name__} has no attribute `{prop.attr}` '
                f'(bound to "{path}")') from e
        values[path] = to_config_string(value)
    return write_config(values, existing_lines, newline=newline)


def deserialize_property(obj: Configurable, key: str, value: str) -> bool:
    """Set the property bound to `key` from its raw config `value`.

    Returns `False`, leaving `obj` as it was, if no property is bound to
    `key` or `value` doesn't convert.
    """
    prop = obj.config_table().get(key)
    if prop is None:
        return False
    ok, result = try_parse_value(value, prop.value_type)
    if not ok:
        logging.debug(f'{key} = {value!r} ignored, not a {prop.value_type}')
        return False
    setattr(obj, prop.attr, result)
    return True


def deserialize_config(obj: Configurable, lines: Iterable[str]) -> None:
    for key, value in read_lines(lines, {}).items():
        deserialize_property(obj, key, value)
