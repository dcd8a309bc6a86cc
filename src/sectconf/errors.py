# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/11 21:40:12

"""Exceptions raised by `sectconf`.

Parsing itself never raises: malformed lines are just skipped.
These are for the strict entry points (`parse_value`, binding tables, keys).
"""

from typing import Any


class ConfigError(Exception):
    """Base of everything `sectconf` raises on purpose."""
    pass


class ConfigCoercionError(ConfigError, ValueError):
    """A raw config string could not be converted to the requested type."""

    def __init__(self, text: str | None, value_type: Any,
                 reason: str | None = None) -> None:
        self.text = text
        self.value_type = value_type
        name = getattr(value_type, '__name__', repr(value_type))
        msg = f'cannot convert {text!r} to {name}'
        if reason:
            msg += f': {reason}'
        super().__init__(msg)


class ConfigKeyError(ConfigError, KeyError):
    """Dotted keys (and short keys of a section) must be non-empty."""
    pass


class ConfigBindingError(ConfigError):
    """A binding table maps two properties onto the same dotted path."""
    pass
