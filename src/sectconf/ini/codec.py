# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2026/10/11 22:48:30

"""Value escaping and typed coercion.

Config values live in the mapping as plain (decoded) strings.
`escape()`/`unescape()` only matter at the text boundary,
while `parse_value()`/`to_config_string()` convert between those strings
and typed values:

    - enum flags are joined with `|`, e.g. `IsAlpha|IsBeta`;
    - arrays (`list[T]`, `tuple[T, ...]`) are joined with `;`;
    - any class with a `parse(str)` method (and, optionally,
      a `to_config_string()` method) plugs into the same machinery.
"""

import enum
import operator
from functools import reduce
from typing import Any, Callable, get_args, get_origin

from ..errors import ConfigCoercionError

__all__ = [
    'escape', 'unescape',
    'parse_value', 'to_config_string', 'try_parse_value', 'try_parse_assign'
]

ARRAY_SEPARATOR = ';'
FLAG_SEPARATOR = '|'
QUOTES = ('\'', '"')

_ESCAPES = {
    '\f': 'f', '\n': 'n', '\r': 'r', '\t': 't', '\v': 'v',
    '\\': '\\', '"': '"'
}
_UNESCAPES = {v: k for k, v in _ESCAPES.items()}

_TRUE = ('true', '1')
_FALSE = ('false', '0')


def _is_quoted(raw: str) -> bool:
    return len(raw) > 1 and raw[0] == raw[-1] and raw[0] in QUOTES


def escape(raw: str | None) -> str | None:
    """Make `raw` safe to put after `key = `.

    Plain values come back untouched. Anything that would not survive
    the trip through `unescape()` and the reader's trimming gets its
    control characters escaped and is wrapped in double quotes.
    """
    if raw is None:
        return None
    escaped = ''.join(
        '\\' + _ESCAPES[c] if c in _ESCAPES else c for c in raw)
    # escaping only ever lengthens, so equal means nothing was escaped.
    if escaped == raw and not _is_quoted(raw) and raw == raw.strip():
        return raw
    return f'"{escaped}"'


def unescape(raw: str | None) -> str | None:
    """Decode a value as written in the file.

    Only values wrapped in a matching pair of `'` or `"` are decoded;
    unknown escapes like `\\q` are dropped.
    """
    if raw is None or len(raw) <= 1 or not _is_quoted(raw):
        return raw

    ret: list[str] = []
    escaping = False
    for c in raw[1:-1]:
        if escaping:
            escaping = False
            if c in _UNESCAPES:
                ret.append(_UNESCAPES[c])
        elif c == '\\':
            escaping = True
        else:
            ret.append(c)
    return ''.join(ret)


def _parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(text)


def _array_parser(
    origin: type, args: tuple[Any, ...]
) -> Callable[[str], Any] | None:
    if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
        return None  # only homogeneous `tuple[T, ...]`
    element_parser = _get_parser(args[0] if args else str)
    if element_parser is None:
        return None

    def parser(text: str) -> Any:
        if not text:
            return origin()
        return origin(
            element_parser(i) for i in text.split(ARRAY_SEPARATOR))
    return parser


def _get_parser(value_type: Any) -> Callable[[str], Any] | None:
    origin = get_origin(value_type)
    if origin in (list, tuple):
        return _array_parser(origin, get_args(value_type))
    if value_type in (list, tuple):
        return _array_parser(value_type, ())
    if not isinstance(value_type, type):
        return None

    if value_type is str:
        return str
    if value_type is bool:
        return _parse_bool
    if issubclass(value_type, enum.Flag):
        return lambda text: reduce(operator.or_, (
            value_type[i.strip()] for i in text.split(FLAG_SEPARATOR)))
    if issubclass(value_type, enum.Enum):
        return lambda text: value_type[text.strip()]

    parse = getattr(value_type, 'parse', None)
    if callable(parse):
        return parse
    # int, float, Decimal, Path ... all take a string in the constructor.
    return value_type


def parse_value(text: str | None, value_type: Any) -> Any:
    """Convert a raw config string into `value_type`.

    Raises:
        ConfigCoercionError: `text` doesn't convert,
            or there's no way to build a `value_type` from a string.
    """
    if text is None:
        raise ConfigCoercionError(text, value_type, 'no value')
    parser = _get_parser(value_type)
    if parser is None:
        raise ConfigCoercionError(text, value_type, 'unsupported type')
    try:
        return parser(text)
    except ConfigCoercionError:
        raise
    except (ValueError, TypeError, KeyError, ArithmeticError) as e:
        raise ConfigCoercionError(text, value_type, str(e)) from e


def try_parse_value(text: str | None, value_type: Any) -> tuple[bool, Any]:
    """Like `parse_value()`, but reports failure as `(False, None)`."""
    try:
        return True, parse_value(text, value_type)
    except ConfigCoercionError:
        return False, None


def try_parse_assign(text: str | None, value_type: Any, current: Any) -> Any:
    """Parse `text`, or hand back `current` if that fails."""
    ok, result = try_parse_value(text, value_type)
    return result if ok else current


def _enum_to_string(value: enum.Enum) -> str:
    members = type(value).__members__
    if value.name is not None and value.name in members:
        return value.name
    # flag combination: list every non-zero member it contains.
    return FLAG_SEPARATOR.join(
        i.name for i in type(value) if i.value and i in value)


def to_config_string(value: Any) -> str | None:
    """Convert a typed value into its (unescaped) config string."""
    if value is None:
        return None
    if isinstance(value, enum.Enum):
        return _enum_to_string(value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith('.0') else text
    if isinstance(value, (list, tuple)):
        if any(i is None for i in value):
            raise ConfigCoercionError(
                None, type(value), 'array element is None')
        return ARRAY_SEPARATOR.join(to_config_string(i) for i in value)

    to_string = getattr(value, 'to_config_string', None)
    if callable(to_string):
        return to_string()
    return str(value)
