# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/11 21:01:09

"""Read and write section-nested INI-like config files,
keeping comments and layout of existing files when saving.
"""

import logging

from .binding import (
    ConfigProperty, Configurable,
    deserialize_config, deserialize_property, serialize_config
)
from .errors import (
    ConfigBindingError, ConfigCoercionError, ConfigError, ConfigKeyError
)
from .ini import (
    ConfigDict, ConfigFileParser, SectionProxy,
    escape, unescape, parse_value, to_config_string,
    try_parse_value, try_parse_assign,
    read_lines, write_lines, write_config
)

__version__ = '0.1.0'

__all__ = [
    'ConfigDict', 'SectionProxy', 'ConfigFileParser',
    'read_lines', 'write_lines', 'write_config',
    'escape', 'unescape', 'parse_value', 'to_config_string',
    'try_parse_value', 'try_parse_assign',
    'ConfigProperty', 'Configurable',
    'serialize_config', 'deserialize_config', 'deserialize_property',
    'ConfigError', 'ConfigCoercionError', 'ConfigKeyError',
    'ConfigBindingError',
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
