# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/11 21:05:31

from .codec import (
    escape, unescape,
    parse_value, to_config_string, try_parse_value, try_parse_assign
)
from .model import ConfigDict, SectionProxy
from .ordering import KeyPath, compare_keys, join_key, sort_keys, split_key
from .parser import ConfigFileParser
from .reader import read_lines
from .writer import make_line, write_config, write_lines
