"""Tests for sectconf.binding."""

from enum import Enum
from textwrap import dedent

import pytest

from sectconf.binding import (
    ConfigProperty, Configurable,
    deserialize_config, deserialize_property, serialize_config
)
from sectconf.errors import ConfigBindingError


class Numeros(Enum):
    Uno = 0
    Dos = 1
    Tres = 2
    Quatro = 3


class Settings(Configurable):
    config_properties = (
        ConfigProperty('double_value', float, 'DoubleValue'),
        ConfigProperty('enum_value', Numeros, 'enums.numeros'),
        ConfigProperty('integers', list[int], 'Integers'),
        ConfigProperty('title', str),
    )

    def __init__(self, double_value=0.0, enum_value=Numeros.Uno,
                 integers=None, title=None):
        self.double_value = double_value
        self.enum_value = enum_value
        self.integers = integers
        self.title = title


class TestConfigTable:
    def test_paths(self):
        table = Settings.config_table()
        assert list(table) == [
            'DoubleValue', 'enums.numeros', 'Integers', 'title'
        ]
        assert table['title'].attr == 'title'

    def test_duplicate_path(self):
        class Broken(Configurable):
            config_properties = (
                ConfigProperty('a', int, 'x'),
                ConfigProperty('x', int),
            )

        with pytest.raises(ConfigBindingError):
            Broken.config_table()


class TestSerialize:
    def test_simple_serialize(self):
        settings = Settings(2.0, Numeros.Quatro, [1, 2, 3])
        assert serialize_config(settings, newline='\n') == dedent("""\
            DoubleValue = 2
            Integers = 1;2;3

            [enums]
            numeros = Quatro
            """)

    def test_strings_are_escaped(self):
        settings = Settings(title='"final\nvalue"')
        text = serialize_config(settings, newline='\n')
        assert 'title = "\\"final\\nvalue\\""\n' in text

    def test_over_existing_lines(self):
        existing = ['; saved settings', 'Integers = 9', 'Obsolete = 1']
        settings = Settings(1.5, Numeros.Dos, [4])
        assert serialize_config(settings, existing, newline='\n') == dedent(
            """\
            ; saved settings
            Integers = 4
            DoubleValue = 1.5

            [enums]
            numeros = Dos
            """)

    def test_missing_attribute(self):
        class Window(Configurable):
            config_properties = (ConfigProperty('widht', int, 'width'),)

            def __init__(self):
                self.width = 640

        with pytest.raises(ConfigBindingError, match='widht'):
            serialize_config(Window())


class TestDeserialize:
    def test_simple_deserialize(self):
        lines = dedent("""
            DoubleValue = 2
            Integers = 1;2;3

            [enums]
            numeros = Quatro
            """).splitlines()
        settings = Settings()
        deserialize_config(settings, lines)
        assert settings.double_value == 2.0
        assert settings.integers == [1, 2, 3]
        assert settings.enum_value is Numeros.Quatro

    def test_deserialize_property(self):
        settings = Settings()
        assert settings.double_value == 0.0
        assert settings.enum_value is Numeros.Uno
        assert deserialize_property(settings, 'DoubleValue', '2.0')
        assert deserialize_property(settings, 'enums.numeros', 'Quatro')
        assert settings.double_value == 2.0
        assert settings.enum_value is Numeros.Quatro

    def test_bad_value_leaves_property_alone(self):
        settings = Settings(double_value=3.0)
        assert not deserialize_property(settings, 'DoubleValue', 'lots')
        assert settings.double_value == 3.0

    def test_unknown_path_is_ignored(self):
        settings = Settings()
        assert not deserialize_property(settings, 'nope', '1')
        assert not hasattr(settings, 'nope')

    def test_round_trip(self):
        before = Settings(0.25, Numeros.Tres, [7, 8], 'tab\there')
        after = Settings()
        deserialize_config(after, serialize_config(before).splitlines())
        assert vars(after) == vars(before)
