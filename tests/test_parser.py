"""Tests for sectconf.ini.parser, the file side of reading and writing."""

from io import StringIO
from textwrap import dedent

from sectconf.ini.model import ConfigDict
from sectconf.ini.parser import ConfigFileParser


def _write_text(path, text: str) -> None:
    path.write_text(dedent(text).lstrip(), encoding='utf-8')


class TestRead:
    def test_missing_file_reads_empty(self, tmp_path):
        values = ConfigFileParser(tmp_path / 'nope.ini', 'utf-8').read()
        assert isinstance(values, ConfigDict)
        assert len(values) == 0

    def test_read(self, tmp_path):
        path = tmp_path / 'app.ini'
        _write_text(path, """
            ; comment
            name = demo

            [server]
            port = 8080
            """)
        values = ConfigFileParser(path, 'utf-8').read()
        assert dict(values) == {'name': 'demo', 'server.port': '8080'}

    def test_read_several_files_into_one_mapping(self, tmp_path):
        base, local = tmp_path / 'base.ini', tmp_path / 'local.ini'
        _write_text(base, """
            [server]
            host = localhost
            port = 80
            """)
        _write_text(local, """
            [server]
            port = 8080
            """)
        values = ConfigFileParser(base, 'utf-8').read()
        ConfigFileParser(local, 'utf-8').read(values)
        assert dict(values) == {
            'server.host': 'localhost', 'server.port': '8080'
        }

    def test_readstream(self):
        values = ConfigFileParser.readstream(StringIO('[a]\nx = "1"\n'))
        assert dict(values) == {'a.x': '1'}

    def test_guesses_encoding_when_decoding_fails(self, tmp_path):
        path = tmp_path / 'utf16.ini'
        path.write_bytes('; comment\n[a]\nx = ünï\n'.encode('utf-16'))
        parser = ConfigFileParser(path, 'utf-8')
        values = parser.read()
        assert values['a.x'] == 'ünï'
        assert parser.encoding.lower().startswith('utf-16')


class TestWrite:
    def test_write_new_file(self, tmp_path):
        path = tmp_path / 'new.ini'
        ConfigFileParser(path, 'utf-8').write(
            {'b.x': '1', 'a.y': '2', 'a.x': '3'})
        assert path.read_text(encoding='utf-8') == \
            '[a]\nx = 3\ny = 2\n\n[b]\nx = 1\n'

    def test_load_modify_save_keeps_layout(self, tmp_path):
        path = tmp_path / 'app.ini'
        _write_text(path, """
            ; app settings
            name = demo


            [server]
            # where to listen
            host = localhost
            port = 80

            [old]
            stale = yes
            """)
        parser = ConfigFileParser(path, 'utf-8')
        values = parser.read()
        values['server.port'] = '8080'
        values['server.debug'] = 'true'
        values['old.stale'] = None
        values['log.level'] = 'info'
        parser.write(values)

        assert path.read_text(encoding='utf-8') == dedent("""\
            ; app settings
            name = demo

            [server]
            # where to listen
            host = localhost
            port = 8080
            debug = true

            [log]
            level = info
            """)

    def test_write_back_in_detected_encoding(self, tmp_path):
        path = tmp_path / 'utf16.ini'
        path.write_bytes('[a]\nx = ünï\n'.encode('utf-16'))
        parser = ConfigFileParser(path, 'utf-8')
        values = parser.read()
        values['a.y'] = 'ok'
        parser.write(values)
        assert path.read_bytes().decode('utf-16').splitlines() == [
            '[a]', 'x = ünï', 'y = ok'
        ]

    def test_str(self, tmp_path):
        parser = ConfigFileParser(tmp_path / 'a.ini', 'utf-8')
        assert str(parser) == f'config file: {tmp_path / "a.ini"} (utf-8)'
