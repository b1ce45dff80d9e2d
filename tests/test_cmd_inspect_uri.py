from argparse import Namespace
import logging

import pytest

import typeuri
from typeuri.cmd import inspect_uri


class TestMakeParser:
    @pytest.mark.parametrize('args, exp', (
        (
            [],
            Namespace(
                encoding='utf-8',
                validate=True,
                unquote_plus=True,
                verbose=False,
                uri=inspect_uri.DEFAULT_INPUT,
            ),
        ),
        (
            ['http://shaunkawano.com'],
            Namespace(
                encoding='utf-8',
                validate=True,
                unquote_plus=True,
                verbose=False,
                uri='http://shaunkawano.com',
            ),
        ),
        (
            ['-e', 'latin-1', '--no-validate', '--no-unquote-plus', '-v', 'foo'],
            Namespace(
                encoding='latin-1',
                validate=False,
                unquote_plus=False,
                verbose=True,
                uri='foo',
            ),
        ),
        (
            ['--encoding', 'ascii', '--verbose', 'foo'],
            Namespace(
                encoding='ascii',
                validate=True,
                unquote_plus=True,
                verbose=True,
                uri='foo',
            ),
        ),
    ))
    def test_make_parser(self, args, exp):
        parser = inspect_uri.make_parser()
        actual = parser.parse_args(args)
        assert actual == exp

    def test_make_parser_error(self):
        parser = inspect_uri.make_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(['a', 'b'])


def test_make_options():
    parser = inspect_uri.make_parser()
    args = parser.parse_args(['-e', 'latin-1', '--no-validate', '--no-unquote-plus'])

    options = inspect_uri.make_options(args)
    assert isinstance(options, typeuri.ParseOptions)
    assert options.encoding == 'latin-1'
    assert not options.validate
    assert not options.unquote_plus


def test_describe():
    text = 'mailto:someone@example.org'
    lines = inspect_uri.describe(text, typeuri.TypeUri(text)).splitlines()

    assert lines[:3] == [
        'input=mailto:someone@example.org',
        'isOpaque=True',
        'isAbsolute=True',
    ]
    assert 'hasQuery=False' in lines
    assert 'query=None' in lines
    assert 'host=None' in lines


class TestMain:
    def test_inspect(self, monkeypatch, capsys):
        args = ['typeuri-inspect', 'https://github.com/trending?l=java']
        monkeypatch.setattr('sys.argv', args)

        assert inspect_uri.main() == 0

        out, err = capsys.readouterr()
        assert out == '\n'.join([
            'input=https://github.com/trending?l=java',
            'isOpaque=False',
            'isAbsolute=True',
            "queryMap={'l': ['java']}",
            'hasQuery=True',
            'query=l=java',
            'rawQuery=l=java',
            'hasEmptyPath=False',
            'path=/trending',
            'rawPath=/trending',
            "pathSegments=['trending']",
            'host=github.com',
            'rawSchemeSpecificPart=//github.com/trending?l=java',
            'schemeSpecificPart=//github.com/trending?l=java',
        ]) + '\n'
        assert err == ''

    def test_inspect_default_input(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.argv', ['typeuri-inspect'])

        assert inspect_uri.main() == 0

        out, _ = capsys.readouterr()
        assert out.startswith('input=' + inspect_uri.DEFAULT_INPUT + '\n')
        assert "pathSegments=['shaunkawano', 'typeuri']" in out

    def test_inspect_invalid(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.argv', ['typeuri-inspect', 'http://exa mple.com'])

        assert inspect_uri.main() == 1

        out, err = capsys.readouterr()
        assert out == ''
        assert err.startswith('InvalidArgument: Malformed URI')

    def test_inspect_no_validate(self, monkeypatch, capsys):
        args = ['typeuri-inspect', '--no-validate', 'http://exa mple.com']
        monkeypatch.setattr('sys.argv', args)

        assert inspect_uri.main() == 0

        out, _ = capsys.readouterr()
        assert 'host=None' in out

    def test_verbose(self, monkeypatch, capsys):
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr('sys.argv', ['typeuri-inspect', '-v', 'https://github.com'])

        assert inspect_uri.main() == 0
        assert calls == [{'level': logging.DEBUG}]
