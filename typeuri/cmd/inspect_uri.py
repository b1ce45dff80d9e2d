#!/usr/bin/env python
# Copyright 2013 by Rackspace Hosting, Inc.
#
# Licensed under the Apache License, Version 2.0 (the 'License');
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an 'AS IS' BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Script that prints out what typeuri makes of a URI.
"""
import argparse
import logging
import sys

import typeuri

DEFAULT_INPUT = 'https://github.com/shaunkawano/typeuri'


def make_parser():
    """Create the parser for the command line."""
    parser = argparse.ArgumentParser(
        description='Example: typeuri-inspect "https://github.com/trending?l=java"'
    )
    parser.add_argument(
        '-e',
        '--encoding',
        default=typeuri.DEFAULT_ENCODING,
        help='Encoding of percent-encoded octets (default: %(default)s)',
    )
    parser.add_argument(
        '--no-validate',
        dest='validate',
        action='store_false',
        help='Do not check the URI against the RFC 3986 grammar',
    )
    parser.add_argument(
        '--no-unquote-plus',
        dest='unquote_plus',
        action='store_false',
        help="Keep '+' in query keys and values instead of decoding it as a space",
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Log debug output to stderr',
    )
    parser.add_argument(
        'uri',
        nargs='?',
        default=DEFAULT_INPUT,
        help='The URI to inspect (default: %(default)s)',
    )
    return parser


def make_options(args):
    options = typeuri.ParseOptions()
    options.encoding = args.encoding
    options.unquote_plus = args.unquote_plus
    options.validate = args.validate
    return options


def describe(text, type_uri):
    """Render one ``name=value`` line per accessor of `type_uri`."""
    fields = (
        ('input', text),
        ('isOpaque', type_uri.is_opaque),
        ('isAbsolute', type_uri.is_absolute),
        ('queryMap', {key: list(values) for key, values in type_uri.query_map.items()}),
        ('hasQuery', type_uri.has_query),
        ('query', type_uri.query),
        ('rawQuery', type_uri.raw_query),
        ('hasEmptyPath', type_uri.has_empty_path),
        ('path', type_uri.path),
        ('rawPath', type_uri.raw_path),
        ('pathSegments', list(type_uri.path_segments)),
        ('host', type_uri.host),
        ('rawSchemeSpecificPart', type_uri.raw_scheme_specific_part),
        ('schemeSpecificPart', type_uri.scheme_specific_part),
    )
    return '\n'.join('{}={}'.format(name, value) for name, value in fields)


def main():
    parser = make_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        type_uri = typeuri.TypeUri(args.uri, make_options(args))
    except typeuri.InvalidArgument as ex:
        print('{}: {}'.format(type(ex).__name__, ex), file=sys.stderr)
        return 1

    print(describe(args.uri, type_uri))
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
