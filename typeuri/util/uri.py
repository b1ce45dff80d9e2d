# Copyright 2013 by Rackspace Hosting, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""URI utilities.

This module provides the functions that :class:`typeuri.TypeUri` is built
on: percent-decoding, splitting a query string into an ordered multi-map,
and splitting a path into its non-empty segments. These functions are not
available directly in the `typeuri` module, and so must be explicitly
imported::

    from typeuri.util import uri

    params = uri.parse_query_map('l=java&l=ruby')
"""

import logging

import rfc3986
from rfc3986 import exceptions as rfc3986_exceptions
from rfc3986 import validators

from typeuri.constants import DEFAULT_ENCODING
from typeuri.constants import PYPY

_logger = logging.getLogger(__name__)

_HEX_DIGITS = '0123456789ABCDEFabcdef'

# This map construction is based on urllib's implementation
_HEX_TO_BYTE = {
    (a + b).encode(): bytes([int(a + b, 16)]) for a in _HEX_DIGITS for b in _HEX_DIGITS
}

_URI_COMPONENTS = ('scheme', 'userinfo', 'host', 'port', 'path', 'query', 'fragment')


def _malformed_escape(token, strict):
    escape = '%' + token[:2].decode('ascii', 'backslashreplace')
    if strict:
        raise ValueError('Malformed percent-escape {!r}'.format(escape))

    _logger.debug('Keeping malformed percent-escape %r as-is', escape)


def _join_tokens_bytearray(tokens, encoding, strict):
    decoded_uri = bytearray(tokens[0])
    for token in tokens[1:]:
        token_partial = token[:2]
        try:
            decoded_uri += _HEX_TO_BYTE[token_partial] + token[2:]
        except KeyError:
            # malformed percentage like "x=%" or "y=%+"
            _malformed_escape(token, strict)
            decoded_uri += b'%' + token

    # Convert back to str
    return decoded_uri.decode(encoding, 'replace')


def _join_tokens_list(tokens, encoding, strict):
    decoded = tokens[:1]
    # PERF(vytas): Do not copy list: a simple bool flag is fastest on PyPy JIT.
    skip = True
    for token in tokens:
        if skip:
            skip = False
            continue

        token_partial = token[:2]
        try:
            decoded.append(_HEX_TO_BYTE[token_partial] + token[2:])
        except KeyError:
            _malformed_escape(token, strict)
            decoded.append(b'%' + token)

    # Convert back to str
    return b''.join(decoded).decode(encoding, 'replace')


# PERF(vytas): On pure CPython, bytearray += often comes on top, while on
#   PyPy, b''.join(list) is the recommended approach.
_join_tokens = _join_tokens_list if PYPY else _join_tokens_bytearray


def decode(encoded_uri, unquote_plus=True, encoding=DEFAULT_ENCODING, strict=False):
    """Decode percent-encoded characters in a URI or query string.

    This function models the behavior of `urllib.parse.unquote_plus`,
    albeit in a faster, more straightforward manner.

    Args:
        encoded_uri (str): An encoded URI (full or partial).

    Keyword Arguments:
        unquote_plus (bool): Set to ``False`` to retain any plus ('+')
            characters in the given string, rather than converting them to
            spaces (default ``True``). Typically you should set this
            to ``False`` when decoding any part of a URI other than the
            query string.
        encoding (str): Character encoding of the percent-encoded octets
            (default ``'utf-8'``). Octet sequences that are not valid in
            this encoding are replaced with U+FFFD.
        strict (bool): Set to ``True`` to reject a ``'%'`` that is not
            followed by two hexadecimal digits, rather than keeping it
            as-is (default ``False``).

    Returns:
        str: A decoded URL.

    Raises:
        ValueError: `strict` is set and `encoded_uri` contains a malformed
            percent-escape.
        LookupError: `encoding` is not a known codec.

    """

    decoded_uri = encoded_uri

    # PERF(kgriffs): Don't take the time to instantiate a new
    # string unless we have to.
    if '+' in decoded_uri and unquote_plus:
        decoded_uri = decoded_uri.replace('+', ' ')

    # Short-circuit if we can
    if '%' not in decoded_uri:
        return decoded_uri

    # NOTE(kgriffs): Clients should never submit a URI that has
    # unescaped non-ASCII chars in them, but just in case they
    # do, let's encode into a non-lossy format.
    tokens = decoded_uri.encode(encoding).split(b'%')
    return _join_tokens(tokens, encoding, strict)


def parse_query_map(query_string, unquote_plus=True, encoding=DEFAULT_ENCODING):
    """Parse a query string into an ordered multi-map.

    Every ``&``-separated field is kept, including blank ones. A field is
    split on its first ``=`` only, so values may themselves contain ``=``.
    A field without ``=``, or one that starts with ``=``, is taken as a
    key in its entirety, with an empty value.

    Args:
        query_string (str): The query string to parse, without the
            leading ``'?'``.

    Keyword Arguments:
        unquote_plus (bool): Set to ``False`` to keep ``'+'`` characters
            in keys and values rather than converting them to spaces
            (default ``True``).
        encoding (str): Character encoding of the percent-encoded octets
            (default ``'utf-8'``).

    Returns:
        dict: A dictionary mapping each decoded key to the ``list`` of its
        decoded values. Keys appear in order of first occurrence; values
        appear in the order they were given.

    Raises:
        ValueError: A key or value contains a malformed percent-escape.

    """

    params = {}

    if not query_string:
        return params

    for field in query_string.split('&'):
        pos = field.find('=')

        if pos > 0:
            k = decode(field[:pos], unquote_plus, encoding, strict=True)
            v = decode(field[pos + 1 :], unquote_plus, encoding, strict=True)
        else:
            k = decode(field, unquote_plus, encoding, strict=True)
            v = ''

        if k in params:
            params[k].append(v)
        else:
            params[k] = [v]

    return params


def parse_path_segments(path):
    """Split a URI path into its non-empty segments.

    Leading, trailing and repeated ``'/'`` separators do not produce
    segments, so ``'/a//b/'`` and ``'a/b'`` both yield ``['a', 'b']``.

    Args:
        path (str): The (decoded) path to split. May be ``None``.

    Returns:
        list: The non-empty segments, in order.

    """

    if not path:
        return []

    return [segment for segment in path.split('/') if segment]


def parse_uri(text, encoding=DEFAULT_ENCODING, validate=True):
    """Parse a URI string into an :class:`rfc3986.URIReference`.

    Args:
        text (str): URI or relative reference to parse.

    Keyword Arguments:
        encoding (str): Encoding used by ``rfc3986`` when percent-encoding
            characters that may not appear literally (default ``'utf-8'``).
        validate (bool): Set to ``False`` to skip checking each component
            against the RFC 3986 grammar (default ``True``).

    Returns:
        rfc3986.URIReference: The parsed reference.

    Raises:
        rfc3986.exceptions.ValidationError: `validate` is set and
            one or more components are malformed.

    """

    reference = rfc3986.uri_reference(text, encoding=encoding)

    if validate:
        validator = validators.Validator().check_validity_of(*_URI_COMPONENTS)
        validator.validate(reference)

        # NOTE: A relative-path reference may not have a colon in its first
        #   segment (RFC 3986, section 4.2), or it would read as a scheme.
        if (
            reference.scheme is None
            and reference.authority is None
            and reference.path
            and ':' in reference.path.split('/', 1)[0]
        ):
            raise rfc3986_exceptions.InvalidComponentsError(reference, 'path')

    return reference


def scheme_specific_part(reference):
    """Return the raw text between ``'scheme:'`` and ``'#'`` of a reference.

    Args:
        reference (rfc3986.URIReference): The parsed reference.

    Returns:
        str: ``//authority``, the path and ``?query``, each one only when
        present in `reference`.

    """

    parts = []

    if reference.authority is not None:
        parts.append('//')
        parts.append(reference.authority)

    if reference.path:
        parts.append(reference.path)

    if reference.query is not None:
        parts.append('?')
        parts.append(reference.query)

    return ''.join(parts)


__all__ = [
    'decode',
    'parse_path_segments',
    'parse_query_map',
    'parse_uri',
    'scheme_specific_part',
]
