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

"""TypeUri class."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

import rfc3986
from rfc3986 import exceptions as rfc3986_exceptions

from typeuri.constants import HTTP_SCHEME
from typeuri.constants import HTTPS_SCHEME
from typeuri.constants import NETWORK_SCHEMES
from typeuri.errors import InvalidArgument
from typeuri.options import ParseOptions
from typeuri.util import uri as uri_util

__all__ = ('TypeUri',)

_logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = ParseOptions()

UriArg = Union[str, rfc3986.URIReference]


class TypeUri:
    """A read-only view of a URI with convenience accessors.

    The query string is decomposed into an ordered multi-map and the path
    into its non-empty segments, both once, at construction time. Neither
    view is ever ``None``; a URI without a query or path simply yields an
    empty mapping or an empty tuple.

    Two instances compare equal when their underlying URI, query map and
    path segments are all equal.

    Args:
        uri: Either an :class:`rfc3986.URIReference` or a URI string to be
            parsed with :func:`rfc3986.uri_reference`.

    Keyword Args:
        options (ParseOptions): Options controlling validation and
            decoding (default ``None``, meaning a default-constructed
            :class:`~.ParseOptions`).

    Raises:
        InvalidArgument: The URI string is malformed, a path or query
            component cannot be percent-decoded, or the configured
            encoding is unknown.
        TypeError: `uri` is neither a ``str`` nor a ``URIReference``.
    """

    __slots__ = (
        '_uri',
        '_encoding',
        '_decoded_path',
        '_decoded_query',
        '_path_segments',
        '_query_map',
        '_query_map_view',
    )

    def __init__(self, uri: UriArg, options: Optional[ParseOptions] = None) -> None:
        options = options or _DEFAULT_OPTIONS

        try:
            # NOTE: Non-text codecs such as 'base64' are rejected here too.
            ''.encode(options.encoding)
        except LookupError as ex:
            raise InvalidArgument(
                'Unsupported encoding: {!r}'.format(options.encoding),
                value=options.encoding,
                cause=ex,
            ) from ex

        if isinstance(uri, str):
            try:
                uri = uri_util.parse_uri(
                    uri, encoding=options.encoding, validate=options.validate
                )
            except (rfc3986_exceptions.RFC3986Exception, UnicodeError) as ex:
                raise InvalidArgument(
                    'Malformed URI {!r}: {}'.format(uri, ex), value=uri, cause=ex
                ) from ex
        elif not isinstance(uri, rfc3986.URIReference):
            raise TypeError(
                'uri must be a str or an rfc3986.URIReference, not {}'.format(
                    type(uri).__name__
                )
            )

        self._uri = uri
        self._encoding = options.encoding

        try:
            self._decoded_path = uri_util.decode(
                uri.path or '', unquote_plus=False, encoding=options.encoding, strict=True
            )

            if uri.query is None:
                self._decoded_query = None
            else:
                self._decoded_query = uri_util.decode(
                    uri.query, unquote_plus=False, encoding=options.encoding, strict=True
                )

            query_map = uri_util.parse_query_map(
                self._decoded_query,
                unquote_plus=options.unquote_plus,
                encoding=options.encoding,
            )
        except ValueError as ex:
            raise InvalidArgument(
                'Unable to decode URI {!r}: {}'.format(uri.unsplit(), ex),
                value=uri,
                cause=ex,
            ) from ex

        self._path_segments = tuple(uri_util.parse_path_segments(self._decoded_path))
        self._query_map = {key: tuple(values) for key, values in query_map.items()}
        self._query_map_view = MappingProxyType(self._query_map)

        _logger.debug(
            'Parsed %r into %d path segment(s) and %d query key(s)',
            uri.unsplit(),
            len(self._path_segments),
            len(self._query_map),
        )

    @classmethod
    def parse(cls, uri: UriArg, options: Optional[ParseOptions] = None) -> TypeUri:
        """Create a new :class:`TypeUri` from a URI string or reference.

        This is an alias for calling the class itself.
        """
        return cls(uri, options)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, TypeUri):
            return NotImplemented

        return (
            self._uri == other._uri
            and self._query_map == other._query_map
            and self._path_segments == other._path_segments
        )

    def __hash__(self) -> int:
        # NOTE: URIReference equality falls back to comparing normalized
        #   references, so the normalized form is hashed.
        return hash(
            (
                tuple(self._uri.normalize()),
                tuple(self._query_map.items()),
                self._path_segments,
            )
        )

    def __repr__(self) -> str:
        return '<%s: uri=%r query_map=%r path_segments=%r>' % (
            self.__class__.__name__,
            self._uri.unsplit(),
            self._query_map,
            list(self._path_segments),
        )

    # ------------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------------

    @property
    def uri(self) -> rfc3986.URIReference:
        """The underlying :class:`rfc3986.URIReference`, unchanged."""
        return self._uri

    @property
    def query_map(self) -> Mapping[str, Tuple[str, ...]]:
        """Read-only mapping of each decoded query key to its values.

        Keys appear in the order of their first occurrence in the query
        string, and each key's values in the order they were given. An
        absent or empty query string yields an empty mapping.
        """
        return self._query_map_view

    @property
    def path_segments(self) -> Tuple[str, ...]:
        """Non-empty decoded path segments, in order (possibly empty).

        Note:
            For an opaque URI such as ``mailto:someone@example.org``,
            everything after the scheme is taken as the path, and so
            yields segments (here ``('someone@example.org',)``), even though
            some URI libraries report no path at all for opaque URIs.
        """
        return self._path_segments

    # ------------------------------------------------------------------------
    # Underlying URI fields
    # ------------------------------------------------------------------------

    @property
    def scheme(self) -> Optional[str]:
        return self._uri.scheme

    @property
    def host(self) -> Optional[str]:
        return self._uri.host

    @property
    def port(self) -> Optional[str]:
        return self._uri.port

    @property
    def raw_path(self) -> str:
        """Path exactly as it appears in the URI, or ``''`` if absent."""
        return self._uri.path or ''

    @property
    def path(self) -> str:
        """Percent-decoded path, or ``''`` if absent."""
        return self._decoded_path

    @property
    def raw_query(self) -> Optional[str]:
        """Query exactly as it appears in the URI, or ``None`` if absent."""
        return self._uri.query

    @property
    def query(self) -> Optional[str]:
        """Percent-decoded query, or ``None`` if absent.

        Note:
            Any ``'+'`` is kept as-is here; only the keys and values in
            :attr:`query_map` are form-decoded.
        """
        return self._decoded_query

    @property
    def raw_scheme_specific_part(self) -> str:
        """Everything between ``'scheme:'`` and ``'#'``, undecoded."""
        return uri_util.scheme_specific_part(self._uri)

    @property
    def scheme_specific_part(self) -> str:
        """Percent-decoded counterpart of :attr:`raw_scheme_specific_part`."""
        return uri_util.decode(
            self.raw_scheme_specific_part, unquote_plus=False, encoding=self._encoding
        )

    @property
    def is_absolute(self) -> bool:
        """``True`` if the URI has a scheme."""
        return self._uri.scheme is not None

    @property
    def is_opaque(self) -> bool:
        """``True`` for an absolute URI whose scheme-specific part does not
        start with ``'/'`` (e.g., ``mailto:someone@example.org``).

        Opaque URIs still get :attr:`path_segments` and a :attr:`query_map`,
        derived from the text after the scheme.
        """
        return self.is_absolute and not self.raw_scheme_specific_part.startswith('/')

    # ------------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------------

    @property
    def has_empty_path(self) -> bool:
        """``True`` if the URI has no path segments."""
        return not self._path_segments

    @property
    def is_network(self) -> bool:
        """``True`` if the scheme is exactly ``'http'`` or ``'https'``."""
        return self._uri.scheme in NETWORK_SCHEMES

    @property
    def is_http(self) -> bool:
        return self._uri.scheme == HTTP_SCHEME

    @property
    def is_https(self) -> bool:
        return self._uri.scheme == HTTPS_SCHEME

    def is_host(self, host: str) -> bool:
        """Determine whether the URI's host is exactly `host`.

        Args:
            host (str): Host name, case-sensitive (e.g., 'github.com').

        Returns:
            bool: ``True`` if the hosts are the same, ``False`` otherwise.

        """
        return host == self._uri.host

    def is_scheme(self, scheme: str) -> bool:
        """Determine whether the URI's scheme is exactly `scheme`.

        Args:
            scheme (str): Scheme, case-sensitive (e.g., 'https').

        Returns:
            bool: ``True`` if the schemes are the same, ``False`` otherwise.

        """
        return scheme == self._uri.scheme

    @property
    def has_query(self) -> bool:
        """``True`` if the URI has a query component, even an empty one.

        ``'https://github.com/?'`` has a query; ``'https://github.com/'``
        does not.
        """
        return self._uri.query is not None

    def has_query_key(self, key: str) -> bool:
        """Determine whether a query string parameter exists.

        Args:
            key (str): Decoded parameter name, case-sensitive (e.g., 'l').

        Returns:
            bool: ``True`` if the parameter is found, or ``False`` if it
            is not found.

        """

        if not self._query_map:
            return False

        return key in self._query_map

    def contains_query(self, key: str, value: str) -> bool:
        """Determine whether `key` was given `value` in the query string.

        Args:
            key (str): Decoded parameter name, case-sensitive.
            value (str): Decoded value to look for among the values of
                `key`, case-sensitive.

        Returns:
            bool: ``True`` if any value of `key` equals `value`,
            ``False`` otherwise.

        """

        values = self._query_map.get(key)
        if not values:
            return False

        return value in values

    def contains_any_query(self, pairs: Optional[Mapping[str, str]]) -> bool:
        """Determine whether any of the given key/value pairs is present.

        Args:
            pairs (dict): Mapping of decoded parameter names to the value
                to look for, as accepted by :meth:`contains_query`.

        Returns:
            bool: ``True`` if at least one pair matches. ``False`` if none
            does, or if `pairs` is empty or ``None``.

        """

        if not pairs:
            return False

        for key, value in pairs.items():
            if self.contains_query(key, value):
                return True

        return False

    # ------------------------------------------------------------------------
    # Parameter getters
    # ------------------------------------------------------------------------

    def get_param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the first value of a query string parameter.

        Args:
            name (str): Decoded parameter name, case-sensitive.

        Keyword Args:
            default (str): Value to return if the parameter is not found
                (default ``None``).

        Returns:
            str: The first value given for the parameter, or `default`.

        """

        values = self._query_map.get(name)
        if values:
            return values[0]

        return default

    def get_param_as_list(
        self, name: str, default: Optional[List[str]] = None
    ) -> Optional[List[str]]:
        """Return all the values of a query string parameter as a list.

        Args:
            name (str): Decoded parameter name, case-sensitive.

        Keyword Args:
            default: Value to return if the parameter is not found
                (default ``None``).

        Returns:
            list: A new list of the parameter's values, in the order they
            were given, or `default`.

        """

        values = self._query_map.get(name)
        if values is None:
            return default

        return list(values)
