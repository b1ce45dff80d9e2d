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

"""Parse options for TypeUri."""

from typeuri.constants import DEFAULT_ENCODING

__all__ = ('ParseOptions',)


class ParseOptions:
    """Defines a set of configurable parse options.

    An instance of this class may be passed to :class:`typeuri.TypeUri` in
    order to change how the URI is parsed and decoded. Options are read
    once, at construction time; changing them afterwards has no effect on
    facades that were already created.
    """

    encoding: str
    """Character encoding of percent-encoded octets in the path and query
    (default ``'utf-8'``).

    Octet sequences that are not valid in this encoding are replaced with
    U+FFFD. Naming an unknown codec makes construction fail with
    :class:`~typeuri.InvalidArgument`.
    """
    unquote_plus: bool
    """Set to ``False`` to keep ``'+'`` characters in query keys and values
    rather than converting them to spaces (default ``True``).
    """
    validate: bool
    """Set to ``False`` to skip checking URI text against the RFC 3986
    grammar before parsing it (default ``True``).

    This option only applies to URIs given as text. A pre-parsed
    :class:`rfc3986.URIReference` is never revalidated.
    """

    __slots__ = (
        'encoding',
        'unquote_plus',
        'validate',
    )

    def __init__(self) -> None:
        self.encoding = DEFAULT_ENCODING
        self.unquote_plus = True
        self.validate = True

    def __repr__(self) -> str:
        return '<{}: encoding={!r} unquote_plus={!r} validate={!r}>'.format(
            self.__class__.__name__, self.encoding, self.unquote_plus, self.validate
        )
