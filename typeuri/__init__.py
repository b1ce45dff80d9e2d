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

"""Primary package for typeuri, convenience accessors for URIs.

typeuri wraps an :class:`rfc3986.URIReference` and exposes its query
string as an ordered multi-map, its path as a list of segments, and a
handful of scheme and host predicates::

    import typeuri

    uri = typeuri.TypeUri('https://github.com/trending?l=java')
    uri.query_map['l']  # ('java',)
"""

import logging as _logging

__all__ = (
    'InvalidArgument',
    'ParseOptions',
    'TypeUri',
    # Public constants
    'DEFAULT_ENCODING',
    'NETWORK_SCHEMES',
)

from typeuri.constants import DEFAULT_ENCODING
from typeuri.constants import NETWORK_SCHEMES
from typeuri.errors import InvalidArgument
from typeuri.options import ParseOptions
from typeuri.type_uri import TypeUri

# Package version
from typeuri.version import __version__  # NOQA: F401

# NOTE: The library never configures logging output itself; applications
#   opt in by attaching handlers to the 'typeuri' logger.
_logger = _logging.getLogger('typeuri')
_logger.addHandler(_logging.NullHandler())
