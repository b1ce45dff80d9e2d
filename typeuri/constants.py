import sys

__all__ = (
    'DEFAULT_ENCODING',
    'HTTP_SCHEME',
    'HTTPS_SCHEME',
    'NETWORK_SCHEMES',
)

PYPY = sys.implementation.name == 'pypy'
"""Evaluates to ``True`` when the current Python implementation is PyPy."""

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

TYPEURI_SUPPORTED = PYTHON_VERSION >= (3, 8, 0)
"""Whether this version of typeuri supports the current Python version."""

if not TYPEURI_SUPPORTED:  # pragma: nocover
    raise ImportError(
        'typeuri requires Python 3.8+. '
        '(Recent Pip should automatically pick a suitable typeuri version.)'
    )

DEFAULT_ENCODING = 'utf-8'
"""Character encoding assumed for percent-encoded octets."""

HTTP_SCHEME = 'http'
HTTPS_SCHEME = 'https'

# NOTE: Compared case-sensitively; 'HTTP' is not a network scheme here.
NETWORK_SCHEMES = frozenset((HTTP_SCHEME, HTTPS_SCHEME))
