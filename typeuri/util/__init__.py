"""General utilities.

The `uri` module holds the string-level functions that
:class:`typeuri.TypeUri` is built on. It must be imported explicitly::

    from typeuri.util import uri

    segments = uri.parse_path_segments('/shaunkawano/typeuri')
"""
