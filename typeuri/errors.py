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

"""Error classes raised by typeuri.

All classes are available directly from the `typeuri` package namespace::

    import typeuri

    try:
        typeuri.TypeUri('http://exa mple.com')
    except typeuri.InvalidArgument as ex:
        print(ex.value, ex.cause)
"""

__all__ = ('InvalidArgument',)


# NOTE: This inherits from ValueError to be consistent with the type
#   raised by the standard library for malformed input.
class InvalidArgument(ValueError):
    """The given URI could not be parsed or decoded.

    Args:
        message (str): Human-friendly description of the problem.

    Keyword Args:
        value: The input that was rejected (default ``None``).
        cause (Exception): The underlying parser or decoder error, if any
            (default ``None``). The same exception is also chained as
            ``__cause__`` when raised by typeuri.

    Attributes:
        value: The input that was rejected.
        cause (Exception): The underlying parser or decoder error.
    """

    def __init__(self, message, value=None, cause=None):
        super().__init__(message)
        self.value = value
        self.cause = cause
