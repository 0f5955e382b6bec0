"""Imports and defines the core of the public API"""

from __future__ import absolute_import
from .attributes import RdnType, RdnValue
from .dn import DistinguishedName, DEFAULT_DN
from .escaping import unquote, normalize_escaped_chars
from .exceptions import DNError, NullInputError, MalformedGrammarError, NormalizationError
from .rdn import RelativeDistinguishedName, DEFAULT_RDN


def parse(text, **kwds):
    """Parse the string form of a Distinguished Name. Keywords are passed to :class:`.DistinguishedName`."""
    return DistinguishedName(text, **kwds)


def normalize(text, **kwds):
    """Get the normalized string form of a Distinguished Name string"""
    return DistinguishedName(text, **kwds).get_as_normalized()


__all__ = [
    'RdnType',
    'RdnValue',
    'DistinguishedName',
    'DEFAULT_DN',
    'unquote',
    'normalize_escaped_chars',
    'DNError',
    'NullInputError',
    'MalformedGrammarError',
    'NormalizationError',
    'RelativeDistinguishedName',
    'DEFAULT_RDN',
    'parse',
    'normalize',
]
