"""Contains the DistinguishedName class and the RFC 2253 parser"""

from __future__ import absolute_import
import copy
import logging
from functools import total_ordering

from . import matcher
from .exceptions import NullInputError, MalformedGrammarError, NormalizationError
from .rdn import RelativeDistinguishedName, DEFAULT_RDN
from .rfc2253 import NAME_RULES, MULTI_VALUE_RULES, RDN_DELIMITER

logger = logging.getLogger('dnparse')
logger.addHandler(logging.NullHandler())
logger.setLevel(logging.DEBUG)  # set to DEBUG to allow handler levels full discretion


class _Parser(object):
    """Splits a string into RDNs using a first rule and a continuation rule"""

    def __init__(self, type_case_sensitive, value_case_sensitive, strict):
        self.type_case_sensitive = type_case_sensitive
        self.value_case_sensitive = value_case_sensitive
        self.strict = strict

    def parse(self, text, rules=NAME_RULES):
        if not text:
            return [DEFAULT_RDN]

        first_rule, next_rule = rules
        m = matcher.match(first_rule, text)
        if m is None:
            raise MalformedGrammarError(text)
        rdns = [self._create_rdn(m)]

        pos = m.end
        while pos < len(text):
            m = matcher.search(next_rule, text, pos)
            if m is None:
                break
            if m.start > pos:
                self._unparsed(text, pos, m.start)
            rdns.append(self._create_rdn(m))
            pos = m.end
        if pos < len(text):
            self._unparsed(text, pos, len(text))

        return rdns

    def _unparsed(self, text, start, end):
        if self.strict:
            raise MalformedGrammarError(text, start, 'Unparsed input at position {0} of Distinguished Name '
                                                     '{1!r}'.format(start, text))
        logger.debug('Skipped {0} unparsable characters at position {1}'.format(end - start, start))

    def _create_rdn(self, m):
        multi_values = None
        if m.has_sub_components:
            multi_values = self.parse(m.name_component, MULTI_VALUE_RULES)
        return RelativeDistinguishedName.from_match(m, multi_values,
                                                    type_case_sensitive=self.type_case_sensitive,
                                                    value_case_sensitive=self.value_case_sensitive)


@total_ordering
class DistinguishedName(object):
    """An RFC 2253 Distinguished Name: an ordered sequence of Relative Distinguished Names

    The empty string is parsed as the empty DN, a single RDN with empty type and value.

    Comparisons, ordering and hashing all use the normalized string form. Normalization does not reorder the RDNs of
    the DN itself, only the members of multi-valued RDNs.

    Note that methods of this class can raise exceptions which include the DN text, which may cause inadvertent
    leakage of information if those exceptions are logged or returned to a client.

    :param str text: The string form of the DN
    :param bool type_case_sensitive: Treat attribute types as case-sensitive. Defaults to
                                     :attr:`DEFAULT_TYPE_CASE_SENSITIVE`.
    :param bool value_case_sensitive: Treat attribute values as case-sensitive. Defaults to
                                      :attr:`DEFAULT_VALUE_CASE_SENSITIVE`.
    :param bool strict: Raise an error if any part of the input is not consumed by the grammar, rather than skipping
                        it. Defaults to :attr:`DEFAULT_STRICT`.
    :raises NullInputError: if ``text`` is None
    :raises MalformedGrammarError: if ``text`` does not start with a valid RDN, or in strict mode if any input is left
                                   unparsed
    """

    # global defaults
    DEFAULT_TYPE_CASE_SENSITIVE = False
    DEFAULT_VALUE_CASE_SENSITIVE = True
    DEFAULT_STRICT = False

    # logging config
    LOG_FORMAT = '[%(asctime)s] %(name)s %(levelname)s : %(message)s'

    ## logging controls

    @staticmethod
    def enable_logging(level=logging.DEBUG):
        """Enable logging output to stderr"""
        stderr_handler = logging.StreamHandler()
        stderr_handler.setFormatter(logging.Formatter(DistinguishedName.LOG_FORMAT))
        stderr_handler.setLevel(level)
        logger.addHandler(stderr_handler)
        return stderr_handler

    ## parsing

    def __init__(self, text, type_case_sensitive=None, value_case_sensitive=None, strict=None):
        if text is None:
            raise NullInputError()
        if not isinstance(text, str):
            raise TypeError('Distinguished Name must be str, got {0}'.format(type(text).__name__))

        if type_case_sensitive is None:
            type_case_sensitive = self.DEFAULT_TYPE_CASE_SENSITIVE
        if value_case_sensitive is None:
            value_case_sensitive = self.DEFAULT_VALUE_CASE_SENSITIVE
        if strict is None:
            strict = self.DEFAULT_STRICT

        parser = _Parser(type_case_sensitive, value_case_sensitive, strict)
        self._rdns = tuple(parser.parse(text))
        logger.debug('Parsed Distinguished Name with {0} RDNs'.format(len(self._rdns)))

    @property
    def rdns(self):
        """The RDNs in the order they were parsed"""
        return self._rdns

    @property
    def is_normalized(self):
        return all(rdn.is_normalized for rdn in self._rdns)

    ## normalization

    def get_as_normalized(self, commit=False):
        """Get the DN as a normalized string and optionally normalize the object itself

        :param bool commit: Store the normalized form in the RDNs of this DN. Not safe to run concurrently on the same
                            instance. RDNs committed before an error is raised remain committed.
        :return: The normalized string
        :rtype: str
        :raises NormalizationError: if an error occurs computing the normalized form
        """
        try:
            return RDN_DELIMITER.join(rdn.get_as_normalized(commit) for rdn in self._rdns)
        except NormalizationError:
            raise
        except Exception as e:
            raise NormalizationError(str(self)) from e

    def normalize(self):
        """Normalize this DN in place. Subsequent calls to ``str()`` will return the normalized string.

        Not safe to run concurrently on the same instance; see :meth:`normalized_copy`.
        """
        self.get_as_normalized(commit=True)

    def normalized_copy(self):
        """Get a normalized copy of this DN, leaving this DN unchanged

        :rtype: DistinguishedName
        """
        dn = copy.deepcopy(self)
        dn.normalize()
        return dn

    ## sequence behavior

    def __len__(self):
        return len(self._rdns)

    def __iter__(self):
        return iter(self._rdns)

    def __getitem__(self, index):
        return self._rdns[index]

    ## comparison

    def __eq__(self, other):
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return self.get_as_normalized() == other.get_as_normalized()

    def __ne__(self, other):
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return self.get_as_normalized() != other.get_as_normalized()

    def __lt__(self, other):
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return self.get_as_normalized() < other.get_as_normalized()

    def __hash__(self):
        return hash(self.get_as_normalized())

    def __str__(self):
        return RDN_DELIMITER.join(str(rdn) for rdn in self._rdns)

    def __repr__(self):
        return 'DistinguishedName({0!r})'.format(str(self))


DEFAULT_DN = DistinguishedName('')
"""The empty Distinguished Name"""
