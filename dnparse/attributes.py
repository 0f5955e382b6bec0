"""Attribute types and values, the components of a Relative Distinguished Name

Note that normalization methods can raise :class:`.NormalizationError` which includes the Type or Value text being
normalized.
"""

from __future__ import absolute_import
from . import escaping
from .exceptions import NormalizationError
from .rfc2253 import MULTI_VALUE_DELIMITER

_OID_PREFIXES = ('OID.', 'oid.')


class Normalizable(object):
    """Base class for objects with a canonical string form

    Normalization comes in two forms. :meth:`get_as_normalized` with ``commit=False`` (the default) computes the
    normalized string without changing the object and is safe to call from multiple threads at once. :meth:`normalize`
    (or ``commit=True``) also stores the normalized form in the object so that ``str()`` returns it. Committing
    normalization is not safe to run concurrently on the same object.
    """

    def __init__(self, is_case_sensitive=False):
        self._is_case_sensitive = is_case_sensitive
        self.is_normalized = False

    @property
    def is_case_sensitive(self):
        return self._is_case_sensitive

    def get_as_normalized(self, commit=False):
        """Get the object as a normalized string and optionally normalize the object itself

        :param bool commit: Store the normalized form in this object
        :return: The normalized string
        :rtype: str
        :raises NormalizationError: if an error occurs computing the normalized form
        """
        raise NotImplementedError()

    def normalize(self):
        """Normalize this object in place. Subsequent calls to ``str()`` will return the normalized string."""
        self.get_as_normalized(commit=True)


class AttributeComponent(Normalizable):
    """Base class for an attribute type or value

    :param str value: The text of the component as parsed
    :param bool is_case_sensitive: Whether letter case is significant when comparing
    """

    KIND = 'attribute component'

    def __init__(self, value, is_case_sensitive=False):
        if value is None:
            raise TypeError('{0} text is required'.format(self.KIND))
        Normalizable.__init__(self, is_case_sensitive)
        self.value = value

    def get_as_normalized(self, commit=False):
        try:
            normalized = self._normalize_value(commit)
        except NormalizationError:
            raise
        except Exception as e:
            raise NormalizationError(self.value, self.KIND) from e
        if commit:
            self.value = normalized
            self.is_normalized = True
        return normalized

    def _normalize_value(self, commit):
        raise NotImplementedError()

    def __str__(self):
        return self.value

    def __repr__(self):
        return '{0}({1!r})'.format(self.__class__.__name__, self.value)


class RdnType(AttributeComponent):
    """An attribute type, either a descriptive name like ``cn`` or a dotted-decimal OID

    :param str value: The type text
    :param bool is_oid: The type is in dotted-decimal form, possibly with an ``OID.`` prefix
    :param bool is_case_sensitive: Attribute types are not case-sensitive unless configured otherwise
    """

    KIND = 'RDN Type'

    def __init__(self, value, is_oid=False, is_case_sensitive=False):
        AttributeComponent.__init__(self, value, is_case_sensitive)
        self._is_oid = is_oid

    @property
    def is_oid(self):
        return self._is_oid

    def _normalize_value(self, commit):
        normalized = self.value
        if self.is_oid:
            # per RFC 2253 only the all-lower and all-upper prefixes are recognized
            if normalized.startswith(_OID_PREFIXES):
                normalized = normalized[4:]
        elif not self.is_case_sensitive:
            normalized = escaping.lower_unescaped(normalized)
        return normalized


class RdnValue(AttributeComponent):
    """An attribute value, or the aggregate of a multi-valued RDN

    :param str value: The value text as parsed, including enclosing quotes or leading ``#``
    :param bool is_quoted: The value is an LDAPv2 quoted string
    :param bool is_hex_string: The value is the ``#`` hex form of a BER encoding
    :param bool is_case_sensitive: Attribute values are case-sensitive unless configured otherwise
    :param list multi_values: The nested :class:`.RelativeDistinguishedName` objects of a multi-valued RDN
    """

    KIND = 'RDN Value'

    def __init__(self, value, is_quoted=False, is_hex_string=False, is_case_sensitive=True, multi_values=None):
        AttributeComponent.__init__(self, value, is_case_sensitive)
        self._is_quoted = is_quoted
        self._is_hex_string = is_hex_string
        self.multi_values = list(multi_values or [])

    @property
    def is_quoted(self):
        return self._is_quoted

    @property
    def is_hex_string(self):
        return self._is_hex_string

    @property
    def is_multi_valued(self):
        return len(self.multi_values) != 0

    def get_normalized_multi_value(self, commit=False):
        """Normalize each nested RDN and join them with ``+`` in sorted order

        When ``commit`` is true the nested RDNs are committed and their list is sorted in place; otherwise a sorted
        copy is used and discarded.
        """
        if commit:
            for rdn in self.multi_values:
                rdn.get_as_normalized(commit=True)
            self.multi_values.sort(key=lambda rdn: rdn.sort_key())
            ordered = self.multi_values
        else:
            ordered = sorted(self.multi_values, key=lambda rdn: rdn.sort_key())
        return MULTI_VALUE_DELIMITER.join(rdn.get_as_normalized(commit) for rdn in ordered)

    def _normalize_value(self, commit):
        if self.is_multi_valued:
            return self.get_normalized_multi_value(commit)
        elif self.is_hex_string:
            if self.value.startswith('#'):
                return self.value
            return '#' + self.value
        else:
            normalized = self.value
            if self.is_quoted:
                normalized = escaping.unquote(normalized)
            if not self.is_case_sensitive:
                normalized = escaping.lower_unescaped(normalized)
            return escaping.normalize_escaped_chars(normalized)
