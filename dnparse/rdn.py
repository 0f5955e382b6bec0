"""Relative Distinguished Names"""

from __future__ import absolute_import
from .attributes import Normalizable, RdnType, RdnValue
from .exceptions import NormalizationError
from .rfc2253 import MULTIPLE_VALUES


class RelativeDistinguishedName(Normalizable):
    """An RFC 2253 Relative Distinguished Name: an attribute type and value, or a multi-valued aggregate

    A multi-valued RDN has the type text ``MULTIPLE VALUES`` and a value holding the nested single-valued RDNs in
    :attr:`.RdnValue.multi_values`.

    RDNs are ordered by normalized type text, then normalized value text. This ordering is only used to sort the
    members of a multi-valued RDN.

    Note that normalization can raise exceptions which include the RDN text.

    :param RdnType attr_type: The attribute type
    :param RdnValue attr_value: The attribute value
    """

    def __init__(self, attr_type, attr_value):
        if attr_type is None:
            raise TypeError('RDN type is required')
        if attr_value is None:
            raise TypeError('RDN value is required')
        Normalizable.__init__(self)
        self.type = attr_type
        self.value = attr_value

    @classmethod
    def from_match(cls, m, multi_values=None, type_case_sensitive=False, value_case_sensitive=True):
        """Create an RDN from the captures of a grammar match

        :param RdnMatch m: A successful match of an RDN-producing rule
        :param list multi_values: The parsed sub-components when ``m`` is multi-valued
        :param bool type_case_sensitive: Case sensitivity of the created type(s)
        :param bool value_case_sensitive: Case sensitivity of the created value(s)
        :rtype: RelativeDistinguishedName
        """
        if m.has_sub_components:
            rdn_type = RdnType(MULTIPLE_VALUES, is_oid=m.is_oid, is_case_sensitive=type_case_sensitive)
            rdn_value = RdnValue(m.name_component,
                                 is_quoted=m.is_quoted,
                                 is_hex_string=m.is_hex_string,
                                 is_case_sensitive=value_case_sensitive,
                                 multi_values=multi_values)
        else:
            rdn_type = RdnType(m.attribute_type.strip(), is_oid=m.is_oid, is_case_sensitive=type_case_sensitive)
            rdn_value = RdnValue(m.attribute_value.strip(),
                                 is_quoted=m.is_quoted,
                                 is_hex_string=m.is_hex_string,
                                 is_case_sensitive=value_case_sensitive)
        return cls(rdn_type, rdn_value)

    @property
    def is_multi_valued(self):
        return self.value.is_multi_valued

    def get_as_normalized(self, commit=False):
        try:
            if self.is_multi_valued:
                normalized = self.value.get_as_normalized(commit)
            else:
                normalized = '{0}={1}'.format(self.type.get_as_normalized(commit),
                                              self.value.get_as_normalized(commit))
        except NormalizationError:
            raise
        except Exception as e:
            raise NormalizationError(str(self), 'Relative Distinguished Name') from e
        if commit:
            self.is_normalized = True
        if normalized == '=':
            return ''
        return normalized

    def sort_key(self):
        """Get the (type, value) normalized text pair this RDN is ordered by"""
        return (self.type.get_as_normalized(), self.value.get_as_normalized())

    def __lt__(self, other):
        if not isinstance(other, RelativeDistinguishedName):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self):
        if self.type.value == '':
            return ''
        elif self.type.value == MULTIPLE_VALUES:
            return str(self.value)
        else:
            return '{0}={1}'.format(self.type, self.value)

    def __repr__(self):
        return 'RelativeDistinguishedName({0!r}, {1!r})'.format(self.type, self.value)


def _create_default_rdn():
    rdn = RelativeDistinguishedName(RdnType(''), RdnValue(''))
    rdn.normalize()
    return rdn


DEFAULT_RDN = _create_default_rdn()
"""The RDN with an empty type and empty value that makes up the empty Distinguished Name"""
