"""Applies rules from the RFC 2253 grammar at a position in a string"""

from __future__ import absolute_import
from parsimonious.exceptions import ParseError

from . import rfc2253


class RdnMatch(object):
    """The span and captured fields of a successful match of an RDN-producing rule

    :ivar int start: Offset of the first matched character
    :ivar int end: Offset just past the last matched character
    :ivar str name_component: Text of the whole name component, including any ``+`` sub-components
    :ivar str attribute_type: Text of the (first) attribute type
    :ivar str attribute_value: Text of the (first) attribute value, including quotes or leading ``#``
    :ivar bool is_oid: The type is in dotted-decimal form
    :ivar bool is_quoted: The value is an LDAPv2 quoted string
    :ivar bool is_hex_string: The value is a ``#`` hex string
    :ivar bool has_sub_components: The name component is multi-valued
    """

    def __init__(self, node):
        self.start = node.start
        self.end = node.end

        if node.expr_name in ('next_name', 'next_sub_component'):
            node = node.children[3]
        self.name_component = node.text

        if node.expr_name == 'name_component':
            atv = node.children[0]
            self.has_sub_components = (node.children[1].text != '')
        else:
            atv = node
            self.has_sub_components = False

        attr_type = atv.children[0]
        attr_value = atv.children[4]
        self.attribute_type = attr_type.text
        self.attribute_value = attr_value.text
        self.is_oid = (attr_type.children[0].expr_name == 'oid')
        value_kind = attr_value.children[0].expr_name
        self.is_quoted = (value_kind == 'quoted_value')
        self.is_hex_string = (value_kind == 'hexstring')

    @property
    def length(self):
        return self.end - self.start

    def __repr__(self):
        return 'RdnMatch(start={0}, end={1}, multi_valued={2})'.format(self.start, self.end, self.has_sub_components)


def match(rule, text, pos=0):
    """Match a grammar rule anchored at ``pos``. The rest of ``text`` does not need to be consumed.

    :param str rule: The name of a rule in :data:`.rfc2253.grammar` producing one RDN
    :param str text: The string to match against
    :param int pos: The offset to anchor the match at
    :return: The match, or None if the rule does not match at ``pos``
    :rtype: RdnMatch or None
    """
    try:
        node = rfc2253.grammar[rule].match(text, pos)
    except ParseError:
        return None
    return RdnMatch(node)


def search(rule, text, pos=0):
    """Find the first match of a grammar rule at ``pos`` or any later offset

    :return: The match, or None if the rule matches nowhere in ``text[pos:]``
    :rtype: RdnMatch or None
    """
    while pos < len(text):
        m = match(rule, text, pos)
        if m is not None:
            return m
        pos += 1
    return None
