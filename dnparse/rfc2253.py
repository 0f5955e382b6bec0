"""RFC 2253: UTF-8 String Representation of Distinguished Names

https://tools.ietf.org/html/rfc2253

Parses both LDAPv3 and the LDAPv2 (RFC 1779) forms allowed on input by RFC 2253 section 4: quoted values, an
``OID.`` type prefix, spaces around separators, and ``;`` as an RDN separator. Only the LDAPv3 form is produced on
output.
"""

from __future__ import absolute_import
from parsimonious.grammar import Grammar

## Section 3

SPECIAL = ',=+<>#;'
ESCAPE = '\\'
QUOTATION = '"'

RDN_DELIMITER = ','
MULTI_VALUE_DELIMITER = '+'

# Type text of an RDN holding a multi-valued aggregate
MULTIPLE_VALUES = 'MULTIPLE VALUES'

# Spaces are only allowed around separators in LDAPv2, and only the ASCII space character.
#
# RFC 2253 requires at least one keychar after the leading ALPHA of a type, which would reject the widely used "L",
# "O" and "C" types, so descr accepts zero or more.
#
# Alternatives are tried in order; oid is tried before descr and hexstring/quoted_value before unquoted_value.
rfc2253_grammar = r'''
      name_component           = attribute_type_and_value sub_components?
      next_name                = SPACES RDN_SEP SPACES name_component
      sub_components           = next_sub_component+
      next_sub_component       = SPACES PLUS SPACES attribute_type_and_value

      attribute_type_and_value = attribute_type SPACES EQUALS SPACES attribute_value

      attribute_type = oid / descr
      oid            = oid_prefix? number (DOT number)*
      oid_prefix     = "oid." / "OID."
      number         = ~r"[0-9]+"
      descr          = ALPHA keychar*
      keychar        = ~r"[A-Za-z0-9-]"

      attribute_value = hexstring / quoted_value / unquoted_value
      hexstring       = SHARP hexpair+
      quoted_value    = QUOTATION (quotechar / pair)* QUOTATION
      unquoted_value  = (stringchar / pair)*

      pair       = ESC (pairchar / hexpair)
      pairchar   = ~r'[,=+<>#;\\"]'
      hexpair    = HEX HEX
      stringchar = ~r'[^,=+<>#;\\"]'
      quotechar  = ~r'[^\\"]'

      ALPHA     = ~r"[A-Za-z]"
      HEX       = ~r"[0-9A-Fa-f]"
      SPACES    = ~r" *"
      RDN_SEP   = ~r"[,;]"
      EQUALS    = "="
      PLUS      = "+"
      SHARP     = "#"
      DOT       = "."
      QUOTATION = '"'
      ESC       = "\\"
'''

grammar = Grammar(rfc2253_grammar)

# rule pairs used by the parser: (first rule, continuation rule)
NAME_RULES = ('name_component', 'next_name')
MULTI_VALUE_RULES = ('attribute_type_and_value', 'next_sub_component')
