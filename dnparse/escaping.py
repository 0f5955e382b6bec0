"""String normalization steps for RFC 2253 attribute types and values

All functions are pure: they take a string and return a new string.
"""

from __future__ import absolute_import
import re

from .rfc2253 import SPECIAL, ESCAPE, QUOTATION

ESCAPED_SPACE = r'\20'

# runs of upper case letters that are not part of a pair (e.g. the "B" in "\2B" or the "A" in "\A0")
_unescaped_upper_re = re.compile(r'(?<!\\[A-Za-z0-9])(?<!\\)([A-Z]+)')

# an escape sequence: a hex pair, or any single escaped character
_escape_re = re.compile(r'\\(?:([0-9A-Fa-f]{2})|(.))', re.DOTALL)

# bytes which, once decoded, may not appear unescaped in an unquoted value
_reescape_chars = SPECIAL + ESCAPE + QUOTATION


def is_special_char(code):
    """Check if a byte value is one of the seven RFC 2253 "special" characters"""
    return chr(code) in SPECIAL


def is_non_printable(code):
    """Assuming 7-bit ASCII, check if a byte value is non-printable. Special characters count as printable."""
    return code < 0x20 or code >= 0x7f


def lower_unescaped(value):
    """Convert all upper case letters to lower case, except those that are part of an escape sequence"""
    return _unescaped_upper_re.sub(lambda m: m.group(1).lower(), value)


def unquote(value):
    """Remove enclosing LDAPv2 quotation marks and escape any special characters they were protecting.

    A space immediately following the opening quote or immediately preceding the closing quote is replaced with
    ``\\20``. Escape sequences already present are kept as-is. No other normalization is performed.

    Strings that do not both start and end with a quotation mark are returned unchanged.
    """
    if len(value) < 2 or not value.startswith(QUOTATION) or not value.endswith(QUOTATION):
        return value

    inner = value[1:-1]
    out = []
    i = 0
    n = len(inner)
    while i < n:
        c = inner[i]
        if c == ESCAPE:
            m = _escape_re.match(inner, i)
            if m:
                out.append(m.group(0))
                i = m.end()
                continue
            out.append(c)
        elif c == ' ' and i == 0:
            out.append(ESCAPED_SPACE)
        elif c in SPECIAL:
            out.append(ESCAPE + c)
        else:
            out.append(c)
        i += 1

    unquoted = ''.join(out)
    if unquoted.endswith(' '):
        unquoted = unquoted[:-1] + ESCAPED_SPACE
    return unquoted


def normalize_escaped_chars(value):
    """Canonicalize the hex pair escapes in an unquoted attribute value.

    * Escaped special characters use the short form, e.g. ``\\2b`` becomes ``\\+``
    * Escaped printable characters are unescaped, e.g. ``\\41`` becomes ``A``
    * Remaining hex pairs are upper cased, e.g. ``\\0d`` becomes ``\\0D``

    A ``\\20`` at the very start or end of the value stays escaped, since the space would otherwise be lost.
    Single character escapes such as ``\\+`` and ``\\\\`` are left untouched. No escaping is added.
    """
    end = len(value)

    def _replace(m):
        hex_digits = m.group(1)
        if hex_digits is None:
            return m.group(0)
        code = int(hex_digits, 16)
        char = chr(code)
        if char in _reescape_chars:
            return ESCAPE + char
        boundary = (m.start() == 0 or m.end() == end)
        if not is_non_printable(code) and not (char == ' ' and boundary):
            return char
        return ESCAPE + hex_digits.upper()

    return _escape_re.sub(_replace, value)
