from dnparse import escaping


def test_normalize_escaped_chars():
    tests = (
        (r'Good\20Dog', r'Good Dog'),
        (r'Smith\2cJohn', r'Smith\,John'),
        (r'Smith\2CJohn', r'Smith\,John'),
        (r'My\FFChar', r'My\FFChar'),
        (r'My\0DChar', r'My\0DChar'),
        (r'My\0dChar', r'My\0DChar'),
        (r'This\+That', r'This\+That'),
        (r'Literal Back\\Slash', r'Literal Back\\Slash'),
        (r'Not\&Valid', r'Not\&Valid'),
        (r'\40home', r'@home'),
        (r'Lu\C4\8Di\C4\87', r'Lu\C4\8Di\C4\87'),
        (r'Lu\c4\8di\c4\87', r'Lu\C4\8Di\C4\87'),
        (r'\23hash', r'\#hash'),
        (r'one\3btwo', r'one\;two'),
        (r'back\5cslash', r'back\\slash'),
        (r'say \22hi\22', r'say \"hi\"'),
        ('', ''),
    )
    for test, expected in tests:
        actual = escaping.normalize_escaped_chars(test)
        assert actual == expected, test


def test_normalize_escaped_chars_boundary_space():
    tests = (
        (r'\20Leading', r'\20Leading'),
        (r'Trailing\20', r'Trailing\20'),
        (r'\20Both\20', r'\20Both\20'),
        (r'\20\20Two', r'\20 Two'),
        (r'\20', r'\20'),
        (r'Mid\20dle', r'Mid dle'),
    )
    for test, expected in tests:
        actual = escaping.normalize_escaped_chars(test)
        assert actual == expected, test


def test_normalize_escaped_chars_double_backslash():
    """Ensure an escaped backslash followed by hex digits is not read as a hex escape"""
    assert escaping.normalize_escaped_chars(r'a\\2b') == r'a\\2b'


def test_unquote():
    tests = (
        ('"All good boys deserve fudge."', 'All good boys deserve fudge.'),
        ('"All good boys + girls deserve fudge."', 'All good boys \\+ girls deserve fudge.'),
        ('"Boys, girls + adults deserve fudge."', 'Boys\\, girls \\+ adults deserve fudge.'),
        ('"Don\'t expect to fix \\3cthis\\3e; but this."', 'Don\'t expect to fix \\3cthis\\3e\\; but this.'),
        ('"  Leading Spaces"', '\\20 Leading Spaces'),
        ('"Trailing Spaces  "', 'Trailing Spaces \\20'),
        ('"  Leading and Trailing Spaces  "', '\\20 Leading and Trailing Spaces \\20'),
        ('"Only opening quote', '"Only opening quote'),
        ('Only closing quote"', 'Only closing quote"'),
        ('""', ''),
        ('" "', '\\20'),
        ('"#1 <first>"', '\\#1 \\<first\\>'),
        ('"already \\, escaped"', 'already \\, escaped'),
        ('"say \\"hi\\""', 'say \\"hi\\"'),
        ('"', '"'),
        ('', ''),
    )
    for test, expected in tests:
        actual = escaping.unquote(test)
        assert actual == expected, test


def test_lower_unescaped():
    tests = (
        ('CN', 'cn'),
        ('Steve Kille', 'steve kille'),
        (r'A\4B', r'a\4B'),
        (r'\ABCD', r'\ABcd'),
        (r'X\,Y', r'x\,y'),
        (r'\0DAfter', r'\0Dafter'),
        ('already lower', 'already lower'),
        ('', ''),
    )
    for test, expected in tests:
        actual = escaping.lower_unescaped(test)
        assert actual == expected, test


def test_char_classes():
    for c in ',=+<>#;':
        assert escaping.is_special_char(ord(c))
    for c in 'a \\"':
        assert not escaping.is_special_char(ord(c))

    assert escaping.is_non_printable(0x0d)
    assert escaping.is_non_printable(0x7f)
    assert escaping.is_non_printable(0xc4)
    assert not escaping.is_non_printable(0x20)
    assert not escaping.is_non_printable(ord('~'))
