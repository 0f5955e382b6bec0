"""Exceptions raised by dnparse

Note that exception messages and attributes may include the Distinguished Name text being processed. Callers that
log or return these errors should redact them if DN text is sensitive.
"""


class DNError(Exception):
    """Base class for all exceptions raised by dnparse"""
    pass


class NullInputError(DNError, TypeError):
    """Raised when parsing is attempted with no input"""
    def __init__(self):
        DNError.__init__(self, 'A Distinguished Name is required, got None')


class MalformedGrammarError(DNError, ValueError):
    """Raised when the input does not match the RFC 2253 grammar where a match is required

    :ivar str text: The text that could not be parsed
    :ivar int position: Offset of the first character that could not be parsed
    """
    def __init__(self, text, position=0, msg=None):
        self.text = text
        self.position = position
        if msg is None:
            msg = 'A Distinguished Name had an error and could not be parsed: {0!r}'.format(text)
        DNError.__init__(self, msg)


class NormalizationError(DNError):
    """Raised when an error occurs while computing a normalized form

    The underlying fault is available as ``__cause__``.

    :ivar str text: The Type, Value, RDN or DN text being normalized
    """
    def __init__(self, text, what='Distinguished Name'):
        self.text = text
        DNError.__init__(self, 'An error occurred while normalizing a {0}, {1!r}'.format(what, text))
