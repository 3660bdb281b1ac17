"""
Exceptions raised while parsing or modifying locale identifiers.

Everything here is a ValueError, so code that only cares whether a tag was
acceptable can catch that.
"""


class LanguageTagError(ValueError):
    pass


class ParserError(LanguageTagError):
    """
    A language tag, or part of one, doesn't fit the syntax of BCP 47.
    """
    pass


class InvalidLanguage(ParserError):
    pass


class InvalidSubtag(ParserError):
    pass


class InvalidExtension(ParserError):
    pass
