"""
This module implements the low-level syntax of language tags, according to
the RFC 5646 (BCP 47) standard: splitting a tag into subtags, recognizing the
shapes of subtags, and parsing the language identifier that starts a tag.

Extensions are not parsed here. Parsing stops at the first singleton -- a
one-character subtag -- and leaves the rest of the subtags for the
`localetags.extensions` module.

For a full description of the syntax of a language tag, see page 3 of
    http://tools.ietf.org/html/bcp47

>>> parse('en')
[('language', 'en')]

>>> parse('en_US')
[('language', 'en'), ('region', 'US')]

>>> parse('en-Latn')
[('language', 'en'), ('script', 'Latn')]

>>> parse('es-419')
[('language', 'es'), ('region', '419')]

>>> parse('zh-hant-tw')
[('language', 'zh'), ('script', 'Hant'), ('region', 'TW')]

>>> parse('zh-tw-hant')
Traceback (most recent call last):
    ...
localetags.errors.InvalidSubtag: This script subtag, 'hant', is out of place. Expected variant, extension, or end of string.

>>> parse('de-DE-1901')
[('language', 'de'), ('region', 'DE'), ('variant', '1901')]

>>> parse('ja-latn-hepburn')
[('language', 'ja'), ('script', 'Latn'), ('variant', 'hepburn')]

>>> parse('u-co-backwards')
Traceback (most recent call last):
    ...
localetags.errors.InvalidLanguage: Expected a language code, got 'u'
"""
from .errors import InvalidLanguage, InvalidSubtag

# BCP 47 considers underscores equivalent to hyphens.
SEPARATORS = '-_'

# Define the order of subtags as integer constants, but also give them names
# so we can describe them in error messages
SCRIPT, REGION, VARIANT, EXTENSION = range(4)
SUBTAG_TYPES = ['script', 'region', 'variant', 'extension', 'end of string']

MAX_SUBTAG_LENGTH = 8


def normalize_characters(tag):
    """
    BCP 47 is case-insensitive, and considers underscores equivalent to
    hyphens. So here we smash tags into lowercase with hyphens, so we can
    make exact comparisons.

    >>> normalize_characters('en_US')
    'en-us'
    >>> normalize_characters('zh-Hant_TW')
    'zh-hant-tw'
    """
    return tag.lower().replace('_', '-')


def split_subtags(tag):
    """
    Normalize a tag and split it into its subtags.

    >>> split_subtags('en-US_u-CA-gregory')
    ['en', 'us', 'u', 'ca', 'gregory']
    """
    return normalize_characters(tag).split('-')


class SubtagIterator:
    """
    An iterator over a sequence of subtags that can look one subtag ahead.

    The parsers for each kind of extension share one SubtagIterator: each of
    them consumes its own subtags and leaves the iterator positioned on the
    singleton that starts the next extension, or at the end.

    >>> subtags = SubtagIterator(['u', 'ca', 'gregory'])
    >>> next(subtags)
    'u'
    >>> subtags.peek()
    'ca'
    >>> list(subtags)
    ['ca', 'gregory']
    >>> subtags.peek() is None
    True
    """
    def __init__(self, subtags):
        self._subtags = list(subtags)
        self._index = 0

    @classmethod
    def from_tag(cls, tag: str) -> 'SubtagIterator':
        return cls(split_subtags(tag))

    def __iter__(self):
        return self

    def __next__(self):
        if self._index >= len(self._subtags):
            raise StopIteration
        subtag = self._subtags[self._index]
        self._index += 1
        return subtag

    def peek(self, default=None):
        """
        Get the next subtag without consuming it, or `default` at the end.
        """
        if self._index >= len(self._subtags):
            return default
        return self._subtags[self._index]

    def at_singleton(self) -> bool:
        """
        Is the next subtag a singleton, which starts a new extension?
        """
        subtag = self.peek()
        return subtag is not None and len(subtag) == 1

    def at_end(self) -> bool:
        return self._index >= len(self._subtags)

    def __repr__(self):
        return 'SubtagIterator(%r)' % self._subtags[self._index:]


def is_alpha(subtag):
    return subtag.isascii() and subtag.isalpha()


def is_digit(subtag):
    return subtag.isascii() and subtag.isdigit()


def is_alphanum(subtag, min_length=1, max_length=MAX_SUBTAG_LENGTH):
    """
    Is this subtag made of ASCII letters and digits, with a length in the
    given range?

    >>> is_alphanum('gregory', 3)
    True
    >>> is_alphanum('ca', 3)
    False
    >>> is_alphanum('café')
    False
    """
    return (min_length <= len(subtag) <= max_length
            and subtag.isascii() and subtag.isalnum())


def is_language_subtag(subtag):
    """
    Language subtags are 2 to 8 letters. Four-letter language subtags are
    reserved for future use, but the syntax allows them.
    """
    return 2 <= len(subtag) <= 8 and is_alpha(subtag)


def is_script_subtag(subtag):
    return len(subtag) == 4 and is_alpha(subtag)


def is_region_subtag(subtag):
    return ((len(subtag) == 2 and is_alpha(subtag))
            or (len(subtag) == 3 and is_digit(subtag)))


def is_variant_subtag(subtag):
    if len(subtag) == 4:
        return is_alphanum(subtag) and subtag[0].isdigit()
    return is_alphanum(subtag, 5, 8)


def check_subtags(subtags):
    """
    Check that every subtag has 1 to 8 characters.

    >>> check_subtags(['en', '', 'us'])
    Traceback (most recent call last):
        ...
    localetags.errors.InvalidSubtag: Expected 1-8 characters, got ''
    """
    for subtag in subtags:
        if len(subtag) == 0 or len(subtag) > MAX_SUBTAG_LENGTH:
            subtag_error(subtag, '1-8 characters')


def classify_subtag(subtag):
    """
    Determine whether a subtag that follows the language code is a script,
    a region, or a variant. Returns None if it's none of these.
    """
    if is_script_subtag(subtag):
        return SCRIPT
    elif is_region_subtag(subtag):
        return REGION
    elif is_variant_subtag(subtag):
        return VARIANT
    return None


def parse(tag):
    """
    Parse the syntax of a language identifier, without looking up anything
    in a registry. Returns a list of (type, value) tuples.

    This is for tags that end before any extensions; use
    `parse_language_subtags` on a SubtagIterator to parse the start of a
    longer tag. An empty tag is the undetermined language, and produces no
    subtags.

    >>> parse('')
    []
    """
    if not tag:
        return []
    subtags = SubtagIterator.from_tag(tag)
    parsed = parse_language_subtags(subtags)
    if not subtags.at_end():
        subtag_error(subtags.peek(), 'end of string')
    return parsed


def parse_language_subtags(subtags):
    """
    Parse the language identifier at the start of a SubtagIterator: the
    language code, followed by a script, a region and variants. Stops before
    the first singleton.
    """
    language = next(subtags, None)
    if language is None or not is_language_subtag(language):
        subtag_error(language, 'a language code', InvalidLanguage)
    parsed = [('language', language.lower())]

    expect = SCRIPT
    while not subtags.at_end() and not subtags.at_singleton():
        subtag = next(subtags)
        if len(subtag) == 0 or len(subtag) > MAX_SUBTAG_LENGTH:
            subtag_error(subtag, '1-8 characters')

        tagtype = classify_subtag(subtag)
        if tagtype is None:
            # We haven't recognized a type of tag. This subtag just doesn't
            # fit the standard.
            subtag_error(subtag)
        elif tagtype < expect:
            # We got a tag type that was supposed to appear earlier in the
            # order.
            order_error(subtag, tagtype, expect)

        # There can be only one script and one region, so after seeing one,
        # expect something later in the order. Variants can repeat.
        if tagtype in (SCRIPT, REGION):
            expect = tagtype + 1
        else:
            expect = VARIANT

        # Now restore case conventions.
        if tagtype == SCRIPT:
            subtag = subtag.title()
        elif tagtype == REGION:
            subtag = subtag.upper()
        else:
            subtag = subtag.lower()
        parsed.append((SUBTAG_TYPES[tagtype], subtag))
    return parsed


def order_error(subtag, got, expected):
    """
    Output an error indicating that tags were out of order.
    """
    options = SUBTAG_TYPES[expected:]
    if len(options) == 1:
        expect_str = options[0]
    elif len(options) == 2:
        expect_str = '%s or %s' % (options[0], options[1])
    else:
        expect_str = '%s, or %s' % (', '.join(options[:-1]), options[-1])
    got_str = SUBTAG_TYPES[got]
    raise InvalidSubtag("This %s subtag, %r, is out of place. "
                        "Expected %s." % (got_str, subtag, expect_str))


def subtag_error(subtag, expected='a valid subtag', error=InvalidSubtag):
    """
    Raise an error saying what we expected to find instead of this subtag.
    """
    raise error("Expected %s, got %r" % (expected, subtag))
