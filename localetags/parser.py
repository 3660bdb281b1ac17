"""
Parsers that turn whole locale identifiers, or strings of extensions, into
their parts.

`parse_extension_subtags` reads extensions a subtag at a time, as a sequence
of keys and values, and builds the same ExtensionsMap that
`ExtensionsMap.parse` does by giving each section to its own parser. Both of
them go through the `set_value` methods of the extension lists, so they agree
on what every kind of subtag means.

>>> str(parse_extension_subtags('-u-ca-islamic-civil-nu-arab-x-foo'))
'-u-ca-islamic-civil-nu-arab-x-foo'

>>> parse_extension_subtags('ca-gregory')
Traceback (most recent call last):
    ...
localetags.errors.InvalidSubtag: Expected an extension singleton, got 'ca'
"""
import logging

from .tag_parser import (
    SubtagIterator, split_subtags, check_subtags, subtag_error
)
from .langid import LanguageIdentifier
from .extensions import (
    ExtensionType, ExtensionsMap, EXTENSION_LISTS, extension_subtags
)
from .errors import InvalidExtension, ParserError

logger = logging.getLogger(__name__)

# States of the key/value parser
AWAITING_TYPE, AWAITING_KEY, HAVE_KEY = range(3)


def parse_locale(tag: str):
    """
    Parse a complete locale identifier. Returns a tuple of its
    LanguageIdentifier and its ExtensionsMap.

    >>> langid, extensions = parse_locale('en-US-u-ca-gregory')
    >>> langid
    LanguageIdentifier(language='en', region='US')
    >>> extensions
    ExtensionsMap.parse('-u-ca-gregory')
    """
    if not tag:
        return LanguageIdentifier(), ExtensionsMap()
    subtag_list = split_subtags(tag)
    check_subtags(subtag_list)
    subtags = SubtagIterator(subtag_list)
    langid = LanguageIdentifier.from_subtags(subtags)
    extensions = ExtensionsMap.try_from_iter(subtags)
    logger.debug("Parsed locale %r as %s%s", tag, langid, extensions)
    return langid, extensions


def _max_values(ext_type):
    ext_list = EXTENSION_LISTS.get(ext_type)
    if ext_list is None:
        return 0
    return ext_list.MAX_VALUES


def _is_key(ext_type, subtag):
    ext_list = EXTENSION_LISTS.get(ext_type)
    return ext_list is not None and ext_list.is_key(subtag)


def _flush(result, ext_type, key, values):
    """
    Store a key, and the values collected for it, in the extension of the
    given type.
    """
    if _is_key(ext_type, key):
        existing = (result.unicode if ext_type == ExtensionType.UNICODE
                    else result.transform)
        if key in existing:
            raise InvalidExtension(
                "The extension key %r appears more than once" % key
            )
    value = '-'.join(values) if values else None
    try:
        result.set_value(ext_type, key, value)
    except ParserError as err:
        raise InvalidExtension(str(err)) from err


def parse_extension_subtags(text: str) -> ExtensionsMap:
    """
    Parse a string of extensions as a stream of keys and values.

    A singleton selects the type of extension. After that, each subtag that
    the extension recognizes as a key starts a new key, and the subtags that
    follow it are its values, up to the MAX_VALUES of that type of extension.
    A subtag that can't be a value is stored on its own, as a key with no
    value: that's how Unicode attributes, the source language of a transform
    extension, and the subtags of private use and other extensions are read.

    >>> parse_extension_subtags('-u-foo').get_unicode().attributes
    ['foo']
    """
    result = ExtensionsMap()
    state = AWAITING_TYPE
    current_type = None
    current_key = None
    values = []
    seen = set()
    section_size = 0

    for subtag in extension_subtags(text):
        # Private use extensions take every subtag after them, singletons
        # included
        if len(subtag) == 1 and current_type != ExtensionType.PRIVATE:
            if state == HAVE_KEY:
                _flush(result, current_type, current_key, values)
            if current_type is not None and section_size == 0:
                raise InvalidExtension(
                    "The subtag %r must be followed by something"
                    % str(current_type)
                )
            current_type = ExtensionType.from_byte(subtag)
            if current_type in seen:
                raise InvalidExtension(
                    "The extension %r appears more than once" % subtag
                )
            seen.add(current_type)
            logger.debug("Reading extension %r as keys and values", subtag)
            state = AWAITING_KEY
            current_key = None
            values = []
            section_size = 0
            continue

        if state == AWAITING_TYPE:
            subtag_error(subtag, 'an extension singleton')
        section_size += 1

        max_values = _max_values(current_type)
        if _is_key(current_type, subtag):
            if state == HAVE_KEY:
                _flush(result, current_type, current_key, values)
            state = HAVE_KEY
            current_key = subtag
            values = []
        elif state == HAVE_KEY and (max_values is None
                                    or len(values) < max_values):
            values.append(subtag)
        else:
            if state == HAVE_KEY:
                _flush(result, current_type, current_key, values)
            _flush(result, current_type, subtag, [])
            state = AWAITING_KEY
            current_key = None
            values = []

    if state == HAVE_KEY:
        _flush(result, current_type, current_key, values)
    if current_type is not None and section_size == 0:
        raise InvalidExtension(
            "The subtag %r must be followed by something" % str(current_type)
        )
    return result
