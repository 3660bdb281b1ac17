"""
Extensions attach extra information to a language identifier, in sections
that each start with a *singleton*, a one-character subtag. There are four
types of extensions:

- Unicode extensions, marked with 'u'
- Transform extensions, marked with 't'
- Private use extensions, marked with 'x'
- Other extensions, marked with any other letter or digit

An ExtensionsMap holds all the extensions of a locale, and puts them back
together in a canonical order: transform, Unicode, other extensions in order
of their singletons, and private use last.

>>> ext = ExtensionsMap.parse('-U-CA-Gregory-t-xxxx-x-private')
>>> str(ext)
'-t-xxxx-u-ca-gregory-x-private'
>>> ext.get_unicode().get('ca')
['gregory']
"""
import functools
import logging

from ..tag_parser import (
    SEPARATORS, SubtagIterator, normalize_characters, is_alphanum,
    check_subtags, subtag_error
)
from ..errors import InvalidExtension
from .unicode import UnicodeExtensionKey, UnicodeExtensionList
from .transform import TransformExtensionList
from .private import PrivateExtensionList

logger = logging.getLogger(__name__)

# The order of the groups of extensions in a canonical tag
_TRANSFORM_RANK, _UNICODE_RANK, _OTHER_RANK, _PRIVATE_RANK = range(4)


@functools.total_ordering
class ExtensionType:
    """
    The type of an extension, identified by its singleton. The three types
    with special meanings are available as `ExtensionType.UNICODE`,
    `ExtensionType.TRANSFORM` and `ExtensionType.PRIVATE`. Any other singleton
    makes an "other" extension type.

    >>> ExtensionType.from_byte(b'U')
    ExtensionType.UNICODE
    >>> ExtensionType.from_byte('a')
    ExtensionType('a')
    >>> sorted([ExtensionType.PRIVATE, ExtensionType('a'),
    ...         ExtensionType.UNICODE, ExtensionType.TRANSFORM])
    [ExtensionType.TRANSFORM, ExtensionType.UNICODE, ExtensionType('a'), ExtensionType.PRIVATE]
    """
    __slots__ = ('letter',)

    _NAMES = {'u': 'UNICODE', 't': 'TRANSFORM', 'x': 'PRIVATE'}
    _RANKS = {'t': _TRANSFORM_RANK, 'u': _UNICODE_RANK, 'x': _PRIVATE_RANK}

    def __init__(self, letter):
        if (len(letter) != 1 or not is_alphanum(letter)
                or letter != letter.lower()):
            raise InvalidExtension(
                "Expected a lowercase extension singleton, got %r" % letter
            )
        self.letter = letter

    @classmethod
    def from_byte(cls, byte) -> 'ExtensionType':
        """
        Get the type of extension that a singleton starts. The singleton can
        be given as a byte value, a one-byte bytes object, or a one-character
        string, in either case.

        >>> ExtensionType.from_byte(ord('x'))
        ExtensionType.PRIVATE
        >>> ExtensionType.from_byte('-')
        Traceback (most recent call last):
            ...
        localetags.errors.InvalidExtension: Expected an extension singleton, got '-'
        """
        if isinstance(byte, int):
            char = chr(byte) if 0 <= byte < 128 else ''
        elif isinstance(byte, bytes):
            char = byte.decode('ascii') if byte.isascii() else ''
        else:
            char = byte
        if len(char) != 1 or not is_alphanum(char):
            raise InvalidExtension(
                "Expected an extension singleton, got %r" % (byte,)
            )
        return cls(char.lower())

    @property
    def is_other(self) -> bool:
        return self.letter not in self._NAMES

    def _sort_key(self):
        return (self._RANKS.get(self.letter, _OTHER_RANK), self.letter)

    def __eq__(self, other):
        if not isinstance(other, ExtensionType):
            return NotImplemented
        return self.letter == other.letter

    def __lt__(self, other):
        if not isinstance(other, ExtensionType):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self):
        return hash(self.letter)

    def __repr__(self):
        if self.is_other:
            return 'ExtensionType(%r)' % self.letter
        return 'ExtensionType.%s' % self._NAMES[self.letter]

    def __str__(self):
        return self.letter


ExtensionType.UNICODE = ExtensionType('u')
ExtensionType.TRANSFORM = ExtensionType('t')
ExtensionType.PRIVATE = ExtensionType('x')

# The classes that hold each type of extension, except for "other" types,
# which are plain lists of subtags
EXTENSION_LISTS = {
    ExtensionType.UNICODE: UnicodeExtensionList,
    ExtensionType.TRANSFORM: TransformExtensionList,
    ExtensionType.PRIVATE: PrivateExtensionList,
}


def is_other_subtag(subtag):
    return is_alphanum(subtag, 2, 8)


def extension_subtags(text):
    """
    Split a string of extensions into its subtags. The string may start with
    a separator, as the string form of an ExtensionsMap does.

    >>> extension_subtags('-u-ca-Gregory')
    ['u', 'ca', 'gregory']
    >>> extension_subtags('')
    []
    """
    if text and text[0] in SEPARATORS:
        text = text[1:]
    if not text:
        return []
    subtags = normalize_characters(text).split('-')
    check_subtags(subtags)
    return subtags


class ExtensionsMap:
    """
    All the extensions of a locale: one list for each of the Unicode,
    transform and private use extensions, and a dictionary from singleton
    letters to the subtags of any other extensions.
    """
    def __init__(self, unicode=None, transform=None, private=None,
                 other=None):
        if unicode is None:
            unicode = UnicodeExtensionList()
        if transform is None:
            transform = TransformExtensionList()
        if private is None:
            private = PrivateExtensionList()
        self.unicode = unicode
        self.transform = transform
        self.private = private
        self.other = {letter: list(subtags)
                      for letter, subtags in (other or {}).items()}

    @classmethod
    def from_bytes(cls, data: bytes) -> 'ExtensionsMap':
        """
        Parse extensions from ASCII bytes.

        Each byte is read as one character, so a non-ASCII byte where a
        singleton belongs is reported as a bad singleton. Non-ASCII bytes in
        longer subtags are invalid subtags.

        >>> ExtensionsMap.from_bytes(b'').is_empty()
        True
        >>> ExtensionsMap.from_bytes(b'-\\xe9-foo')
        Traceback (most recent call last):
            ...
        localetags.errors.InvalidExtension: Expected an extension singleton, got 'é'
        """
        text = data.decode('latin-1')
        for subtag in extension_subtags(text):
            if len(subtag) > 1 and not subtag.isascii():
                subtag_error(subtag, 'an ASCII subtag')
        return cls.parse(text)

    @classmethod
    def parse(cls, text: str) -> 'ExtensionsMap':
        """
        Parse a string that contains only extensions, such as
        '-u-ca-buddhist-x-foo'.
        """
        return cls.try_from_iter(SubtagIterator(extension_subtags(text)))

    from_str = parse

    @classmethod
    def try_from_iter(cls, subtags: SubtagIterator) -> 'ExtensionsMap':
        """
        Parse extensions from a SubtagIterator, which must be positioned on a
        singleton. This consumes the rest of the iterator.

        Each singleton is looked up, and the subtags that follow it are
        handed to the parser for that type of extension, which stops at the
        next singleton.

        >>> ExtensionsMap.parse('ca-gregory')
        Traceback (most recent call last):
            ...
        localetags.errors.InvalidSubtag: Expected an extension singleton, got 'ca'
        """
        result = cls()
        seen = set()
        for singleton in subtags:
            if len(singleton) != 1:
                subtag_error(singleton, 'an extension singleton')
            ext_type = ExtensionType.from_byte(singleton)
            if ext_type in seen:
                raise InvalidExtension(
                    "The extension %r appears more than once" % singleton
                )
            seen.add(ext_type)
            if subtags.at_end() or (subtags.at_singleton()
                                    and ext_type != ExtensionType.PRIVATE):
                raise InvalidExtension(
                    "The subtag %r must be followed by something" % singleton
                )

            logger.debug("Parsing extension %r from %r", singleton, subtags)
            if ext_type == ExtensionType.UNICODE:
                result.unicode = UnicodeExtensionList.try_from_iter(subtags)
            elif ext_type == ExtensionType.TRANSFORM:
                result.transform = TransformExtensionList.try_from_iter(subtags)
            elif ext_type == ExtensionType.PRIVATE:
                result.private = PrivateExtensionList.try_from_iter(subtags)
            else:
                while not subtags.at_end() and not subtags.at_singleton():
                    result.set_other_value(ext_type.letter, next(subtags))
        return result

    def set_value(self, ext_type: ExtensionType, key, value=None):
        """
        Set a value in the extension of the given type. What the key and value
        mean depends on the type of extension.
        """
        if ext_type == ExtensionType.UNICODE:
            self.set_unicode_value(key, value)
        elif ext_type == ExtensionType.TRANSFORM:
            self.set_transform_value(key, value)
        elif ext_type == ExtensionType.PRIVATE:
            self.set_private_value(key, value)
        else:
            self.set_other_value(ext_type.letter, key, value)

    def set_unicode_value(self, key, value=None):
        """
        Set a keyword of the Unicode extension, or add an attribute if the key
        is not shaped like a keyword key.

        >>> ext = ExtensionsMap()
        >>> ext.set_unicode_value(UnicodeExtensionKey('ca'), 'buddhist')
        >>> str(ext)
        '-u-ca-buddhist'
        """
        self.unicode.set_value(key, value)

    def set_transform_value(self, key, value=None):
        self.transform.set_value(key, value)

    def set_private_value(self, key, value=None):
        self.private.set_value(key, value)

    def set_other_value(self, letter, key, value=None):
        """
        Append subtags to the extension with the singleton `letter`, which
        must not be one of the singletons with a special meaning.

        >>> ext = ExtensionsMap()
        >>> ext.set_other_value('b', 'foo', 'bar')
        >>> ext.get_other()
        {'b': ['foo', 'bar']}
        """
        ext_type = ExtensionType.from_byte(letter)
        if not ext_type.is_other:
            raise InvalidExtension(
                "The singleton %r isn't for an other extension" % letter
            )
        new_subtags = [key]
        if value is not None:
            new_subtags.extend(value.split('-'))
        for subtag in new_subtags:
            if not is_other_subtag(subtag):
                raise InvalidExtension(
                    "Expected an extension subtag, got %r" % subtag
                )
        self.other.setdefault(ext_type.letter, []).extend(
            subtag.lower() for subtag in new_subtags
        )

    def get_unicode(self) -> UnicodeExtensionList:
        return self.unicode

    def get_transform(self) -> TransformExtensionList:
        return self.transform

    def get_private(self) -> PrivateExtensionList:
        return self.private

    def get_other(self) -> dict:
        return self.other

    def is_empty(self) -> bool:
        return (self.unicode.is_empty() and self.transform.is_empty()
                and self.private.is_empty() and not self.other)

    def __bool__(self):
        return not self.is_empty()

    def __eq__(self, other):
        if not isinstance(other, ExtensionsMap):
            return NotImplemented
        return (self.unicode == other.unicode
                and self.transform == other.transform
                and self.private == other.private
                and self.other == other.other)

    __hash__ = None

    def __repr__(self):
        return 'ExtensionsMap.parse(%r)' % str(self)

    def __str__(self):
        # transform and unicode come first, then other extensions by
        # singleton, and private use is always last
        sections = [str(self.transform), str(self.unicode)]
        for letter in sorted(self.other):
            sections.append('-' + '-'.join([letter] + self.other[letter]))
        sections.append(str(self.private))
        return ''.join(sections)
