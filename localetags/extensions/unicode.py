"""
Unicode extensions, marked with the singleton 'u', carry locale preferences
defined by the Unicode CLDR, such as a calendar or a collation order. They're
described in section 3.6 of UTS #35:
    http://unicode.org/reports/tr35/#Unicode_locale_identifier

A Unicode extension contains optional *attributes*, followed by *keywords*.
Each keyword is a two-character key, followed by any number of values.

>>> from localetags.tag_parser import SubtagIterator
>>> ext = UnicodeExtensionList.try_from_iter(
...     SubtagIterator(['ca', 'islamic', 'civil', 'hc', 'h12'])
... )
>>> ext.get('ca')
['islamic', 'civil']
>>> str(ext)
'-u-ca-islamic-civil-hc-h12'
"""
from ..tag_parser import is_alpha, is_alphanum
from ..errors import InvalidExtension


def is_unicode_key(subtag):
    """
    Unicode keys are an alphanumeric character followed by a letter, such as
    'ca' or '0a'. Transform keys are the other way around, such as 'h0'.

    >>> is_unicode_key('ca')
    True
    >>> is_unicode_key('h0')
    False
    """
    return len(subtag) == 2 and is_alphanum(subtag) and is_alpha(subtag[1])


def is_unicode_value(subtag):
    return is_alphanum(subtag, 3, 8)


class UnicodeExtensionKey(str):
    """
    The key of a Unicode extension keyword. It's a str, checked to have the
    right form and lowercased.

    >>> UnicodeExtensionKey('CA')
    UnicodeExtensionKey('ca')

    >>> UnicodeExtensionKey('calendar')
    Traceback (most recent call last):
        ...
    localetags.errors.InvalidExtension: Expected a Unicode extension key, got 'calendar'
    """
    def __new__(cls, key):
        if not is_unicode_key(key):
            raise InvalidExtension(
                "Expected a Unicode extension key, got %r" % key
            )
        return super().__new__(cls, key.lower())

    def __repr__(self):
        return 'UnicodeExtensionKey(%s)' % str.__repr__(self)


class UnicodeExtensionList:
    SINGLETON = 'u'

    # The number of value subtags a key can take; None means no limit
    MAX_VALUES = None

    def __init__(self, attributes=(), keywords=None):
        self.attributes = sorted(set(attributes))
        self.keywords = {key: list(values)
                         for key, values in (keywords or {}).items()}

    is_key = staticmethod(is_unicode_key)

    @classmethod
    def try_from_iter(cls, subtags) -> 'UnicodeExtensionList':
        """
        Parse the subtags of a Unicode extension from a SubtagIterator,
        stopping at the next singleton.
        """
        result = cls()
        key = None
        values = []
        while not subtags.at_end() and not subtags.at_singleton():
            subtag = next(subtags)
            if is_unicode_key(subtag):
                if key is not None:
                    result.set_value(key, values)
                if subtag in result:
                    raise InvalidExtension(
                        "The Unicode extension key %r appears more than once"
                        % subtag
                    )
                key = UnicodeExtensionKey(subtag)
                values = []
            elif key is None:
                result.add_attribute(subtag)
            else:
                values.append(subtag)
        if key is not None:
            result.set_value(key, values)
        return result

    def add_attribute(self, attribute):
        attribute = attribute.lower()
        if not is_unicode_value(attribute):
            raise InvalidExtension(
                "Expected a Unicode extension attribute, got %r" % attribute
            )
        if attribute not in self.attributes:
            self.attributes.append(attribute)
            self.attributes.sort()

    def set_value(self, key, value=None):
        """
        Set the values of a keyword, replacing any values it had.

        `value` can be a string of one or more subtags, a list of subtags, or
        None for a key with no value. If `key` isn't shaped like a key, then
        it's an attribute, which can't have a value.

        >>> ext = UnicodeExtensionList()
        >>> ext.set_value('co', 'phonebk')
        >>> ext.set_value('ca', 'TRUE')
        >>> ext.set_value('foo')
        >>> str(ext)
        '-u-foo-ca-co-phonebk'
        """
        if not is_unicode_key(key):
            if value:
                raise InvalidExtension(
                    "Expected a Unicode extension key, got %r" % key
                )
            self.add_attribute(key)
            return

        if value is None:
            values = []
        elif isinstance(value, str):
            values = value.split('-')
        else:
            values = list(value)
        values = [val.lower() for val in values]
        for val in values:
            if not is_unicode_value(val):
                raise InvalidExtension(
                    "Expected a Unicode extension value, got %r" % val
                )
        # A value of 'true' is the same as no value at all
        if values == ['true']:
            values = []
        self.keywords[UnicodeExtensionKey(key)] = values

    def get(self, key, default=None):
        return self.keywords.get(key.lower(), default)

    def is_empty(self) -> bool:
        return not self.attributes and not self.keywords

    def __contains__(self, key):
        return key.lower() in self.keywords

    def __eq__(self, other):
        if not isinstance(other, UnicodeExtensionList):
            return NotImplemented
        return (self.attributes == other.attributes
                and self.keywords == other.keywords)

    def __repr__(self):
        return 'UnicodeExtensionList(attributes=%r, keywords=%r)' % (
            self.attributes, self.keywords
        )

    def __str__(self):
        if self.is_empty():
            return ''
        subtags = [self.SINGLETON] + self.attributes
        for key in sorted(self.keywords):
            subtags.append(key)
            subtags.extend(self.keywords[key])
        return '-' + '-'.join(subtags)
