"""
Private use extensions, marked with the singleton 'x', hold codes that have
no meaning outside of an agreement between the parties using them.

The private use extension is always the last one in a tag. Everything after
the 'x' belongs to it, even subtags that look like singletons.

>>> from localetags.tag_parser import SubtagIterator
>>> str(PrivateExtensionList.try_from_iter(SubtagIterator(['pig', 'u', 'latin'])))
'-x-pig-u-latin'
"""
from ..tag_parser import is_alphanum
from ..errors import InvalidExtension


class PrivateExtensionList:
    SINGLETON = 'x'

    # Private use subtags are never grouped into keys and values
    MAX_VALUES = 0

    def __init__(self, subtags=()):
        self.subtags = list(subtags)

    @staticmethod
    def is_key(subtag):
        return False

    @classmethod
    def try_from_iter(cls, subtags) -> 'PrivateExtensionList':
        """
        Parse the subtags of a private use extension from a SubtagIterator,
        which consumes all the rest of it.
        """
        result = cls()
        for subtag in subtags:
            result.set_value(subtag)
        return result

    def set_value(self, key, value=None):
        """
        Append a subtag, and optionally more subtags that follow it, to the
        private use extension.

        >>> ext = PrivateExtensionList()
        >>> ext.set_value('Foo', 'bar-1')
        >>> ext.subtags
        ['foo', 'bar', '1']
        """
        new_subtags = [key]
        if value is not None:
            new_subtags.extend(value.split('-'))
        for subtag in new_subtags:
            if not is_alphanum(subtag):
                raise InvalidExtension(
                    "Expected a private use subtag, got %r" % subtag
                )
        self.subtags.extend(subtag.lower() for subtag in new_subtags)

    def is_empty(self) -> bool:
        return not self.subtags

    def __eq__(self, other):
        if not isinstance(other, PrivateExtensionList):
            return NotImplemented
        return self.subtags == other.subtags

    def __repr__(self):
        return 'PrivateExtensionList(%r)' % self.subtags

    def __str__(self):
        if self.is_empty():
            return ''
        return '-' + '-'.join([self.SINGLETON] + self.subtags)
