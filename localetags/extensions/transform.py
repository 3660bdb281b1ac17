"""
Transform extensions, marked with the singleton 't', describe content that
has been transformed from another language or script, such as by
transliteration or machine translation. They're defined in RFC 6497:
    https://tools.ietf.org/html/rfc6497

A transform extension starts with an optional language identifier, the
*source* of the transformation, followed by *fields*. Each field is a key made
of a letter and a digit, followed by one or more values.

>>> from localetags.tag_parser import SubtagIterator
>>> ext = TransformExtensionList.try_from_iter(
...     SubtagIterator(['und', 'cyrl', 'm0', 'ungegn', '2007'])
... )
>>> ext.tlang
LanguageIdentifier(script='Cyrl')
>>> ext.get('m0')
['ungegn', '2007']
>>> str(ext)
'-t-und-cyrl-m0-ungegn-2007'
"""
from ..tag_parser import is_alpha, is_digit, is_alphanum
from ..langid import LanguageIdentifier
from ..errors import InvalidExtension, ParserError


def is_transform_key(subtag):
    return len(subtag) == 2 and is_alpha(subtag[0]) and is_digit(subtag[1])


def is_transform_value(subtag):
    return is_alphanum(subtag, 3, 8)


class TransformExtensionList:
    SINGLETON = 't'

    # The number of value subtags a key can take; None means no limit
    MAX_VALUES = None

    def __init__(self, tlang=None, fields=None):
        self.tlang = tlang
        self.fields = {key: list(values)
                       for key, values in (fields or {}).items()}

    is_key = staticmethod(is_transform_key)

    @classmethod
    def try_from_iter(cls, subtags) -> 'TransformExtensionList':
        """
        Parse the subtags of a transform extension from a SubtagIterator,
        stopping at the next singleton.
        """
        result = cls()
        key = None
        values = []
        while not subtags.at_end() and not subtags.at_singleton():
            subtag = next(subtags)
            if is_transform_key(subtag):
                if key is not None:
                    result.set_value(key, values)
                if subtag in result:
                    raise InvalidExtension(
                        "The transform extension key %r appears more than once"
                        % subtag
                    )
                key = subtag
                values = []
            elif key is None:
                result.set_value(subtag)
            else:
                values.append(subtag)
        if key is not None:
            result.set_value(key, values)
        return result

    def set_value(self, key, value=None):
        """
        Set the values of a field, replacing any values it had.

        If `key` isn't shaped like a field key, it's the next subtag of the
        source language, which can't have a value, and has to come before
        all the fields.

        >>> ext = TransformExtensionList()
        >>> ext.set_value('en')
        >>> ext.set_value('CA')
        >>> ext.set_value('h0', 'hybrid')
        >>> str(ext)
        '-t-en-ca-h0-hybrid'

        >>> ext.set_value('h0')
        Traceback (most recent call last):
            ...
        localetags.errors.InvalidExtension: The transform extension key 'h0' needs a value
        """
        key = key.lower()
        if not is_transform_key(key):
            if value:
                raise InvalidExtension(
                    "Expected a transform extension key, got %r" % key
                )
            self._extend_tlang(key)
            return

        if value is None:
            values = []
        elif isinstance(value, str):
            values = value.split('-')
        else:
            values = list(value)
        if not values:
            raise InvalidExtension(
                "The transform extension key %r needs a value" % key
            )
        values = [val.lower() for val in values]
        for val in values:
            if not is_transform_value(val):
                raise InvalidExtension(
                    "Expected a transform extension value, got %r" % val
                )
        self.fields[key] = values

    def _extend_tlang(self, subtag):
        """
        Add a subtag to the end of the source language, checking that the
        result is still a valid language identifier.
        """
        if self.fields:
            raise InvalidExtension(
                "The transform extension subtag %r is out of place" % subtag
            )
        if self.tlang is None:
            tag = subtag
        else:
            tag = '%s-%s' % (self.tlang, subtag)
        try:
            self.tlang = LanguageIdentifier.parse(tag)
        except ParserError as err:
            raise InvalidExtension(
                "Invalid source language in transform extension: %s" % err
            ) from err

    def get(self, key, default=None):
        return self.fields.get(key.lower(), default)

    def is_empty(self) -> bool:
        return self.tlang is None and not self.fields

    def __contains__(self, key):
        return key.lower() in self.fields

    def __eq__(self, other):
        if not isinstance(other, TransformExtensionList):
            return NotImplemented
        return self.tlang == other.tlang and self.fields == other.fields

    def __repr__(self):
        return 'TransformExtensionList(tlang=%r, fields=%r)' % (
            self.tlang, self.fields
        )

    def __str__(self):
        if self.is_empty():
            return ''
        subtags = [self.SINGLETON]
        if self.tlang is not None:
            subtags.append(str(self.tlang).lower())
        for key in sorted(self.fields):
            subtags.append(key)
            subtags.extend(self.fields[key])
        return '-' + '-'.join(subtags)
