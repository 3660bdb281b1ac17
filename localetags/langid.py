"""
The LanguageIdentifier class: the language, script, region and variants that
start a locale identifier, before any extensions.
"""
from .tag_parser import (
    SubtagIterator, parse, parse_language_subtags, subtag_error,
    is_language_subtag, is_script_subtag, is_region_subtag, is_variant_subtag
)
from .errors import InvalidLanguage


class LanguageIdentifier:
    """
    A LanguageIdentifier has the following attributes, any of which may be
    unspecified (in which case their value is None, or an empty list for
    variants):

    - *language*: the code for the language itself. The undetermined
      language, 'und', is represented as None.
    - *script*: the 4-letter code for the writing system being used.
    - *region*: the 2-letter or 3-digit code for the country or similar region
      whose usage of the language appears in this text.
    - *variants*: codes for specific variations of language usage that aren't
      covered by the *script* or *region* codes. They're kept in sorted order
      without duplicates.

    Use `LanguageIdentifier.parse` to get one from a string, or
    `LanguageIdentifier.from_parts` to build one from separate subtags.

    >>> LanguageIdentifier.parse('en-us')
    LanguageIdentifier(language='en', region='US')

    >>> LanguageIdentifier.parse('sl-rozaj-biske-1994')
    LanguageIdentifier(language='sl', variants=['1994', 'biske', 'rozaj'])

    >>> str(LanguageIdentifier.parse('und-Hant'))
    'und-Hant'
    """

    ATTRIBUTES = ['language', 'script', 'region', 'variants']

    def __init__(self, language=None, script=None, region=None,
                 variants=None):
        """
        Create a LanguageIdentifier from subtags that have already been
        validated and normalized. Use `from_parts` if they haven't been.
        """
        self.language = language
        self.script = script
        self.region = region
        self.variants = sorted(set(variants or ()))

    @classmethod
    def parse(cls, tag: str) -> 'LanguageIdentifier':
        """
        Parse a string containing just a language identifier, with no
        extensions.

        >>> LanguageIdentifier.parse('zh_hant_TW')
        LanguageIdentifier(language='zh', script='Hant', region='TW')

        >>> LanguageIdentifier.parse('')
        LanguageIdentifier()

        >>> LanguageIdentifier.parse('en-u-ca-gregory')
        Traceback (most recent call last):
            ...
        localetags.errors.InvalidSubtag: Expected end of string, got 'u'
        """
        return cls._from_components(parse(tag))

    @classmethod
    def from_subtags(cls, subtags: SubtagIterator) -> 'LanguageIdentifier':
        """
        Parse a language identifier from the start of a SubtagIterator,
        leaving the iterator on the first singleton after it.
        """
        return cls._from_components(parse_language_subtags(subtags))

    @classmethod
    def _from_components(cls, components):
        data = {}
        for typ, value in components:
            if typ == 'variant':
                data.setdefault('variants', []).append(value)
            elif typ == 'language':
                if value != 'und':
                    data['language'] = value
            else:
                data[typ] = value
        return cls(**data)

    @classmethod
    def from_parts(cls, language=None, script=None, region=None,
                   variants=()) -> 'LanguageIdentifier':
        """
        Build a LanguageIdentifier from separate subtags, checking that each
        of them has the right form and normalizing their case.

        >>> LanguageIdentifier.from_parts('EN', None, 'gb', ['oxendict'])
        LanguageIdentifier(language='en', region='GB', variants=['oxendict'])

        >>> LanguageIdentifier.from_parts('en', 'Latin')
        Traceback (most recent call last):
            ...
        localetags.errors.InvalidSubtag: Expected a script code, got 'Latin'
        """
        langid = cls()
        langid.set_language(language)
        langid.set_script(script)
        langid.set_region(region)
        langid.set_variants(variants)
        return langid

    @classmethod
    def from_raw_parts_unchecked(cls, language, script, region, variants):
        """
        Build a LanguageIdentifier from the output of `to_raw_parts`. The
        subtags are trusted to be valid and normalized already.
        """
        return cls(language, script, region, variants)

    def to_raw_parts(self):
        """
        Get the subtags of this LanguageIdentifier as a plain tuple, which
        `from_raw_parts_unchecked` turns back into an equal object.

        >>> LanguageIdentifier.parse('pt-BR').to_raw_parts()
        ('pt', None, 'BR', ())
        """
        return (self.language, self.script, self.region, tuple(self.variants))

    def get_language(self) -> str:
        return self.language or 'und'

    def set_language(self, language):
        if language is None or language.lower() == 'und':
            self.language = None
        elif is_language_subtag(language):
            self.language = language.lower()
        else:
            subtag_error(language, 'a language code', InvalidLanguage)

    def get_script(self):
        return self.script

    def set_script(self, script):
        if script is None:
            self.script = None
        elif is_script_subtag(script):
            self.script = script.title()
        else:
            subtag_error(script, 'a script code')

    def get_region(self):
        return self.region

    def set_region(self, region):
        if region is None:
            self.region = None
        elif is_region_subtag(region):
            self.region = region.upper()
        else:
            subtag_error(region, 'a region code')

    def get_variants(self) -> list:
        return list(self.variants)

    def set_variants(self, variants):
        for variant in variants:
            if not is_variant_subtag(variant):
                subtag_error(variant, 'a variant')
        self.variants = sorted({variant.lower() for variant in variants})

    def matches(self, other: 'LanguageIdentifier', self_as_range=False,
                other_as_range=False) -> bool:
        """
        Compare two language identifiers. A side that is treated as a range
        matches anything in the subtags it leaves unspecified.

        >>> en = LanguageIdentifier.parse('en')
        >>> en_us = LanguageIdentifier.parse('en-US')
        >>> en.matches(en_us)
        False
        >>> en.matches(en_us, self_as_range=True)
        True
        >>> en_us.matches(en, self_as_range=True)
        False
        """
        return (
            _subtag_matches(self.language, other.language,
                            self_as_range, other_as_range)
            and _subtag_matches(self.script, other.script,
                                self_as_range, other_as_range)
            and _subtag_matches(self.region, other.region,
                                self_as_range, other_as_range)
            and _subtag_matches(self.variants or None, other.variants or None,
                                self_as_range, other_as_range)
        )

    def to_tag(self) -> str:
        """
        Convert a LanguageIdentifier back to a standard language tag, as a
        string. This is also the str() representation.

        >>> LanguageIdentifier.from_parts('yue', 'Hant', 'HK').to_tag()
        'yue-Hant-HK'

        >>> LanguageIdentifier.from_parts(region='IN').to_tag()
        'und-IN'
        """
        subtags = [self.get_language()]
        if self.script:
            subtags.append(self.script)
        if self.region:
            subtags.append(self.region)
        subtags.extend(self.variants)
        return '-'.join(subtags)

    def to_dict(self):
        """
        Get a dictionary of the attributes of this LanguageIdentifier that
        are specified.
        """
        result = {}
        for key in self.ATTRIBUTES:
            value = getattr(self, key)
            if value:
                result[key] = value
        return result

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, LanguageIdentifier):
            return NotImplemented
        return self.to_raw_parts() == other.to_raw_parts()

    # Identifiers can be changed in place, so they aren't hashable
    __hash__ = None

    def __repr__(self):
        items = []
        for attr, value in self.to_dict().items():
            items.append('{0}={1!r}'.format(attr, value))
        return "LanguageIdentifier({})".format(', '.join(items))

    def __str__(self):
        return self.to_tag()


def _subtag_matches(subtag1, subtag2, as_range1, as_range2):
    return ((as_range1 and subtag1 is None)
            or (as_range2 and subtag2 is None)
            or subtag1 == subtag2)
