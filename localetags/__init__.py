"""
localetags parses locale identifiers, such as 'en-US-u-ca-gregory' or
'de-t-en-h0-hybrid', and puts them back together in a canonical form.

A locale identifier is a BCP 47 language tag: a language identifier (the
language, script, region and variants), followed by extensions. Extensions
carry extra information in sections that each start with a singleton: 'u' for
Unicode locale preferences, 't' for transformed content, 'x' for private use,
and any other letter for extensions that haven't been given a meaning here.

>>> locale = Locale.get('EN_us-U-CA-gregory-x-Pig-Latin')
>>> str(locale)
'en-US-u-ca-gregory-x-pig-latin'

For more specific documentation on the classes and functions in localetags,
scroll down and read the docstrings.
"""
from .errors import (
    LanguageTagError, ParserError, InvalidLanguage, InvalidSubtag,
    InvalidExtension
)
from .langid import LanguageIdentifier
from .extensions import ExtensionType, ExtensionsMap
from .extensions.unicode import UnicodeExtensionKey
from .parser import parse_locale, parse_extension_subtags


class Locale:
    """
    A Locale is a LanguageIdentifier together with an ExtensionsMap, which
    are available as the attributes *langid* and *extensions*.

    The `Locale.get` method converts a string to a Locale. It's also
    available at the top level of this module as the `get` function.

    Locales can be changed in place, using the setters for each part.

    >>> locale = Locale.get('sr-Latn')
    >>> locale.set_region('rs')
    >>> locale.set_extension(ExtensionType.UNICODE, 'nu', 'latn')
    >>> locale
    Locale.get('sr-Latn-RS-u-nu-latn')
    """

    def __init__(self, langid=None, extensions=None):
        if langid is None:
            langid = LanguageIdentifier()
        if extensions is None:
            extensions = ExtensionsMap()
        self.langid = langid
        self.extensions = extensions

    @staticmethod
    def get(tag: str) -> 'Locale':
        """
        Create a Locale object from a locale identifier string.

        >>> Locale.get('en-US')
        Locale.get('en-US')

        >>> Locale.get('zh-hant-u-nu-hanidec')
        Locale.get('zh-Hant-u-nu-hanidec')

        Extensions come out in a canonical order: transform, Unicode, other
        extensions, and private use.

        >>> Locale.get('ja-u-ca-japanese-t-it-b-foo-x-private')
        Locale.get('ja-t-it-u-ca-japanese-b-foo-x-private')

        >>> Locale.get('en-US-u-ca-gregory-u-nu-latn')
        Traceback (most recent call last):
            ...
        localetags.errors.InvalidExtension: The extension 'u' appears more than once
        """
        langid, extensions = parse_locale(tag)
        return Locale(langid, extensions)

    @classmethod
    def from_parts(cls, language=None, script=None, region=None,
                   variants=(), extensions=None) -> 'Locale':
        """
        Build a Locale from separate subtags, and optionally an ExtensionsMap.

        >>> Locale.from_parts('pt', region='br')
        Locale.get('pt-BR')

        >>> Locale.from_parts('pt', region='brazil')
        Traceback (most recent call last):
            ...
        localetags.errors.InvalidSubtag: Expected a region code, got 'brazil'
        """
        langid = LanguageIdentifier.from_parts(language, script, region,
                                               variants)
        return cls(langid, extensions)

    @classmethod
    def from_raw_parts_unchecked(cls, language, script, region, variants,
                                 extensions) -> 'Locale':
        """
        Build a Locale from subtags and an ExtensionsMap that are known to be
        valid, such as the parts of another Locale.
        """
        langid = LanguageIdentifier.from_raw_parts_unchecked(
            language, script, region, variants
        )
        return cls(langid, extensions)

    def to_raw_parts(self):
        """
        Get the parts of this Locale as a tuple of plain values: the
        language, script and region (or None), a tuple of variants, and the
        extensions as a string.

        >>> Locale.get('ca-ES-valencia-u-co-trad').to_raw_parts()
        ('ca', None, 'ES', ('valencia',), '-u-co-trad')
        """
        return self.langid.to_raw_parts() + (str(self.extensions),)

    @classmethod
    def from_language_identifier(cls, langid) -> 'Locale':
        return cls(langid)

    def to_language_identifier(self) -> LanguageIdentifier:
        """
        Get a copy of the language identifier of this Locale. Changing the
        copy doesn't change the Locale.
        """
        return LanguageIdentifier.from_raw_parts_unchecked(
            *self.langid.to_raw_parts()
        )

    def matches(self, other: 'Locale', self_as_range=False,
                other_as_range=False) -> bool:
        """
        Check whether two locales match, according to the `matches` method of
        their language identifiers. Locales with private use extensions only
        mean something to whoever made them up, so they never match.

        >>> en = Locale.get('en')
        >>> en.matches(Locale.get('en-GB-u-ca-gregory'), self_as_range=True)
        True
        >>> en.matches(Locale.get('en-GB-x-foo'), self_as_range=True)
        False
        """
        if (not self.extensions.get_private().is_empty()
                or not other.extensions.get_private().is_empty()):
            return False
        return self.langid.matches(other.langid, self_as_range,
                                   other_as_range)

    def get_language(self) -> str:
        return self.langid.get_language()

    def set_language(self, language):
        self.langid.set_language(language)

    def get_script(self):
        return self.langid.get_script()

    def set_script(self, script):
        self.langid.set_script(script)

    def get_region(self):
        return self.langid.get_region()

    def set_region(self, region):
        self.langid.set_region(region)

    def get_variants(self) -> list:
        return self.langid.get_variants()

    def set_variants(self, variants):
        self.langid.set_variants(variants)

    def set_extension(self, extension, key, value=None):
        """
        Set a value in one of the extensions of this Locale. `extension` is
        an ExtensionType, or a singleton string such as 'u'.

        For Unicode extensions, `key` must be a keyword key. For transform
        extensions, it's a field key, or a subtag to add to the source
        language. Private use and other extensions simply get `key` and
        `value` added to their subtags.

        >>> locale = Locale.get('de')
        >>> locale.set_extension('u', 'co', 'phonebk')
        >>> locale.set_extension('t', 'en')
        >>> locale.set_extension('x', 'foo')
        >>> str(locale)
        'de-t-en-u-co-phonebk-x-foo'

        >>> locale.set_extension('u', 'collation', 'phonebk')
        Traceback (most recent call last):
            ...
        localetags.errors.InvalidExtension: Expected a Unicode extension key, got 'collation'
        """
        if not isinstance(extension, ExtensionType):
            extension = ExtensionType.from_byte(extension)
        if extension == ExtensionType.UNICODE:
            key = UnicodeExtensionKey(key)
        self.extensions.set_value(extension, key, value)

    def get_extensions(self) -> ExtensionsMap:
        return self.extensions

    def to_tag(self) -> str:
        """
        Convert a Locale back to a standard locale identifier, as a string.
        This is also the str() representation of a Locale object.

        >>> Locale.get('und-u-hc-h23').to_tag()
        'und-u-hc-h23'
        """
        return str(self.langid) + str(self.extensions)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Locale):
            return NotImplemented
        return (self.langid == other.langid
                and self.extensions == other.extensions)

    # Locales can be changed in place, so they aren't hashable
    __hash__ = None

    def __repr__(self):
        return 'Locale.get(%r)' % self.to_tag()

    def __str__(self):
        return self.to_tag()


def canonicalize(tag: str) -> str:
    """
    Parse a locale identifier and return it in its canonical form.

    >>> canonicalize('EN_us')
    'en-US'
    >>> canonicalize('de-u-co-phonebk-ka-shifted-t-en')
    'de-t-en-u-co-phonebk-ka-shifted'
    """
    return Locale.get(tag).to_tag()


# Make the get() function available at the top level
get = Locale.get
