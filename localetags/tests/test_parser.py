import pytest

from localetags import (
    ExtensionsMap, LanguageIdentifier, ParserError, InvalidExtension,
    InvalidLanguage, InvalidSubtag
)
from localetags.parser import parse_locale, parse_extension_subtags
from localetags.extensions.unicode import UnicodeExtensionList


VALID_EXTENSIONS = [
    '',
    '-u-ca-gregory',
    '-u-foo',
    '-u-foo-bar-ca-buddhist',
    '-u-ca-islamic-civil-nu-arab',
    '-u-ca',
    '-u-ca-co-phonebk',
    '-U-CA-TRUE',
    '-t-xxxx-u-ca-gregory',
    '-u-ca-gregory-t-xxxx',
    '-t-und-cyrl-m0-ungegn-2007',
    '-t-en-us-h0-hybrid',
    '-t-h0-hybrid',
    '-x-pig-latin',
    '-x-foo-u-ca-gregory',
    '-a-foo-bar-z-baz',
    '-u-co-phonebk-a-foo-x-a-b-c',
]

INVALID_EXTENSIONS = [
    'ca-gregory',
    '-u',
    '-u-x-foo',
    '-!-foo',
    '-u-ca--gregory',
    '-u-ca-11',
    '-u-11',
    '-u-ca-gregory-u-nu-latn',
    '-u-ca-gregory-ca-buddhist',
    '-t-h0',
    '-t-h0-hybrid-en',
    '-t-en-fonipa-us',
    '-a-b',
    '-x',
]


@pytest.mark.parametrize('text', VALID_EXTENSIONS)
def test_parsers_agree(text):
    by_section = ExtensionsMap.parse(text)
    by_key = parse_extension_subtags(text)
    assert by_key == by_section
    assert str(by_key) == str(by_section)


@pytest.mark.parametrize('text', INVALID_EXTENSIONS)
def test_parsers_reject_the_same_input(text):
    with pytest.raises(ParserError) as by_section:
        ExtensionsMap.parse(text)
    with pytest.raises(ParserError) as by_key:
        parse_extension_subtags(text)
    assert by_section.type is by_key.type


def test_key_with_no_value():
    ext = parse_extension_subtags('-u-foo')
    assert ext.get_unicode().attributes == ['foo']
    ext = parse_extension_subtags('-u-ca-x-foo')
    assert ext.get_unicode().get('ca') == []
    assert ext.get_private().subtags == ['foo']


def test_value_before_singleton():
    with pytest.raises(InvalidSubtag):
        parse_extension_subtags('ca-gregory')


def test_unknown_singleton():
    with pytest.raises(InvalidExtension):
        parse_extension_subtags('-u-ca-gregory-$-foo')


def test_limited_values(monkeypatch):
    # With one value per key, a second value can only be an attribute
    monkeypatch.setattr(UnicodeExtensionList, 'MAX_VALUES', 1)
    ext = parse_extension_subtags('-u-ca-islamic-civil')
    assert ext.get_unicode().get('ca') == ['islamic']
    assert ext.get_unicode().attributes == ['civil']


def test_parse_locale():
    langid, extensions = parse_locale('en-Latn-US-u-ca-gregory-x-foo')
    assert langid == LanguageIdentifier.from_parts('en', 'Latn', 'US')
    assert str(extensions) == '-u-ca-gregory-x-foo'

    langid, extensions = parse_locale('de_DE')
    assert str(langid) == 'de-DE'
    assert extensions.is_empty()

    langid, extensions = parse_locale('')
    assert str(langid) == 'und'
    assert extensions.is_empty()


@pytest.mark.parametrize('tag, error', [
    ('x-foo', InvalidLanguage),
    ('u-ca-gregory', InvalidLanguage),
    ('e', InvalidLanguage),
    ('en--us', InvalidSubtag),
    ('en-us-latn', InvalidSubtag),
    ('en-us-ca-gregory', InvalidSubtag),
    ('en-a', InvalidExtension),
    ('en-%-foo', InvalidExtension),
    ('en-u-ca-gregory-u-nu-latn', InvalidExtension),
])
def test_parse_locale_errors(tag, error):
    with pytest.raises(error):
        parse_locale(tag)
