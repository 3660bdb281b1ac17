import pytest

import localetags
from localetags import (
    Locale, ExtensionType, ExtensionsMap, LanguageIdentifier,
    InvalidExtension, InvalidSubtag
)


@pytest.mark.parametrize('tag, expected', [
    ('en-US', 'en-US'),
    ('EN_us_U_CA_GREGORY', 'en-US-u-ca-gregory'),
    ('en-US-u-ca-gregory-x-private', 'en-US-u-ca-gregory-x-private'),
    ('de-u-co-phonebk-t-en-h0-hybrid', 'de-t-en-h0-hybrid-u-co-phonebk'),
    ('ja-Jpan-JP-u-ca-japanese-a-foo', 'ja-Jpan-JP-u-ca-japanese-a-foo'),
    ('und', 'und'),
    ('', 'und'),
])
def test_canonicalize(tag, expected):
    assert localetags.canonicalize(tag) == expected
    assert str(localetags.get(tag)) == expected
    # Canonicalizing again doesn't change anything
    assert localetags.canonicalize(expected) == expected


def test_from_parts():
    extensions = ExtensionsMap.parse('-u-ca-buddhist')
    locale = Locale.from_parts('th', None, 'TH', extensions=extensions)
    assert str(locale) == 'th-TH-u-ca-buddhist'
    assert locale.get_extensions() is extensions

    locale = Locale.from_parts('th')
    assert locale.get_extensions().is_empty()
    assert str(locale) == 'th'

    with pytest.raises(InvalidSubtag):
        Locale.from_parts('th', script='thailand')


def test_raw_parts():
    locale = Locale.get('sr-Cyrl-RS-u-nu-latn')
    language, script, region, variants, extensions = locale.to_raw_parts()
    assert (language, script, region, variants) == ('sr', 'Cyrl', 'RS', ())
    assert extensions == '-u-nu-latn'

    rebuilt = Locale.from_raw_parts_unchecked(
        language, script, region, variants, ExtensionsMap.parse(extensions)
    )
    assert rebuilt == locale


def test_language_identifier_conversion():
    langid = LanguageIdentifier.parse('pl-PL')
    locale = Locale.from_language_identifier(langid)
    assert locale.to_language_identifier() == langid
    assert locale.get_extensions().is_empty()
    assert str(locale) == 'pl-PL'


def test_language_identifier_is_a_copy():
    locale = Locale.get('en-US-u-ca-gregory')
    langid = locale.to_language_identifier()
    langid.set_region('GB')
    langid.set_variants(['oxendict'])
    assert str(locale) == 'en-US-u-ca-gregory'
    assert str(langid) == 'en-GB-oxendict'


def test_accessors():
    locale = Locale.get('en-US-u-ca-gregory')
    assert locale.get_language() == 'en'
    assert locale.get_script() is None
    assert locale.get_region() == 'US'
    assert locale.get_variants() == []

    locale.set_language('fr')
    locale.set_script('Latn')
    locale.set_region('ca')
    locale.set_variants(['1694acad'])
    assert str(locale) == 'fr-Latn-CA-1694acad-u-ca-gregory'

    locale.set_language(None)
    assert locale.get_language() == 'und'


def test_set_extension():
    locale = Locale.get('en')
    locale.set_extension(ExtensionType.UNICODE, 'ca', 'buddhist')
    locale.set_extension(ExtensionType.UNICODE, 'ca', 'gregory')
    locale.set_extension(ExtensionType.TRANSFORM, 'und')
    locale.set_extension(ExtensionType.TRANSFORM, 'm0', 'ungegn')
    locale.set_extension('b', 'foo', 'bar')
    locale.set_extension(ExtensionType.PRIVATE, 'priv')
    assert str(locale) == 'en-t-und-m0-ungegn-u-ca-gregory-b-foo-bar-x-priv'

    with pytest.raises(InvalidExtension):
        locale.set_extension(ExtensionType.UNICODE, 'calendar', 'gregory')
    with pytest.raises(InvalidExtension):
        locale.set_extension('$', 'foo')


@pytest.mark.parametrize('self_as_range', [False, True])
@pytest.mark.parametrize('other_as_range', [False, True])
def test_private_never_matches(self_as_range, other_as_range):
    plain = Locale.get('en-US')
    private = Locale.get('en-US-x-foo')
    assert not plain.matches(private, self_as_range, other_as_range)
    assert not private.matches(plain, self_as_range, other_as_range)
    assert not private.matches(private, self_as_range, other_as_range)


def test_matches():
    en = Locale.get('en')
    en_us = Locale.get('en-US-u-ca-gregory')
    assert en.matches(en)
    assert not en.matches(en_us)
    assert en.matches(en_us, self_as_range=True)
    assert en_us.matches(en, other_as_range=True)


def test_equality():
    assert Locale.get('en-u-ca-gregory') == Locale.get('EN-U-CA-GREGORY')
    assert Locale.get('en-u-ca-gregory') != Locale.get('en-u-ca-buddhist')
    assert Locale.get('en-a-foo') != Locale.get('en-b-foo')
    assert Locale.get('en') != 'en'
    with pytest.raises(TypeError):
        hash(Locale.get('en'))
